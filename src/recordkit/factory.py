"""
recordkit.factory  ──  one front door for the three containers.

Usage pattern in user code
--------------------------
    from recordkit import ContainerKind, Recordkit

    user = Recordkit.record({"name": "Aya"})
    tags = Recordkit.collection(["a", "b"], intake=str.upper)
    people = Recordkit.create([{"name": "Aya"}], kind=ContainerKind.KEYED,
                              definitions={"active": True})

Without an explicit ``kind``, ``create`` picks a RecordStore for a mapping
and an OrderedCollection for a list or tuple. A KeyedCollection is only
ever built on request.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Union

from ._utils import is_many, is_mapping
from .core.collection import OrderedCollection
from .core.keyed import KeyedCollection
from .core.record import RecordStore

AnyContainer = Union[RecordStore, OrderedCollection, KeyedCollection]


class ContainerKind(str, Enum):
    RECORD = "record"
    COLLECTION = "collection"
    KEYED = "keyed"


class Recordkit:
    """Namespace of constructors; never instantiated."""

    @staticmethod
    def record(
        initial: Optional[dict] = None, options: Any = None
    ) -> RecordStore:
        return RecordStore(initial, options)

    @staticmethod
    def collection(
        initial: Optional[List[Any]] = None,
        intake: Optional[Callable[[Any], Any]] = None,
        options: Any = None,
    ) -> OrderedCollection:
        return OrderedCollection(initial, intake, options)

    @staticmethod
    def keyed(
        initial: Optional[List[Any]] = None,
        definitions: Optional[Mapping[str, Any]] = None,
        options: Any = None,
    ) -> KeyedCollection:
        return KeyedCollection(initial, definitions, options)

    @classmethod
    def create(
        cls,
        payload: Any = None,
        kind: Union[ContainerKind, str, None] = None,
        *,
        intake: Optional[Callable[[Any], Any]] = None,
        definitions: Optional[Mapping[str, Any]] = None,
        options: Any = None,
    ) -> AnyContainer:
        """Build the container ``kind`` names, or infer it from ``payload``.

        ``intake`` only applies to collections and ``definitions`` only to
        keyed collections; a ``kind`` string is accepted in place of the enum.
        """
        if kind is None:
            kind = cls.kind_of(payload)
        kind = ContainerKind(kind)

        if kind is ContainerKind.RECORD:
            return cls.record(payload, options)
        if kind is ContainerKind.COLLECTION:
            return cls.collection(_as_list(payload), intake, options)
        return cls.keyed(_as_list(payload), definitions, options)

    @staticmethod
    def kind_of(payload: Any) -> ContainerKind:
        if payload is None or is_mapping(payload):
            return ContainerKind.RECORD
        if is_many(payload):
            return ContainerKind.COLLECTION
        raise TypeError(
            f"cannot build a container from {type(payload).__name__!r}; "
            "pass a mapping, a list or an explicit kind"
        )


def _as_list(payload: Any) -> Optional[List[Any]]:
    if isinstance(payload, tuple):
        return list(payload)
    return payload
