"""
RecordStore: one flat mapping of fields with get/put/remove/upsert.

* ``items`` is the caller's dict, kept by reference and mutated in place.
* A stored ``None`` reads as absent, so ``get`` falls back to the default.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional

from recordkit._utils import is_many, is_mapping

from .base import Container
from .options import RecordOptions


def _resolve_default(default: Any, key: str, position: int) -> Any:
    if is_many(default):
        return default[position] if position < len(default) else None
    if is_mapping(default):
        return default.get(key)
    return default


class RecordStore(Container):
    """A single record; mutators are no-ops when read only."""

    kind = "record"
    _mutators = ("put", "remove", "take", "clear", "upsert")
    _options_model = RecordOptions

    def __init__(
        self,
        initial: Optional[Dict[str, Any]] = None,
        options: RecordOptions | Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(options)
        self.items: Dict[str, Any] = initial if initial is not None else {}

    # reads
    def all(self) -> Dict[str, Any]:
        return self.items

    def has(self, key) -> bool:
        if is_many(key):
            return all(k in self.items for k in key)
        return key in self.items

    def get(self, key, default: Any = None) -> Any:
        """Value of ``key``, or a ``{key: value}`` dict when given several keys.

        With several keys a list/tuple default is matched by position, a
        mapping default by key, and anything else is used for every key.
        """
        if is_many(key):
            return {
                k: self.get(k, _resolve_default(default, k, i))
                for i, k in enumerate(key)
            }
        value = self.items.get(key)
        return default if value is None else value

    # writes
    def put(self, key, value: Any = None) -> "RecordStore":
        fields = key if is_mapping(key) else {key: value}
        self.items.update(fields)
        return self

    def remove(self, key) -> "RecordStore":
        for k in key if is_many(key) else (key,):
            self.items.pop(k, None)
        return self

    def take(self, key) -> Any:
        value = self.get(key)
        self.remove(key)
        return value

    def clear(self) -> "RecordStore":
        self.items.clear()
        return self

    def upsert(self, key, value: Any = None) -> "RecordStore":
        fields = key if is_mapping(key) else {key: value}
        for k, v in fields.items():
            if self.has(k):
                self.items[k] = v
            else:
                self.put(k, v)
        return self

    # protocol
    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __contains__(self, key: object) -> bool:
        return key in self.items

    def __repr__(self) -> str:
        flag = ", read_only=True" if self.read_only else ""
        return f"RecordStore({self.items!r}{flag})"
