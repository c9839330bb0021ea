"""
Container kernel shared by RecordStore, OrderedCollection and KeyedCollection.

* ``ContainerMeta`` wraps every method named in ``_mutators`` with the
  read-only guard when the class is created, overrides included.
* ``Container`` holds the frozen options object and exposes ``read_only``.
"""

from __future__ import annotations

from typing import Any, ClassVar, Tuple, Type

from recordkit.guards import guarded

from .options import RecordOptions


class ContainerMeta(type):
    """Guard mutators at class-creation time."""

    def __new__(mcls, name: str, bases, ns, **kw):
        cls = super().__new__(mcls, name, bases, ns, **kw)
        if name == "Container":  # skip abstract base
            return cls

        mutators = getattr(cls, "_mutators", ())
        for attr, fn in ns.items():
            if attr in mutators and callable(fn):
                setattr(cls, attr, guarded(attr)(fn))

        return cls


class Container(metaclass=ContainerMeta):
    kind: ClassVar[str] = ""
    _mutators: ClassVar[Tuple[str, ...]] = ()
    _options_model: ClassVar[Type[RecordOptions]] = RecordOptions

    def __init__(self, options: Any = None) -> None:
        self.options = self._options_model.coerce(options)

    @property
    def read_only(self) -> bool:
        return self.options.read_only
