"""
Public surface for recordkit.
Three in-memory containers (RecordStore, OrderedCollection, KeyedCollection)
and the ``Recordkit`` factory that builds them.
"""

import logging

from .core.collection import OrderedCollection
from .core.keyed import KeyedCollection
from .core.options import CollectionOptions, KeyedOptions, RecordOptions
from .core.record import RecordStore
from .errors import (
    ReadOnlyViolation,
    RecordkitError,
    raise_violation,
    set_error_sink,
)
from .factory import ContainerKind, Recordkit

logging.getLogger("recordkit").addHandler(logging.NullHandler())

__all__ = [
    "Recordkit",
    "ContainerKind",
    "RecordStore",
    "OrderedCollection",
    "KeyedCollection",
    "RecordOptions",
    "CollectionOptions",
    "KeyedOptions",
    "RecordkitError",
    "ReadOnlyViolation",
    "raise_violation",
    "set_error_sink",
]

__version__ = "0.1.0"
