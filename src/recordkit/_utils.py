"""Shape helpers shared by the containers."""

from collections.abc import Mapping
from typing import Any


def is_many(value: Any) -> bool:
    """Lists and tuples are batches; everything else is a single value."""
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def resolve_fallback(fallback: Any, container: Any) -> Any:
    if callable(fallback):
        return fallback(container)
    return fallback


def same_value(left: Any, right: Any) -> bool:
    """``==`` that keeps booleans apart from the numbers they equal."""
    return left == right and isinstance(left, bool) == isinstance(right, bool)
