"""
Error hierarchy and the error sink for recordkit.

* ReadOnlyViolation is *reported*, not raised: mutators hand it to the
  active sink and return whatever the sink returns.
* The default sink logs on the ``recordkit.errors`` logger and returns ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

ErrorSink = Callable[["ReadOnlyViolation"], Any]


MESSAGES: dict[str, dict[str, str]] = {
    "record": {
        "put": "Cannot put fields into this record, it is read only.",
        "remove": "Cannot remove fields from this record, it is read only.",
        "take": "Cannot take fields from this record, it is read only.",
        "clear": "Cannot clear this record, it is read only.",
        "upsert": "Cannot upsert fields in this record, it is read only.",
    },
    "collection": {
        "put": "Cannot put new entries in this collection, it is read only.",
        "cut": "Cannot cut entries from this collection, it is read only.",
        "erase": "Cannot erase this collection, it is read only.",
        "touch": "Cannot touch entries in this collection, it is read only.",
        "unique": "Cannot deduplicate this collection, it is read only.",
    },
    "keyed": {
        "put": "Cannot put new records in this keyed collection, it is read only.",
        "cut": "Cannot cut records from this keyed collection, it is read only.",
        "erase": "Cannot erase this keyed collection, it is read only.",
        "touch": "Cannot touch records in this keyed collection, it is read only.",
        "unique": "Cannot deduplicate this keyed collection, it is read only.",
    },
}


class RecordkitError(Exception):
    """Base class for all recordkit errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


class ReadOnlyViolation(RecordkitError):
    """A mutating operation was attempted on a read-only container."""

    def __init__(self, container: Any, action: str) -> None:
        self.container = container
        self.action = action
        self.kind = getattr(container, "kind", "record")
        message = MESSAGES.get(self.kind, {}).get(
            action, f"Cannot {action} this {self.kind}, it is read only."
        )
        super().__init__(message, code="READ_ONLY")


# sinks
def log_violation(violation: ReadOnlyViolation) -> None:
    """Default sink: log the message and return nothing usable."""
    logger.error(
        violation.message,
        extra={"container": violation.kind, "action": violation.action},
    )


def raise_violation(violation: ReadOnlyViolation) -> None:
    """Strict sink for callers that prefer exceptions."""
    raise violation


_sink: ErrorSink = log_violation


def set_error_sink(sink: Optional[ErrorSink]) -> ErrorSink:
    """Install ``sink`` (``None`` restores logging) and return the previous one."""
    global _sink
    previous = _sink
    _sink = sink if sink is not None else log_violation
    return previous


def get_error_sink() -> ErrorSink:
    return _sink


def report(violation: ReadOnlyViolation) -> Any:
    return _sink(violation)
