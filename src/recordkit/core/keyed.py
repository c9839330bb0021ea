"""
KeyedCollection: an OrderedCollection whose entries are all RecordStores.

* ``definitions`` maps a field to a static default or to a generator
  ``(record, index) -> value``. Generators always overwrite the field;
  static defaults only fill it when absent.
* Every picker may be a predicate over RecordStores or an equality pattern
  ``{field: value}``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence

from recordkit._utils import is_index, is_many, is_mapping, same_value

from .collection import OrderedCollection
from .options import KeyedOptions
from .record import RecordStore

logger = logging.getLogger(__name__)

Picker = Any  # Mapping[str, Any] | Callable[[RecordStore], Any] | None


def compile_pattern(pattern: Mapping[str, Any]) -> Callable[[RecordStore], bool]:
    """Predicate accepting records that hold every field of ``pattern`` with
    an equal value; ``True`` and ``1`` are not equal here."""

    def matches(record: RecordStore) -> bool:
        items = record.all()
        return all(
            key in items and same_value(items[key], value) for key, value in pattern.items()
        )

    return matches


def as_predicate(picker: Picker) -> Optional[Callable[[RecordStore], Any]]:
    if is_mapping(picker):
        return compile_pattern(picker)
    if callable(picker):
        return picker
    return None


def as_record(value: Any) -> RecordStore:
    if isinstance(value, RecordStore):
        return value
    return RecordStore(value if value is not None else {})


class KeyedCollection(OrderedCollection):
    """Collection of records sharing default and derived fields."""

    kind = "keyed"
    _options_model = KeyedOptions

    def __init__(
        self,
        initial: Optional[List[Any]] = None,
        definitions: Optional[Mapping[str, Any]] = None,
        options: KeyedOptions | Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(initial, None, options)
        self.definitions = definitions
        self.entries = [
            self._define(as_record(raw), index) for index, raw in enumerate(self.entries)
        ]

    @property
    def apply_definitions_on_new_entries(self) -> bool:
        return self.options.apply_definitions_on_new_entries

    def _define(self, record: RecordStore, index: int) -> RecordStore:
        if not self.definitions:
            return record
        for field, value in self.definitions.items():
            if callable(value):
                record.put(field, value(record, index))
            elif not record.has(field):
                record.put(field, value)
        logger.debug("applied %d definitions to record %d", len(self.definitions), index)
        return record

    # reads
    def raw_all(self, selector: Optional[Sequence[str]] = None) -> List[Any]:
        """Plain dicts of every record, or their projection on ``selector``."""
        if is_many(selector):
            return [record.get(selector) for record in self.entries]
        return [record.all() for record in self.entries]

    def get(self, picker: Picker = None, selector: Optional[Sequence[str]] = None) -> Any:
        """Records matching ``picker``, projected on ``selector`` if given.

        An index picker returns a single record (or its projection), any
        picker that is neither pattern, predicate nor index returns ``None``.
        """
        if is_index(picker):
            record = super().get(picker)
            if record is not None and is_many(selector):
                return record.get(selector)
            return record
        predicate = as_predicate(picker)
        if predicate is None:
            return None
        picked = super().get(predicate)
        if is_many(selector):
            return [record.get(selector) for record in picked]
        return picked

    def count(self, picker: Picker = None) -> int:
        return super().count(as_predicate(picker))

    def first_of(self, picker: Picker = None, fallback: Any = None) -> Any:
        return super().first_of(as_predicate(picker), fallback)

    def last_of(self, picker: Picker = None, fallback: Any = None) -> Any:
        return super().last_of(as_predicate(picker), fallback)

    def each(self, callback: Callable[[RecordStore], Any], picker: Picker = None):
        return super().each(callback, as_predicate(picker))

    # writes
    def put(self, records: Any = (), index: Optional[int] = None):
        batch = [as_record(raw) for raw in (records if is_many(records) else [records])]
        if self.apply_definitions_on_new_entries:
            batch = [self._define(record, i) for i, record in enumerate(batch)]
        self._insert(batch, index)
        return self

    def cut(self, picker: Picker = None, count: int = 1):
        if is_mapping(picker):
            picker = compile_pattern(picker)
        return super().cut(picker, count)

    def touch(self, transform: Callable[[RecordStore], Any], picker: Picker = None):
        """Apply ``transform`` to every record ``picker`` accepts (all when
        omitted). A returned RecordStore or mapping replaces the record; any
        other result (``None``, a scalar) keeps the record the transform saw."""

        def replace(record: RecordStore) -> RecordStore:
            result = transform(record)
            if isinstance(result, RecordStore):
                return result
            if is_mapping(result):
                return RecordStore(result if isinstance(result, dict) else dict(result))
            return record

        return super().touch(replace, as_predicate(picker))
