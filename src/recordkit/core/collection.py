"""
OrderedCollection: a list of arbitrary entries with positional and
predicate-based query and mutation.

* ``entries`` is the caller's list, kept by reference unless an intake
  rebuilds it; every mutation rewrites it in place so earlier ``all()``
  results stay live.
* ``intake`` transforms initial entries once, and new entries only when
  ``apply_intake_on_new_entries`` is set.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Mapping, Optional

from recordkit._utils import is_index, is_many, resolve_fallback, same_value

from .base import Container
from .options import CollectionOptions

Predicate = Callable[[Any], Any]


def _match_all(entry: Any) -> bool:
    return True


class OrderedCollection(Container):
    """Sequence container; mutators are no-ops when read only."""

    kind = "collection"
    _mutators = ("put", "cut", "erase", "touch", "unique")
    _options_model = CollectionOptions

    def __init__(
        self,
        initial: Optional[List[Any]] = None,
        intake: Optional[Callable[[Any], Any]] = None,
        options: CollectionOptions | Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(options)
        self.entries: List[Any] = initial if initial is not None else []
        self.intake = intake
        if intake is not None:
            self.entries = [intake(entry) for entry in self.entries]

    @property
    def apply_intake_on_new_entries(self) -> bool:
        return self.options.apply_intake_on_new_entries

    # reads
    def all(self) -> List[Any]:
        return self.entries

    def get(self, selector: Any = None) -> Any:
        """Entry at an index (``None`` when out of range), or the list of
        entries a predicate accepts. Any other selector gives ``None``."""
        if is_index(selector):
            try:
                return self.entries[selector]
            except IndexError:
                return None
        if callable(selector):
            return [entry for entry in self.entries if selector(entry)]
        return None

    def size(self) -> int:
        return len(self.entries)

    def count(self, predicate: Optional[Predicate] = None) -> int:
        if predicate is None:
            return self.size()
        return sum(1 for entry in self.entries if predicate(entry))

    def first(self, fallback: Any = None) -> Any:
        if self.entries:
            return self.entries[0]
        return resolve_fallback(fallback, self)

    def last(self, fallback: Any = None) -> Any:
        if self.entries:
            return self.entries[-1]
        return resolve_fallback(fallback, self)

    def first_of(
        self, predicate: Optional[Predicate] = None, fallback: Any = None
    ) -> Any:
        for entry in self.entries:
            if (predicate or _match_all)(entry):
                return entry
        return resolve_fallback(fallback, self)

    def last_of(
        self, predicate: Optional[Predicate] = None, fallback: Any = None
    ) -> Any:
        for entry in reversed(self.entries):
            if (predicate or _match_all)(entry):
                return entry
        return resolve_fallback(fallback, self)

    def each(
        self, callback: Callable[[Any], Any], predicate: Optional[Predicate] = None
    ) -> "OrderedCollection":
        for entry in self.get(predicate or _match_all):
            callback(entry)
        return self

    # writes
    def put(self, entries: Any = (), index: Optional[int] = None):
        batch = list(entries) if is_many(entries) else [entries]
        if self.apply_intake_on_new_entries and self.intake is not None:
            batch = [self.intake(entry) for entry in batch]
        self._insert(batch, index)
        return self

    def cut(self, selector: Any = None, count: int = 1):
        """Remove entries.

        * ``cut(2)`` / ``cut(2, 3)``: ``count`` entries starting at index 2.
        * ``cut([2, 3])``: a ``[index, count]`` pair; a missing or ``None``
          count falls back to ``count``.
        * ``cut(predicate)``: every entry the predicate accepts.
        """
        if is_index(selector):
            self._remove_range(selector, count)
        elif is_many(selector) and selector and is_index(selector[0]):
            span = selector[1] if len(selector) > 1 and selector[1] is not None else count
            self._remove_range(selector[0], span)
        elif callable(selector):
            self.entries[:] = [entry for entry in self.entries if not selector(entry)]
        return self

    def erase(self):
        self.entries.clear()
        return self

    def touch(
        self, transform: Callable[[Any], Any], predicate: Optional[Predicate] = None
    ):
        """Replace every entry the predicate accepts (all of them when no
        predicate is given) with ``transform(entry)``."""
        self.entries[:] = [
            transform(entry) if predicate is None or predicate(entry) else entry
            for entry in self.entries
        ]
        return self

    def unique(self):
        """Drop repeated entries, keeping the first of each. ``True`` and ``1``
        count as different entries."""
        kept: List[Any] = []
        seen = set()
        for entry in self.entries:
            try:
                marker = (isinstance(entry, bool), entry)
                if marker in seen:
                    continue
                seen.add(marker)
            except TypeError:  # unhashable, fall back to equality scan
                if any(same_value(entry, other) for other in kept):
                    continue
            kept.append(entry)
        self.entries[:] = kept
        return self

    # internal util
    def _insert(self, batch: List[Any], index: Optional[int]) -> None:
        if index is None:
            self.entries.extend(batch)
        else:
            self.entries[index:index] = batch

    def _remove_range(self, start: int, count: int) -> None:
        if start < 0:
            start = max(len(self.entries) + start, 0)
        del self.entries[start : start + max(count, 0)]

    # protocol
    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.entries!r})"
