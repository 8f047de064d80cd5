from typing import Generic, Iterable, Iterator, Tuple, Union
from pydantic import ValidationError

from simparams.domain.errors import InvalidRangeDefinition, RangeNotFound
from simparams.domain.models import NumericRange, RangeTableEntry, V

EntrySpec = Union[RangeTableEntry, Tuple[float, float, object]]

class RangeTable(Generic[V]):
    """Immutable piecewise lookup from a scalar to a value over closed intervals.

    Entries are scanned in ascending order of their lower bound and the first
    interval containing the query wins. When two adjacent intervals share a
    boundary, a query on that boundary resolves to the lower interval.
    Bounds are compared exactly.
    """

    __slots__ = ("_name", "_entries")

    def __init__(self, name: str, entries: Tuple[RangeTableEntry, ...]):
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_entries", entries)

    def __setattr__(self, key, value):
        raise AttributeError(f"RangeTable '{self._name}' is read-only")

    @classmethod
    def build(cls, entries: Iterable[EntrySpec], name: str = "range_table") -> "RangeTable":
        """Validates (lower, upper, value) definitions and freezes them into a table.

        Raises InvalidRangeDefinition for an empty definition or for an entry
        whose bounds are not numbers with lower <= upper, or that is not a
        (lower, upper, value) triple.
        """
        built = []
        for index, item in enumerate(entries):
            if isinstance(item, RangeTableEntry):
                built.append(item)
                continue

            lower = upper = None
            try:
                lower, upper, value = item
                interval = NumericRange(lower_bound=lower, upper_bound=upper)
            except (ValidationError, TypeError, ValueError) as exc:
                raise InvalidRangeDefinition(name, index, lower, upper) from exc
            built.append(RangeTableEntry(interval=interval, value=value))

        if not built:
            raise InvalidRangeDefinition(name, 0, None, None)

        # sorted() is stable, so entries sharing a lower bound keep their given order
        ordered = sorted(built, key=lambda e: e.interval.lower_bound)
        return cls(name, tuple(ordered))

    @property
    def name(self) -> str:
        return self._name

    @property
    def entries(self) -> Tuple[RangeTableEntry, ...]:
        return self._entries

    @property
    def domain(self) -> NumericRange:
        """Span from the smallest lower bound to the largest upper bound."""
        return NumericRange(
            lower_bound=self._entries[0].interval.lower_bound,
            upper_bound=max(e.interval.upper_bound for e in self._entries),
        )

    def lookup(self, x: float) -> V:
        for entry in self._entries:
            if entry.interval.contains(x):
                return entry.value
        raise RangeNotFound(x, self._name)

    def covers(self, x: float) -> bool:
        return any(entry.interval.contains(x) for entry in self._entries)

    def __contains__(self, x: float) -> bool:
        return self.covers(x)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RangeTableEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"RangeTable(name={self._name!r}, entries={len(self._entries)})"
