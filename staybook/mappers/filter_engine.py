"""Multi-criteria filtering of dashboard records.

A ``FilterEngine`` is a table of filter key -> predicate builder. Every active
filter with a non-empty value narrows the result; filters never combine with
OR. Input order is preserved.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import date, datetime
from typing import Any, TypeVar
from zoneinfo import ZoneInfo

from staybook.schemas.filters import FilterSelection

T = TypeVar("T")

Getter = Callable[[Any], Any]
# value -> record -> keep?
PredicateBuilder = Callable[[str], Callable[[Any], bool]]


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def contains_any(*getters: Getter) -> PredicateBuilder:
    """Case-insensitive substring match against any of the given fields."""

    def build(term: str) -> Callable[[Any], bool]:
        needle = term.lower()
        return lambda record: any(needle in _text(g(record)).lower() for g in getters)

    return build


def equals(getter: Getter) -> PredicateBuilder:
    """Exact match against a categorical field."""

    def build(value: str) -> Callable[[Any], bool]:
        return lambda record: getter(record) == value

    return build


def calendar_day(value: Any, tz: ZoneInfo | None = None) -> date | None:
    """Reduce a date/datetime (or ISO string) to its calendar day.

    Date-only strings are taken as written. Datetimes keep their own
    wall-clock date unless ``tz`` is given, in which case aware values are
    converted to ``tz`` first. Time of day is always discarded.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value
    else:
        text = str(value).strip()
        if len(text) == 10:
            try:
                return date.fromisoformat(text)
            except ValueError:
                return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
    if tz is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone(tz)
    return parsed.date()


def same_day(getter: Getter, tz: ZoneInfo | None = None) -> PredicateBuilder:
    """Exact calendar-day match (not range containment)."""

    def build(value: str) -> Callable[[Any], bool]:
        wanted = calendar_day(value)
        if wanted is None:
            return lambda record: False

        def keep(record: Any) -> bool:
            return calendar_day(getter(record), tz) == wanted

        return keep

    return build


class FilterEngine:
    def __init__(self, predicates: Mapping[str, PredicateBuilder]):
        self._predicates = dict(predicates)

    @property
    def keys(self) -> list[str]:
        return list(self._predicates)

    def apply(
        self,
        records: Iterable[T],
        active_keys: Iterable[str],
        values: Mapping[str, str],
    ) -> list[T]:
        checks: list[Callable[[Any], bool]] = []
        for key in active_keys:
            builder = self._predicates.get(key)
            # matched as typed: surrounding spaces are part of the term
            value = values.get(key) or ""
            if builder is None or not value:
                continue
            checks.append(builder(value))

        return [r for r in records if all(check(r) for check in checks)]

    def apply_selection(self, records: Sequence[T], selection: FilterSelection) -> list[T]:
        return self.apply(records, selection.active_keys, selection.values)
