"""English vocabularies for the date-expression grammar.

These mappings are used by the classifier and should remain small and deterministic. Weekdays are
accepted as full names or 3-letter abbreviations only ("tues" and "thurs" are not recognized).
"""

from __future__ import annotations

from dataclasses import dataclass

from temporis.grammar.schema import LiteralKind, OffsetUnit, PeriodEdge, PeriodUnit

WEEKDAY_NAMES: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

# Index follows `date.weekday()`: Monday is 0.
WEEKDAY_TERM_TO_INDEX: dict[str, int] = {
    term: idx
    for idx, name in enumerate(WEEKDAY_NAMES)
    for term in (name, name[:3])
}

MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

MONTH_TERM_TO_NUMBER: dict[str, int] = {
    term: idx + 1
    for idx, name in enumerate(MONTH_NAMES)
    for term in (name, name[:3])
}

LITERAL_SYNONYMS: dict[LiteralKind, tuple[str, ...]] = {
    LiteralKind.today: ("today", "tod", "now"),
    LiteralKind.tomorrow: ("tomorrow", "tom"),
    LiteralKind.yesterday: ("yesterday", "yes"),
}

LITERAL_TERM_TO_KIND: dict[str, LiteralKind] = {
    term: kind for kind, terms in LITERAL_SYNONYMS.items() for term in terms
}

OFFSET_UNIT_SYNONYMS: dict[OffsetUnit, tuple[str, ...]] = {
    OffsetUnit.day: ("d", "day", "days"),
    OffsetUnit.week: ("w", "wk", "wks", "week", "weeks"),
    OffsetUnit.month: ("m", "mth", "mths", "month", "months"),
    OffsetUnit.year: ("y", "yr", "yrs", "year", "years"),
}

OFFSET_TERM_TO_UNIT: dict[str, OffsetUnit] = {
    term: unit for unit, terms in OFFSET_UNIT_SYNONYMS.items() for term in terms
}


@dataclass(frozen=True)
class PeriodMarker:
    """A business period marker token mapped to the boundary it denotes."""

    unit: PeriodUnit
    edge: PeriodEdge
    next_flag: bool = False


_UNIT_LETTERS: dict[str, PeriodUnit] = {
    "w": PeriodUnit.week,
    "m": PeriodUnit.month,
    "q": PeriodUnit.quarter,
    "y": PeriodUnit.year,
}

PERIOD_MARKERS: dict[str, PeriodMarker] = {
    **{
        f"so{letter}": PeriodMarker(unit=unit, edge=PeriodEdge.start)
        for letter, unit in _UNIT_LETTERS.items()
    },
    **{
        f"eo{letter}": PeriodMarker(unit=unit, edge=PeriodEdge.end)
        for letter, unit in _UNIT_LETTERS.items()
    },
    # Only "end of next" forms exist; there is no "start of next" marker.
    **{
        f"eon{letter}": PeriodMarker(unit=unit, edge=PeriodEdge.end, next_flag=True)
        for letter, unit in _UNIT_LETTERS.items()
    },
}


def build_alternation(terms: list[str] | tuple[str, ...]) -> str:
    """Build a regex alternation preferring longer terms (e.g. "monday" over "mon")."""

    return "|".join(sorted(terms, key=lambda t: (-len(t), t)))


def lookup_weekday(term: str) -> int | None:
    """Return the weekday index (Monday=0) for a weekday name or abbreviation."""

    return WEEKDAY_TERM_TO_INDEX.get((term or "").lower())


def lookup_month(term: str) -> int | None:
    """Return the month number (1-12) for an English month name or abbreviation."""

    return MONTH_TERM_TO_NUMBER.get((term or "").lower())
