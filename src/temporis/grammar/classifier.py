"""Rules-based classifier for short date expressions.

The classifier is intentionally strict and deterministic:
    - rules are tried in a fixed precedence order and the first match wins,
    - a matched rule with out-of-range numbers fails immediately instead of falling through,
    - it produces a ParsedForm validated by the Pydantic schema.

Precedence (highest first): literal keywords, period markers, weekdays, relative offsets, ordinal
days, full dates, short dates.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from temporis.grammar.dictionaries import (
    LITERAL_TERM_TO_KIND,
    OFFSET_TERM_TO_UNIT,
    PERIOD_MARKERS,
    WEEKDAY_TERM_TO_INDEX,
    build_alternation,
    lookup_month,
    lookup_weekday,
)
from temporis.grammar.errors import ParseError, ParseErrorReason
from temporis.grammar.normalize import normalize_expression
from temporis.grammar.schema import (
    LiteralForm,
    NumericDateForm,
    OrdinalDayForm,
    ParsedForm,
    PeriodBoundaryForm,
    RelativeOffsetForm,
    WeekdayForm,
)

_WEEKDAY_RE = re.compile(
    rf"^(?:(?P<next>n)|(?P<count>\d+))?(?P<name>{build_alternation(tuple(WEEKDAY_TERM_TO_INDEX))})$"
)

_RELATIVE_OFFSET_RE = re.compile(
    rf"^(?P<amount>\d+)(?P<unit>{build_alternation(tuple(OFFSET_TERM_TO_UNIT))})$"
)

_ORDINAL_DAY_RE = re.compile(r"^(?P<day>\d+)(?:st|nd|rd|th)$")

# Full dates must use one separator consistently ("2024-01/16" is rejected).
_FULL_DATE_RES: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(?P<y>\d{4})(?P<sep>[-/])(?P<m>\d{1,2})(?P=sep)(?P<d>\d{1,2})$"),
    re.compile(r"^(?P<d>\d{1,2})(?P<sep>[-/])(?P<m>\d{1,2})(?P=sep)(?P<y>\d{4})$"),
    re.compile(r"^(?P<d>\d{1,2})(?P<sep>[-/])(?P<m>[a-z]+)(?P=sep)(?P<y>\d{4})$"),
    re.compile(r"^(?P<y>\d{4})(?P<sep>[-/])(?P<m>[a-z]+)(?P=sep)(?P<d>\d{1,2})$"),
)

_SHORT_DATE_RES: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(?P<d>\d{1,2})[-/](?P<m>\d{1,2})$"),
    re.compile(r"^(?P<d>\d{1,2})[-/](?P<m>[a-z]+)$"),
    re.compile(r"^(?P<m>[a-z]+)[-/](?P<d>\d{1,2})$"),
)


def _numeric_range_error(raw: str, detail: str) -> ParseError:
    return ParseError(raw, ParseErrorReason.invalid_numeric_range, detail)


def _parse_count(token: str, raw: str, reason: ParseErrorReason) -> int:
    """Convert a digit run, failing with `reason` when it is too long for `int()`."""

    try:
        return int(token)
    except ValueError as exc:
        raise ParseError(raw, reason, f"number {token[:12]}... is too large") from exc


def _parse_month_token(token: str, raw: str) -> int:
    """Parse a numeric or alphabetic month token into 1-12."""

    if token.isdigit():
        month = int(token)
        if not 1 <= month <= 12:
            raise _numeric_range_error(raw, f"month {month} is not in 1..12")
        return month

    month = lookup_month(token)
    if month is None:
        raise ParseError(raw, ParseErrorReason.invalid_month_name, f"unknown month {token!r}")
    return month


def _build_numeric_date(match: re.Match[str], raw: str, *, with_year: bool) -> NumericDateForm:
    month = _parse_month_token(match.group("m"), raw)

    day = int(match.group("d"))
    if not 1 <= day <= 31:
        raise _numeric_range_error(raw, f"day {day} is not in 1..31")

    year = None
    if with_year:
        year = int(match.group("y"))
        if year < 1:
            raise _numeric_range_error(raw, f"year {year} is not in 1..9999")

    return NumericDateForm(year=year, month=month, day=day)


def _match_literal(value: str, raw: str) -> ParsedForm | None:
    kind = LITERAL_TERM_TO_KIND.get(value)
    if kind is None:
        return None
    return LiteralForm(kind=kind)


def _match_period_marker(value: str, raw: str) -> ParsedForm | None:
    marker = PERIOD_MARKERS.get(value)
    if marker is None:
        return None
    return PeriodBoundaryForm(unit=marker.unit, edge=marker.edge, next_flag=marker.next_flag)


def _match_weekday(value: str, raw: str) -> ParsedForm | None:
    match = _WEEKDAY_RE.match(value)
    if not match:
        return None

    index = lookup_weekday(match.group("name"))
    if match.group("next"):
        return WeekdayForm(index=index, weeks_ahead=1, next_flag=True)

    count = match.group("count")
    weeks_ahead = 1
    if count is not None:
        weeks_ahead = _parse_count(count, raw, ParseErrorReason.invalid_numeric_range)
    if weeks_ahead < 1:
        raise _numeric_range_error(raw, "weekday multiplier must be at least 1")
    return WeekdayForm(index=index, weeks_ahead=weeks_ahead)


def _match_relative_offset(value: str, raw: str) -> ParsedForm | None:
    match = _RELATIVE_OFFSET_RE.match(value)
    if not match:
        return None
    return RelativeOffsetForm(
        amount=_parse_count(match.group("amount"), raw, ParseErrorReason.invalid_numeric_range),
        unit=OFFSET_TERM_TO_UNIT[match.group("unit")],
    )


def _match_ordinal_day(value: str, raw: str) -> ParsedForm | None:
    match = _ORDINAL_DAY_RE.match(value)
    if not match:
        return None

    day = _parse_count(match.group("day"), raw, ParseErrorReason.invalid_day_of_month)
    if not 1 <= day <= 31:
        raise ParseError(raw, ParseErrorReason.invalid_day_of_month, f"day {day} is not in 1..31")
    return OrdinalDayForm(day=day)


def _match_full_date(value: str, raw: str) -> ParsedForm | None:
    for pattern in _FULL_DATE_RES:
        match = pattern.match(value)
        if match:
            return _build_numeric_date(match, raw, with_year=True)
    return None


def _match_short_date(value: str, raw: str) -> ParsedForm | None:
    for pattern in _SHORT_DATE_RES:
        match = pattern.match(value)
        if match:
            return _build_numeric_date(match, raw, with_year=False)
    return None


Rule = Callable[[str, str], ParsedForm | None]

RULES: tuple[tuple[str, Rule], ...] = (
    ("literal", _match_literal),
    ("period_marker", _match_period_marker),
    ("weekday", _match_weekday),
    ("relative_offset", _match_relative_offset),
    ("ordinal_day", _match_ordinal_day),
    ("full_date", _match_full_date),
    ("short_date", _match_short_date),
)


def classify(text: str) -> ParsedForm:
    """Classify a date expression into exactly one ParsedForm.

    Raises:
        ParseError: If no rule matches (`unrecognized_format`) or the matching rule carries an
            out-of-range component.
    """

    value = normalize_expression(text)
    if value:
        for _name, rule in RULES:
            form = rule(value, text)
            if form is not None:
                return form

    raise ParseError(text, ParseErrorReason.unrecognized_format)
