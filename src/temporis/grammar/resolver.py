"""Resolve a ParsedForm into a concrete calendar date relative to a reference date."""

from __future__ import annotations

from datetime import date, timedelta
from typing import assert_never

from temporis.grammar import periods
from temporis.grammar.errors import ResolveError, ResolveErrorReason
from temporis.grammar.schema import (
    LiteralForm,
    LiteralKind,
    NumericDateForm,
    OffsetUnit,
    OrdinalDayForm,
    ParsedForm,
    PeriodBoundaryForm,
    PeriodEdge,
    RelativeOffsetForm,
    WeekdayForm,
)

_LITERAL_OFFSETS: dict[LiteralKind, int] = {
    LiteralKind.today: 0,
    LiteralKind.tomorrow: 1,
    LiteralKind.yesterday: -1,
}


def _build_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise ResolveError(
            ResolveErrorReason.invalid_calendar_date, year=year, month=month, day=day
        ) from exc


def _resolve_literal(form: LiteralForm, reference: date) -> date:
    return reference + timedelta(days=_LITERAL_OFFSETS[form.kind])


def _resolve_weekday(form: WeekdayForm, reference: date) -> date:
    first = periods.next_weekday(reference, form.index, strictly_after=form.next_flag)
    return first + timedelta(weeks=form.weeks_ahead - 1)


def _resolve_period_boundary(form: PeriodBoundaryForm, reference: date) -> date:
    anchor = reference
    if form.next_flag:
        anchor = periods.period_start(reference, form.unit) + periods.period_length(form.unit)

    if form.edge == PeriodEdge.start:
        return periods.period_start(anchor, form.unit)
    return periods.period_end(anchor, form.unit)


def _resolve_relative_offset(form: RelativeOffsetForm, reference: date) -> date:
    if form.unit == OffsetUnit.day:
        return reference + timedelta(days=form.amount)
    if form.unit == OffsetUnit.week:
        return reference + timedelta(weeks=form.amount)
    if form.unit == OffsetUnit.month:
        return periods.add_months(reference, form.amount)
    return periods.add_years(reference, form.amount)


def _resolve_ordinal_day(form: OrdinalDayForm, reference: date) -> date:
    return _build_date(reference.year, reference.month, form.day)


def _resolve_numeric_date(form: NumericDateForm, reference: date) -> date:
    year = form.year if form.year is not None else reference.year
    return _build_date(year, form.month, form.day)


def _describe(form: ParsedForm) -> str:
    fields = ", ".join(f"{key}={value}" for key, value in form.model_dump(exclude={"rule"}).items())
    return f"{form.rule}({fields})"


def _dispatch(form: ParsedForm, reference: date) -> date:
    if isinstance(form, LiteralForm):
        return _resolve_literal(form, reference)
    if isinstance(form, WeekdayForm):
        return _resolve_weekday(form, reference)
    if isinstance(form, PeriodBoundaryForm):
        return _resolve_period_boundary(form, reference)
    if isinstance(form, RelativeOffsetForm):
        return _resolve_relative_offset(form, reference)
    if isinstance(form, OrdinalDayForm):
        return _resolve_ordinal_day(form, reference)
    if isinstance(form, NumericDateForm):
        return _resolve_numeric_date(form, reference)
    assert_never(form)


def resolve(form: ParsedForm, reference: date) -> date:
    """Compute the calendar date a ParsedForm denotes for the given reference date.

    Raises:
        ResolveError: `invalid_calendar_date` if the fields do not form a real date (e.g. Feb 30),
            `out_of_range` if the arithmetic leaves the supported years 1..9999.
    """

    try:
        return _dispatch(form, reference)
    except ResolveError:
        raise
    except (OverflowError, ValueError) as exc:
        # timedelta overflow raises OverflowError, relativedelta past year 9999 raises ValueError.
        raise ResolveError(
            ResolveErrorReason.out_of_range,
            detail=f"{_describe(form)} from reference {reference.isoformat()} leaves years 1..9999",
        ) from exc
