"""Calendar helpers (pure functions over `datetime.date` and `relativedelta`).

Weeks run Monday through Sunday. Quarters are Jan-Mar, Apr-Jun, Jul-Sep and Oct-Dec.
Month and year arithmetic clamps the day to the last day of the target month.
"""

from __future__ import annotations

from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from temporis.grammar.schema import PeriodUnit


def add_months(value: date, months: int) -> date:
    """Add calendar months, clamping the day (Jan 31 + 1 month -> Feb 28/29)."""

    return value + relativedelta(months=months)


def add_years(value: date, years: int) -> date:
    """Add calendar years, clamping Feb 29 to Feb 28 in non-leap years."""

    return value + relativedelta(years=years)


def start_of_week(value: date) -> date:
    return value - timedelta(days=value.weekday())


def start_of_month(value: date) -> date:
    return value.replace(day=1)


def start_of_quarter(value: date) -> date:
    first_month = 3 * ((value.month - 1) // 3) + 1
    return date(value.year, first_month, 1)


def start_of_year(value: date) -> date:
    return date(value.year, 1, 1)


def period_start(value: date, unit: PeriodUnit) -> date:
    """First day of the `unit` period containing `value`."""

    if unit == PeriodUnit.week:
        return start_of_week(value)
    if unit == PeriodUnit.month:
        return start_of_month(value)
    if unit == PeriodUnit.quarter:
        return start_of_quarter(value)
    return start_of_year(value)


def period_length(unit: PeriodUnit) -> timedelta | relativedelta:
    """One full `unit` period, usable with `date + ...`."""

    if unit == PeriodUnit.week:
        return timedelta(days=7)
    if unit == PeriodUnit.month:
        return relativedelta(months=1)
    if unit == PeriodUnit.quarter:
        return relativedelta(months=3)
    return relativedelta(years=1)


def period_end(value: date, unit: PeriodUnit) -> date:
    """Last day of the `unit` period containing `value`."""

    start = period_start(value, unit)
    if unit == PeriodUnit.week:
        return start + timedelta(days=6)
    if unit == PeriodUnit.month:
        return start + relativedelta(day=31)
    if unit == PeriodUnit.quarter:
        return start + relativedelta(months=2, day=31)
    return date(value.year, 12, 31)


def next_weekday(value: date, index: int, *, strictly_after: bool = False) -> date:
    """First date on or after `value` whose weekday is `index` (Monday=0).

    With `strictly_after`, `value` itself is skipped even when it matches.
    """

    days_ahead = (index - value.weekday()) % 7
    if strictly_after and days_ahead == 0:
        days_ahead = 7
    return value + timedelta(days=days_ahead)
