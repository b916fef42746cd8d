"""Error taxonomy for date-expression parsing.

Classification failures raise `ParseError`; resolution failures raise `ResolveError`. Both derive
from `DateExpressionError` (a `ValueError`) so callers can handle either stage with one clause.
"""

from __future__ import annotations

from enum import StrEnum


class ParseErrorReason(StrEnum):
    """Why an input could not be classified."""

    unrecognized_format = "unrecognized_format"
    invalid_numeric_range = "invalid_numeric_range"
    invalid_month_name = "invalid_month_name"
    invalid_day_of_month = "invalid_day_of_month"


class ResolveErrorReason(StrEnum):
    """Why a classified form could not be turned into a date."""

    invalid_calendar_date = "invalid_calendar_date"
    out_of_range = "out_of_range"


class DateExpressionError(ValueError):
    """Base class for every error raised while turning an expression into a date."""


class ParseError(DateExpressionError):
    """Raised when an input string does not match the grammar."""

    def __init__(self, raw_input: str, reason: ParseErrorReason, detail: str | None = None) -> None:
        self.raw_input = raw_input
        self.reason = reason
        self.detail = detail
        message = f"cannot parse date expression {raw_input!r}: {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ResolveError(DateExpressionError):
    """Raised when syntactically valid fields do not produce a real calendar date."""

    def __init__(
            self,
            reason: ResolveErrorReason,
            *,
            year: int | None = None,
            month: int | None = None,
            day: int | None = None,
            detail: str | None = None,
    ) -> None:
        self.reason = reason
        self.year = year
        self.month = month
        self.day = day
        self.detail = detail
        if year is None and month is None and day is None:
            message = f"cannot resolve date: {reason}"
        else:
            message = f"cannot resolve date {self._fields_text()}: {reason}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def _fields_text(self) -> str:
        year = "????" if self.year is None else f"{self.year:04d}"
        month = "??" if self.month is None else f"{self.month:02d}"
        day = "??" if self.day is None else f"{self.day:02d}"
        return f"{year}-{month}-{day}"
