"""Parsed date-expression schema (Pydantic models).

This schema is the contract between the classifier and the resolver. Every recognized expression is
represented by exactly one of the form models below; the `rule` field discriminates the union.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class LiteralKind(StrEnum):
    """Fixed keywords relative to the reference date."""

    today = "today"
    tomorrow = "tomorrow"
    yesterday = "yesterday"


class PeriodUnit(StrEnum):
    """Calendar periods with a start and end boundary."""

    week = "week"
    month = "month"
    quarter = "quarter"
    year = "year"


class PeriodEdge(StrEnum):
    """Which boundary of a period is requested."""

    start = "start"
    end = "end"


class OffsetUnit(StrEnum):
    """Units for forward relative offsets."""

    day = "day"
    week = "week"
    month = "month"
    year = "year"


_FORM_CONFIG = ConfigDict(extra="forbid", frozen=True)


class LiteralForm(BaseModel):
    """`today`, `tomorrow`, `yesterday` and their short aliases."""

    model_config = _FORM_CONFIG

    rule: Literal["literal"] = "literal"
    kind: LiteralKind


class WeekdayForm(BaseModel):
    """A weekday search, optionally N weeks ahead or strictly after the reference date.

    `index` follows `date.weekday()` (Monday is 0). With `next_flag` set the reference date itself
    never matches, even when it falls on the requested weekday.
    """

    model_config = _FORM_CONFIG

    rule: Literal["weekday"] = "weekday"
    index: int = Field(ge=0, le=6)
    weeks_ahead: int = Field(default=1, ge=1)
    next_flag: bool = False


class PeriodBoundaryForm(BaseModel):
    """The first or last day of the week/month/quarter/year containing the reference date."""

    model_config = _FORM_CONFIG

    rule: Literal["period_boundary"] = "period_boundary"
    unit: PeriodUnit
    edge: PeriodEdge
    next_flag: bool = False


class RelativeOffsetForm(BaseModel):
    """A forward offset such as `5d` or `3months`."""

    model_config = _FORM_CONFIG

    rule: Literal["relative_offset"] = "relative_offset"
    amount: int = Field(ge=0)
    unit: OffsetUnit


class OrdinalDayForm(BaseModel):
    """A day of the reference month written with an ordinal suffix (`1st`, `22nd`)."""

    model_config = _FORM_CONFIG

    rule: Literal["ordinal_day"] = "ordinal_day"
    day: int = Field(ge=1, le=31)


class NumericDateForm(BaseModel):
    """An explicit calendar date; `year` is `None` when the reference year applies.

    Only syntactic ranges are validated here. Whether the fields form a real date (e.g. Feb 30) is
    checked by the resolver.
    """

    model_config = _FORM_CONFIG

    rule: Literal["numeric_date"] = "numeric_date"
    year: int | None = Field(default=None, ge=1, le=9999)
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)


ParsedForm = Annotated[
    LiteralForm
    | WeekdayForm
    | PeriodBoundaryForm
    | RelativeOffsetForm
    | OrdinalDayForm
    | NumericDateForm,
    Field(discriminator="rule"),
]

_PARSED_FORM_ADAPTER: TypeAdapter[ParsedForm] = TypeAdapter(ParsedForm)


def form_from_obj(obj: Any) -> ParsedForm:
    """Validate and parse a ParsedForm from an arbitrary decoded JSON object."""

    return _PARSED_FORM_ADAPTER.validate_python(obj)


def form_to_json(form: ParsedForm) -> str:
    """Serialize a ParsedForm to a JSON string (discriminator included)."""

    return _PARSED_FORM_ADAPTER.dump_json(form).decode("utf-8")
