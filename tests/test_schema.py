"""Tests for the strict ParsedForm Pydantic schema and its discriminated union."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from temporis.grammar.schema import (
    LiteralForm,
    NumericDateForm,
    OffsetUnit,
    OrdinalDayForm,
    PeriodBoundaryForm,
    PeriodEdge,
    PeriodUnit,
    RelativeOffsetForm,
    WeekdayForm,
    form_from_obj,
    form_to_json,
)


def test_form_from_obj_selects_model_by_rule() -> None:
    form = form_from_obj({"rule": "weekday", "index": 4, "next_flag": True})
    assert isinstance(form, WeekdayForm)
    assert form.index == 4
    assert form.weeks_ahead == 1
    assert form.next_flag is True

    form = form_from_obj({"rule": "period_boundary", "unit": "quarter", "edge": "end"})
    assert form == PeriodBoundaryForm(unit=PeriodUnit.quarter, edge=PeriodEdge.end)


def test_form_from_obj_rejects_unknown_rule() -> None:
    with pytest.raises(ValidationError):
        form_from_obj({"rule": "fortnight", "amount": 1})


def test_form_from_obj_rejects_fields_of_other_rules() -> None:
    with pytest.raises(ValidationError):
        form_from_obj({"rule": "literal", "kind": "today", "day": 3})


def test_weekday_index_bounds() -> None:
    with pytest.raises(ValidationError):
        WeekdayForm(index=7)
    with pytest.raises(ValidationError):
        WeekdayForm(index=0, weeks_ahead=0)


def test_numeric_date_syntactic_bounds() -> None:
    with pytest.raises(ValidationError):
        NumericDateForm(year=2024, month=13, day=1)
    with pytest.raises(ValidationError):
        NumericDateForm(year=2024, month=1, day=0)
    with pytest.raises(ValidationError):
        OrdinalDayForm(day=32)

    # Calendar legality is the resolver's concern.
    assert NumericDateForm(year=2023, month=2, day=30).day == 30


def test_forms_are_frozen() -> None:
    form = RelativeOffsetForm(amount=5, unit=OffsetUnit.day)
    with pytest.raises(ValidationError):
        form.amount = 6  # type: ignore[misc]


def test_form_to_json_includes_discriminator() -> None:
    payload = json.loads(form_to_json(NumericDateForm(month=2, day=29)))
    assert payload == {"rule": "numeric_date", "year": None, "month": 2, "day": 29}

    payload = json.loads(form_to_json(LiteralForm(kind="tomorrow")))
    assert payload == {"rule": "literal", "kind": "tomorrow"}
