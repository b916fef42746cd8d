"""Date-expression parser orchestration (classify, then resolve)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from temporis.grammar.classifier import classify
from temporis.grammar.resolver import resolve
from temporis.grammar.schema import ParsedForm

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Resolved date plus the form and reference date that produced it."""

    value: date
    form: ParsedForm
    reference: date


def parse_date_with_form(text: str, *, reference: date | None = None) -> ParseResult:
    """Parse a date expression and keep the intermediate ParsedForm.

    Strategy:
        1) Classify the text into exactly one ParsedForm (first matching rule wins).
        2) Resolve the form against `reference`, or today's date when it is omitted.

    Raises:
        ParseError: If the text does not match the grammar.
        ResolveError: If the matched fields do not form a valid calendar date.
    """

    reference_date = reference if reference is not None else date.today()
    form = classify(text)
    value = resolve(form, reference_date)

    logger.debug(
        "resolved rule=%s reference=%s value=%s",
        form.rule,
        reference_date.isoformat(),
        value.isoformat(),
    )
    return ParseResult(value=value, form=form, reference=reference_date)


def parse_date(text: str, reference: date | None = None) -> date:
    """Parse a date expression into a calendar date (convenience wrapper)."""

    return parse_date_with_form(text, reference=reference).value
