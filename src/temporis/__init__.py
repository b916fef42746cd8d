"""Lenient date-expression parsing for CLI tools and applications."""

from __future__ import annotations

from temporis.grammar.classifier import classify
from temporis.grammar.errors import (
    DateExpressionError,
    ParseError,
    ParseErrorReason,
    ResolveError,
    ResolveErrorReason,
)
from temporis.grammar.parser import ParseResult, parse_date, parse_date_with_form
from temporis.grammar.resolver import resolve

__all__ = [
    "DateExpressionError",
    "ParseError",
    "ParseErrorReason",
    "ParseResult",
    "ResolveError",
    "ResolveErrorReason",
    "classify",
    "parse_date",
    "parse_date_with_form",
    "resolve",
]
