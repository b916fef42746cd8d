"""Text normalization for deterministic date-expression classification."""

from __future__ import annotations


def normalize_expression(text: str) -> str:
    """Normalize a raw date expression before matching it against the grammar.

    Normalization is intentionally conservative:
        - Trim surrounding whitespace.
        - Lowercase.
        - Replace common unicode dashes with an ASCII hyphen.

    Inner whitespace and punctuation are kept, so inputs like "to day" or "monday." still fail to
    match any rule instead of being silently repaired.
    """

    value = (text or "").strip().lower()
    return value.replace("—", "-").replace("–", "-")
