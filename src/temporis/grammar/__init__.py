"""Date-expression grammar.

The grammar layer classifies a short typed expression ("2monday", "eoq", "16-Jan-2024") into a
strict `ParsedForm` object, which is then resolved into a calendar date against a reference date.
"""
