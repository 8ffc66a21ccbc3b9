from dialectcss.validation.rules import ALL_RULES, LineKind, SourceLine, StyleSource
from dialectcss.validation.validator import ValidationError, validate, validate_or_raise

__all__ = [
    "ALL_RULES",
    "LineKind",
    "SourceLine",
    "StyleSource",
    "ValidationError",
    "validate",
    "validate_or_raise",
]
