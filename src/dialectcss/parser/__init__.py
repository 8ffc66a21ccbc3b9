from dialectcss.parser.cache import ResultCache, signature
from dialectcss.parser.canonical import ImportResult, import_theme, normalize_value, parse_canonical
from dialectcss.parser.errors import ParseError
from dialectcss.parser.localized import (
    LocalizedParser,
    ParseResult,
    parse_localized,
    split_declaration,
)

__all__ = [
    "ImportResult",
    "LocalizedParser",
    "ParseError",
    "ParseResult",
    "ResultCache",
    "import_theme",
    "normalize_value",
    "parse_canonical",
    "parse_localized",
    "signature",
    "split_declaration",
]
