"""Lark-based parser for plain canonical stylesheets (theme import)."""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from lark import Lark, Token, Transformer

from dialectcss.model.rules import RuleMap
from dialectcss.parser.errors import ParseError
from dialectcss.parser.localized import LocalizedParser

logger = logging.getLogger(__name__)

__all__ = ["ImportResult", "import_theme", "normalize_value", "parse_canonical"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_value(value: str) -> str:
    """Drop ``!important``, collapse whitespace and prefer double quotes."""
    value = _IMPORTANT_RE.sub("", value.strip())
    value = _WHITESPACE_RE.sub(" ", value)
    return value.replace("'", '"')


def _blank_comment(match: re.Match[str]) -> str:
    # Keep newlines so error positions still point at the original lines.
    return "\n" * match.group(0).count("\n")


class CanonicalTransformer(Transformer):
    """Transform a Lark parse tree into a :class:`RuleMap`."""

    def declaration(self, items: list[Token]) -> tuple[str, str]:
        name, value = items
        return str(name).strip(), normalize_value(str(value))

    def body(self, items: list[tuple[str, str]]) -> dict[str, str]:
        return {name: value for name, value in items if value}

    def ruleset(self, items: list[object]) -> tuple[str, dict[str, str]]:
        selector, props = items
        return " ".join(str(selector).split()), props  # type: ignore[return-value]

    def start(self, items: list[tuple[str, dict[str, str]]]) -> RuleMap:
        rules = RuleMap()
        for selector, props in items:
            rules.update(selector, props)
        return rules


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_canonical(source: str) -> RuleMap:
    """Parse canonical stylesheet text into a RuleMap.

    Duplicate selectors are merged with later declarations winning.
    Raises :class:`ParseError` with line/column on malformed input.
    """
    cleaned = _COMMENT_RE.sub(_blank_comment, source)
    try:
        tree = _parser().parse(cleaned)
    except Exception as e:
        # Lark exceptions carry line/column attributes.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    return CanonicalTransformer().transform(tree)


@dataclass(frozen=True)
class ImportResult:
    rules: RuleMap
    format: str  # "localized" or "canonical"


def import_theme(text: str, parser: LocalizedParser | None = None) -> ImportResult:
    """Import a theme, trying the localized dialect before canonical CSS.

    Raises :class:`ParseError` when neither reading yields rules and the text
    is not valid canonical CSS.
    """
    parser = parser or LocalizedParser()
    localized = parser.parse(text)
    if localized.rules:
        return ImportResult(localized.rules, "localized")
    logger.info("No localized rules found, reading theme as canonical CSS")
    return ImportResult(parse_canonical(text), "canonical")
