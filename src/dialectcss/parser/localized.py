"""Line-oriented parser for the localized stylesheet dialect.

Syntax example::

    # 消息样式
    用户消息 {
      背景颜色: #336699
      圆角：8像素
    }
    @用户头像:光环 { 宽度: 20像素; 背景: 渐变(#fff 到 #000) }

Headers (``# ...``) and comments are ignored, decoration blocks
(``@element:name { ... }``) are left to the decoration engine, and malformed
lines are skipped with a warning diagnostic. The parser never raises.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from dialectcss.dictionary import AliasDictionary, default_dictionary
from dialectcss.model.diagnostic import Diagnostic, Severity
from dialectcss.model.rules import RuleMap
from dialectcss.translate import ValueTranslator
from dialectcss.translate.functions import split_top_level

logger = logging.getLogger(__name__)

__all__ = [
    "DECORATION_HEAD_RE",
    "LocalizedParser",
    "ParseResult",
    "parse_localized",
    "split_declaration",
]

COLONS = (":", "：")
DECLARATION_SEPARATORS = ";；"
# "@element<colon>name", the head of a decoration block. Other "@" lines are
# ordinary block headers such as "@font-face {".
DECORATION_HEAD_RE = re.compile(r"@[^:：{}()]+[：:]")


class _State(Enum):
    OUTSIDE = "outside"
    IN_BLOCK = "in_block"
    IN_DECORATION = "in_decoration"


@dataclass(frozen=True)
class ParseResult:
    """Rules parsed from localized text plus any recoverable problems."""

    rules: RuleMap
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def copy(self) -> ParseResult:
        return ParseResult(self.rules.copy(), list(self.diagnostics))

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]


def split_declaration(text: str) -> tuple[str, str] | None:
    """Split ``name<colon>value`` on the earliest of either colon glyph."""
    positions = [i for i in (text.find(c) for c in COLONS) if i != -1]
    if not positions:
        return None
    index = min(positions)
    return text[:index].strip(), text[index + 1:].strip()


def _is_comment(line: str) -> bool:
    # "# Title" is a header, "#id {" and "* {" open blocks.
    if line.endswith("{"):
        return False
    return line.startswith(("//", "/*", "*", "#"))


class LocalizedParser:
    """Parse localized text into a :class:`RuleMap` of canonical declarations."""

    def __init__(
        self,
        dictionary: AliasDictionary | None = None,
        translator: ValueTranslator | None = None,
    ) -> None:
        self.dictionary = dictionary or default_dictionary()
        self.translator = translator or ValueTranslator(self.dictionary)

    def parse(self, text: str) -> ParseResult:
        rules = RuleMap()
        diagnostics: list[Diagnostic] = []
        state = _State.OUTSIDE
        resume = _State.OUTSIDE
        selector: str | None = None
        header_line = 0
        current: dict[str, str] = {}
        in_comment = False

        def warn(rule: str, message: str, lineno: int, sel: str | None = None) -> None:
            logger.warning("line %d: %s", lineno, message)
            diagnostics.append(
                Diagnostic(rule=rule, severity=Severity.WARNING, message=message,
                           line=lineno, selector=sel)
            )

        def flush() -> None:
            if selector is not None and current:
                rules.update(selector, current)

        for lineno, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()

            if state is _State.IN_DECORATION:
                if "}" in line:
                    state = resume
                continue
            if in_comment:
                in_comment = "*/" not in line
                continue
            if not line:
                continue
            if line.startswith("/*") and "*/" not in line:
                in_comment = True
                continue
            if DECORATION_HEAD_RE.match(line):
                if "}" not in line:
                    resume, state = state, _State.IN_DECORATION
                continue
            if _is_comment(line):
                continue

            if line.endswith("{"):
                if state is _State.IN_BLOCK:
                    warn("unclosed_block", f"Block opened on line {header_line} was not closed",
                         header_line, selector)
                    flush()
                header = line[:-1].strip()
                current = {}
                header_line = lineno
                if not header:
                    warn("missing_element", "Block has no element name", lineno)
                    selector = None
                else:
                    selector = self._resolve_header(header, lineno, warn)
                state = _State.IN_BLOCK
                continue

            if line.startswith("}"):
                if state is _State.IN_BLOCK:
                    flush()
                selector = None
                current = {}
                state = _State.OUTSIDE
                continue

            if state is not _State.IN_BLOCK:
                warn("stray_line", f"Ignoring text outside any block: {line!r}", lineno)
                continue

            for chunk in split_top_level(line, DECLARATION_SEPARATORS):
                if not chunk:
                    continue
                self._parse_declaration(chunk, lineno, selector, current, warn)

        if state is _State.IN_BLOCK:
            warn("unclosed_block", f"Block opened on line {header_line} was not closed",
                 header_line, selector)
            flush()

        return ParseResult(rules=rules, diagnostics=diagnostics)

    def _resolve_header(self, header: str, lineno: int, warn) -> str:
        selector = self.dictionary.resolve_element(header)
        if selector == header and not self.dictionary.looks_like_selector(header):
            warn("unknown_element", f"Unknown element alias {header!r}", lineno, header)
        return selector

    def _parse_declaration(self, chunk: str, lineno: int, selector: str | None,
                           current: dict[str, str], warn) -> None:
        pair = split_declaration(chunk)
        if pair is None:
            warn("missing_separator", f"Declaration has no colon: {chunk!r}", lineno, selector)
            return
        name, raw_value = pair
        if not name or not raw_value:
            warn("empty_declaration", f"Declaration is missing a name or value: {chunk!r}",
                 lineno, selector)
            return
        prop = self.dictionary.resolve_property(name)
        if prop == name and not self.dictionary.looks_like_property(name):
            warn("unknown_property", f"Unknown property alias {name!r}", lineno, selector)
        value = self.translator.translate(raw_value, prop)
        if value:
            current[prop] = value


def parse_localized(text: str, dictionary: AliasDictionary | None = None) -> ParseResult:
    """Parse localized *text* with a fresh :class:`LocalizedParser`."""
    return LocalizedParser(dictionary).parse(text)
