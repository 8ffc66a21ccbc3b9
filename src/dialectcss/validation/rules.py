"""Validation rules for localized stylesheet text.

Each rule is a function taking a :class:`StyleSource` and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from dialectcss.decoration.engine import DECORATION_RE
from dialectcss.dictionary import AliasDictionary, default_dictionary
from dialectcss.model.diagnostic import Diagnostic, Severity
from dialectcss.parser.localized import (
    COLONS,
    DECLARATION_SEPARATORS,
    DECORATION_HEAD_RE,
    split_declaration,
)
from dialectcss.translate.functions import split_top_level

_CANONICAL_PROPERTY_RE = re.compile(r"^-?[a-z][a-z-]*$")
_AT_RULE_RE = re.compile(r"@-?[a-z][a-z-]*(?![^\s{])")


class LineKind(Enum):
    BLANK = "blank"
    COMMENT = "comment"
    OPEN = "open"
    CLOSE = "close"
    DECLARATION = "declaration"
    OUTSIDE = "outside"
    DECORATION = "decoration"


@dataclass(frozen=True)
class SourceLine:
    number: int
    text: str
    kind: LineKind
    header: str | None = None


@dataclass
class StyleSource:
    """Localized text split into classified lines.

    Decoration blocks are classified as ``DECORATION`` in their entirety so
    the element-block rules never see them.
    """

    text: str
    dictionary: AliasDictionary = field(default_factory=default_dictionary)
    lines: list[SourceLine] = field(default_factory=list)
    ends_in_block: bool = False

    @classmethod
    def scan(cls, text: str, dictionary: AliasDictionary | None = None) -> StyleSource:
        source = cls(text, dictionary or default_dictionary())
        in_block = False
        decoration_start: int | None = None
        in_comment = False
        for number, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if decoration_start is not None:
                source.lines.append(SourceLine(number, line, LineKind.DECORATION))
                if "}" in line:
                    decoration_start = None
                continue
            if in_comment:
                in_comment = "*/" not in line
                kind, header = LineKind.COMMENT, None
            elif not line:
                kind, header = LineKind.BLANK, None
            elif line.startswith("/*") and "*/" not in line:
                in_comment = True
                kind, header = LineKind.COMMENT, None
            elif DECORATION_HEAD_RE.match(line):
                if "}" not in line:
                    decoration_start = number
                kind, header = LineKind.DECORATION, None
            elif line.endswith("{"):
                in_block = True
                kind, header = LineKind.OPEN, line[:-1].strip()
            elif line.startswith("}"):
                in_block = False
                kind, header = LineKind.CLOSE, None
            elif line.startswith(("#", "//", "/*", "*")):
                kind, header = LineKind.COMMENT, None
            elif in_block:
                kind, header = LineKind.DECLARATION, None
            else:
                kind, header = LineKind.OUTSIDE, None
            source.lines.append(SourceLine(number, line, kind, header))
        source.ends_in_block = in_block
        return source

    def of_kind(self, kind: LineKind) -> list[SourceLine]:
        return [line for line in self.lines if line.kind is kind]


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_block_markers(source: StyleSource) -> list[Diagnostic]:
    """Non-blank input must contain block braces."""
    if not source.text.strip():
        return []
    if "{" in source.text and "}" in source.text:
        return []
    return [
        Diagnostic(
            rule="check_block_markers",
            severity=Severity.ERROR,
            message="No style block markers { } found.",
            fix="Wrap declarations in an element block: 元素名 { 属性: 值 }.",
        )
    ]


def check_declaration_separator(source: StyleSource) -> list[Diagnostic]:
    """Every declaration inside an element block needs a colon."""
    diagnostics: list[Diagnostic] = []
    for line in source.of_kind(LineKind.DECLARATION):
        if not any(colon in line.text for colon in COLONS):
            diagnostics.append(
                Diagnostic(
                    rule="check_declaration_separator",
                    severity=Severity.ERROR,
                    message=f"Declaration has no colon: '{line.text}'.",
                    line=line.number,
                    fix="Separate property and value with ':' or '：'.",
                )
            )
    return diagnostics


def check_unclosed_block(source: StyleSource) -> list[Diagnostic]:
    """The text must not end inside an element block."""
    if not source.ends_in_block:
        return []
    opened = source.of_kind(LineKind.OPEN)
    last = opened[-1] if opened else None
    return [
        Diagnostic(
            rule="check_unclosed_block",
            severity=Severity.ERROR,
            message="Element block is never closed.",
            line=last.number if last else None,
            selector=last.header if last else None,
            fix="Add a closing '}' line.",
        )
    ]


# ---------------------------------------------------------------------------
# Vocabulary rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_known_elements(source: StyleSource) -> list[Diagnostic]:
    """Block headers should be known element aliases or raw selectors."""
    diagnostics: list[Diagnostic] = []
    for line in source.of_kind(LineKind.OPEN):
        header = line.header or ""
        if not header:
            continue
        if source.dictionary.is_known_element(header) or source.dictionary.looks_like_selector(header):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_known_elements",
                severity=Severity.WARNING,
                message=f"Unknown element name '{header}'.",
                line=line.number,
                selector=header,
            )
        )
    return diagnostics


def check_known_properties(source: StyleSource) -> list[Diagnostic]:
    """Property names should be known aliases or canonical-looking names."""
    diagnostics: list[Diagnostic] = []
    for line in source.of_kind(LineKind.DECLARATION):
        for chunk in split_top_level(line.text, DECLARATION_SEPARATORS):
            pair = split_declaration(chunk)
            if pair is None or not pair[0]:
                continue
            name = pair[0]
            if source.dictionary.is_known_property(name) or _CANONICAL_PROPERTY_RE.match(name):
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_known_properties",
                    severity=Severity.WARNING,
                    message=f"Unknown property name '{name}'.",
                    line=line.number,
                )
            )
    return diagnostics


def check_decoration_blocks(source: StyleSource) -> list[Diagnostic]:
    """Every '@' line must start a complete ``@element:name { ... }`` block.

    Canonical at-rule headers such as ``@font-face {`` are left alone.
    """
    diagnostics: list[Diagnostic] = []
    raw_lines = source.text.splitlines()
    for line in source.lines:
        if line.kind is LineKind.COMMENT or not line.text.startswith("@"):
            continue
        if line.kind is LineKind.DECORATION:
            rest = "\n".join(raw_lines[line.number - 1:]).lstrip()
            if DECORATION_RE.match(rest):
                continue
        elif _AT_RULE_RE.match(line.text):
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_decoration_blocks",
                severity=Severity.WARNING,
                message=f"Incomplete decoration block: '{line.text}'.",
                line=line.number,
                fix="Use @元素:装饰名 { 属性: 值 } and close the block with '}'.",
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_block_markers,
    check_declaration_separator,
    check_unclosed_block,
    check_known_elements,
    check_known_properties,
    check_decoration_blocks,
]
