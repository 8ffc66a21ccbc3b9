"""Balanced-parenthesis scanning for function-call values such as ``rotate(45deg)``."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

# A call name: letters (any script), digits, '-' and '_', not starting with a
# digit, not glued to a preceding identifier character.
_CALL_RE = re.compile(r"(?<![\w-])([^\W\d][\w-]*)\(")


@dataclass(frozen=True)
class Call:
    """A ``name(args)`` span inside a value string."""

    name: str
    args: str
    start: int
    end: int  # index just past the closing parenthesis


def find_close(text: str, open_index: int) -> int:
    """Index of the parenthesis closing the one at *open_index*, or -1."""
    depth = 0
    quote: str | None = None
    for i in range(open_index, len(text)):
        ch = text[i]
        if quote:
            if ch == quote:
                quote = None
            continue
        if ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1


def whole_call(value: str) -> Call | None:
    """Return the call when *value* is exactly one ``name(args)`` expression."""
    match = _CALL_RE.match(value)
    if match is None:
        return None
    close = find_close(value, match.end() - 1)
    if close != len(value) - 1:
        return None
    return Call(match.group(1), value[match.end():close], 0, len(value))


def rewrite_calls(value: str, rewrite: Callable[[str, str], str | None]) -> str:
    """Rewrite every top-level call in *value*.

    *rewrite* receives ``(name, args)`` and returns the replacement text, or
    None to keep the original name. Arguments of kept calls are rewritten
    recursively; a rewritten call is responsible for its own arguments.
    """
    out: list[str] = []
    pos = 0
    while True:
        match = _CALL_RE.search(value, pos)
        if match is None:
            break
        close = find_close(value, match.end() - 1)
        if close == -1:
            break
        name = match.group(1)
        args = value[match.end():close]
        out.append(value[pos:match.start()])
        replacement = rewrite(name, args)
        if replacement is None:
            out.append(f"{name}({rewrite_calls(args, rewrite)})")
        else:
            out.append(replacement)
        pos = close + 1
    out.append(value[pos:])
    return "".join(out)


def split_top_level(text: str, separators: str = ",") -> list[str]:
    """Split *text* on any character of *separators* outside parentheses and quotes."""
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    start = 0
    for i, ch in enumerate(text):
        if quote:
            if ch == quote:
                quote = None
            continue
        if ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch in separators and depth == 0:
            parts.append(text[start:i].strip())
            start = i + 1
    parts.append(text[start:].strip())
    return parts


def split_whitespace(text: str) -> list[str]:
    """Split *text* on whitespace outside parentheses and quotes."""
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    current: list[str] = []
    for ch in text:
        if quote:
            current.append(ch)
            if ch == quote:
                quote = None
            continue
        if ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch.isspace() and depth == 0:
            if current:
                parts.append("".join(current))
                current = []
            continue
        current.append(ch)
    if current:
        parts.append("".join(current))
    return parts
