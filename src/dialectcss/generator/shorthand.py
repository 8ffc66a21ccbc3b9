"""Shorthand merging, expansion and redundancy removal for property maps."""

from __future__ import annotations

import re
from typing import Mapping

from dialectcss.model.rules import RuleMap
from dialectcss.translate.functions import split_whitespace

SIDES = ("top", "right", "bottom", "left")
CORNERS = ("top-left", "top-right", "bottom-right", "bottom-left")
BORDER_PARTS = ("width", "style", "color")

_BORDER_STYLES = frozenset({
    "none", "hidden", "dotted", "dashed", "solid", "double",
    "groove", "ridge", "inset", "outset",
})
_BORDER_WIDTH_RE = re.compile(r"^(?:thin|medium|thick|[-+]?(?:\d+(?:\.\d+)?|\.\d+)[a-z%]*|calc\(.*\))$")


def merge_box(t: str, r: str, b: str, l: str) -> str:
    """Shortest 1-4 value shorthand for four side values."""
    if t == r == b == l:
        return t
    if t == b and r == l:
        return f"{t} {r}"
    if r == l:
        return f"{t} {r} {b}"
    return f"{t} {r} {b} {l}"


def merge_shorthand(props: Mapping[str, str]) -> dict[str, str]:
    """Collapse complete margin/padding sides and border triples.

    The merged shorthand takes the position of the first longhand it replaces
    and the longhands are dropped.
    """
    merged = dict(props)
    for prefix in ("margin", "padding"):
        keys = [f"{prefix}-{side}" for side in SIDES]
        if all(k in merged for k in keys):
            value = merge_box(*(merged[k] for k in keys))
            merged = _replace(merged, keys, prefix, value)
    border_keys = [f"border-{part}" for part in BORDER_PARTS]
    if all(merged.get(k) for k in border_keys):
        value = " ".join(merged[k] for k in border_keys)
        merged = _replace(merged, border_keys, "border", value)
    return merged


def _replace(props: dict[str, str], keys: list[str], shorthand: str, value: str) -> dict[str, str]:
    result: dict[str, str] = {}
    placed = False
    for key, existing in props.items():
        if key in keys or key == shorthand:
            if not placed:
                result[shorthand] = value
                placed = True
            continue
        result[key] = existing
    return result


def expand_shorthand(prop: str, value: str) -> dict[str, str]:
    """Expand a shorthand into longhands; other properties come back unchanged."""
    if prop in ("margin", "padding"):
        parts = split_whitespace(value)
        if 1 <= len(parts) <= 4:
            t = parts[0]
            r = parts[1] if len(parts) > 1 else t
            b = parts[2] if len(parts) > 2 else t
            l = parts[3] if len(parts) > 3 else r
            return dict(zip((f"{prop}-{s}" for s in SIDES), (t, r, b, l)))
    elif prop == "border":
        return _expand_border(value)
    elif prop == "border-radius":
        parts = split_whitespace(value)
        if len(parts) == 1 and "/" not in value:
            return {f"border-{corner}-radius": value for corner in CORNERS}
    return {prop: value}


def _expand_border(value: str) -> dict[str, str]:
    parts = split_whitespace(value)
    found: dict[str, str] = {}
    for part in parts:
        if "style" not in found and part in _BORDER_STYLES:
            found["style"] = part
        elif "width" not in found and _BORDER_WIDTH_RE.match(part):
            found["width"] = part
        elif "color" not in found:
            found["color"] = part
        else:
            return {"border": value}
    return {f"border-{part}": found[part] for part in BORDER_PARTS if part in found}


def remove_redundant(props: Mapping[str, str]) -> dict[str, str]:
    """Drop longhands shadowed by a shorthand present in the same map."""
    cleaned = dict(props)
    shadowed: list[str] = []
    if cleaned.get("border"):
        shadowed += [f"border-{p}" for p in BORDER_PARTS]
        shadowed += [f"border-{s}" for s in SIDES]
    for prefix in ("margin", "padding"):
        if cleaned.get(prefix):
            shadowed += [f"{prefix}-{s}" for s in SIDES]
    background = cleaned.get("background")
    if background and "gradient" not in background:
        shadowed += [
            "background-color", "background-image", "background-repeat",
            "background-position", "background-size",
        ]
    for key in shadowed:
        cleaned.pop(key, None)
    return cleaned


def optimize(rules: RuleMap) -> RuleMap:
    """Merge shorthands and remove redundant longhands in every rule."""
    optimized = RuleMap()
    for selector, props in rules.items():
        optimized.set(selector, remove_redundant(merge_shorthand(props)))
    return optimized
