"""Canonical CSS generation with deterministic property order."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, replace

from dialectcss.generator.shorthand import merge_shorthand
from dialectcss.model.rules import RuleMap

__all__ = [
    "CanonicalOptions",
    "PROPERTY_ORDER",
    "categorize",
    "export",
    "generate_canonical",
    "minify_css",
    "sort_properties",
]

PROPERTY_ORDER: tuple[str, ...] = (
    # layout
    "position", "top", "right", "bottom", "left", "z-index",
    "display", "flex", "flex-direction", "flex-wrap", "justify-content", "align-items",
    "grid", "grid-template-columns", "grid-template-rows", "gap",
    "float", "clear",
    # box model
    "width", "height", "min-width", "min-height", "max-width", "max-height",
    "margin", "margin-top", "margin-right", "margin-bottom", "margin-left",
    "padding", "padding-top", "padding-right", "padding-bottom", "padding-left",
    # border
    "border", "border-width", "border-style", "border-color",
    "border-top", "border-right", "border-bottom", "border-left",
    "border-radius", "border-top-left-radius", "border-top-right-radius",
    "border-bottom-left-radius", "border-bottom-right-radius",
    "outline", "outline-width", "outline-style", "outline-color",
    # background
    "background", "background-color", "background-image", "background-repeat",
    "background-position", "background-size", "background-attachment",
    # text
    "color", "font", "font-family", "font-size", "font-weight", "font-style",
    "line-height", "letter-spacing", "text-align", "text-decoration",
    "text-transform", "white-space", "word-break", "word-spacing",
    # effects
    "opacity", "visibility", "overflow", "overflow-x", "overflow-y",
    "box-shadow", "text-shadow",
    "transform", "transition", "animation",
    "filter", "backdrop-filter",
    # other
    "cursor", "user-select", "pointer-events",
)
_PRIORITY = {name: index for index, name in enumerate(PROPERTY_ORDER)}

CATEGORY_TITLES: dict[str, str] = {
    "layout": "布局样式",
    "message": "消息样式",
    "input": "输入样式",
    "controls": "控件样式",
    "popup": "弹窗样式",
    "other": "其他样式",
}


@dataclass(frozen=True)
class CanonicalOptions:
    use_important: bool = True
    minify: bool = False
    add_comments: bool = False
    group_by_category: bool = False
    sort_properties: bool = True
    indent_size: int = 2

    def with_changes(self, **changes: object) -> CanonicalOptions:
        return replace(self, **changes)  # type: ignore[arg-type]


def sort_properties(props: dict[str, str]) -> list[tuple[str, str]]:
    """Listed properties in priority order, then the rest alphabetically."""
    return sorted(
        props.items(),
        key=lambda item: (0, _PRIORITY[item[0]], "") if item[0] in _PRIORITY else (1, 0, item[0]),
    )


def categorize(selector: str) -> str:
    if "#chat" in selector or "#top-bar" in selector or ".drawer" in selector:
        return "layout"
    if ".mes" in selector or ".avatar" in selector or ".ch_name" in selector:
        return "message"
    if "#send" in selector or "textarea" in selector:
        return "input"
    if "button" in selector or ".swipe" in selector:
        return "controls"
    if ".popup" in selector or "modal" in selector:
        return "popup"
    return "other"


def _render_rule(selector: str, props: dict[str, str], options: CanonicalOptions) -> str:
    indent = " " * options.indent_size
    entries = sort_properties(props) if options.sort_properties else list(props.items())
    lines = [f"{selector} {{"]
    for prop, value in entries:
        if options.use_important and not value.rstrip().endswith("!important"):
            value = f"{value} !important"
        lines.append(f"{indent}{prop}: {value};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def generate_canonical(rules: RuleMap, options: CanonicalOptions | None = None) -> str:
    """Render *rules* as canonical CSS.

    Longhand margin/padding sides and border triples are always merged into
    shorthands first so the output never carries both forms of a merged set.
    """
    options = options or CanonicalOptions()
    prepared = [(sel, merge_shorthand(props)) for sel, props in rules.items()]
    prepared = [(sel, props) for sel, props in prepared if props]
    if not prepared:
        return ""

    parts: list[str] = []
    if options.add_comments:
        parts.append(
            "/*\n * Generated by dialectcss\n"
            f" * Rules: {len(prepared)}\n */\n\n"
        )

    if options.group_by_category:
        buckets: dict[str, list[tuple[str, dict[str, str]]]] = {c: [] for c in CATEGORY_TITLES}
        for sel, props in prepared:
            buckets[categorize(sel)].append((sel, props))
        for category, entries in buckets.items():
            if not entries:
                continue
            if options.add_comments:
                parts.append(f"/* === {CATEGORY_TITLES[category]} === */\n")
            parts.extend(_render_rule(sel, props, options) for sel, props in entries)
            parts.append("\n")
    else:
        parts.extend(_render_rule(sel, props, options) for sel, props in prepared)

    css = "".join(parts)
    if options.minify:
        return minify_css(css)
    return css.rstrip("\n") + "\n"


_MINIFY_STEPS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"/\*.*?\*/", re.DOTALL), ""),
    (re.compile(r"\s+"), " "),
    (re.compile(r"\s*([{}:;,])\s*"), r"\1"),
    (re.compile(r";}"), "}"),
)


def minify_css(css: str) -> str:
    for pattern, replacement in _MINIFY_STEPS:
        css = pattern.sub(replacement, css)
    return css.strip()


def _render_scss(rules: RuleMap) -> str:
    out: list[str] = []
    for selector, props in rules.items():
        out.append(f"{selector} {{")
        out.extend(f"  {prop}: {value};" for prop, value in props.items())
        out.append("}")
    return "\n".join(out) + ("\n" if out else "")


def export(rules: RuleMap, fmt: str = "css", options: CanonicalOptions | None = None) -> str:
    """Export *rules* as ``css``, ``scss`` or ``json``."""
    if fmt == "css":
        return generate_canonical(rules, options)
    if fmt == "scss":
        return _render_scss(rules)
    if fmt == "json":
        return json.dumps([[sel, props] for sel, props in rules.items()], ensure_ascii=False, indent=2)
    raise ValueError(f"Unknown export format: {fmt!r}")
