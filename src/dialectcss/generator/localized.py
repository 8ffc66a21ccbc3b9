"""Localized dialect generation: the reverse direction of the parser."""

from __future__ import annotations

import datetime as _dt

from dialectcss.dictionary import AliasDictionary, default_dictionary
from dialectcss.model.rules import RuleMap
from dialectcss.translate import ValueTranslator

__all__ = ["export_theme", "generate_localized", "localized_category"]

CATEGORY_TITLES: dict[str, str] = {
    "message": "消息样式",
    "input": "输入样式",
    "layout": "布局样式",
    "controls": "控件样式",
    "icons": "图标样式",
    "other": "其他样式",
}

DEFAULT_THEME_NAME = "自定义"


def localized_category(selector: str) -> str:
    if any(token in selector for token in (".mes", ".avatar", ".ch_name", ".timestamp")):
        return "message"
    if any(token in selector for token in ("#send", "textarea", "#stop")):
        return "input"
    if selector == "body" or any(token in selector for token in ("#chat", "#top-bar", ".drawer")):
        return "layout"
    if any(token in selector for token in ("button", ".swipe", "scrollbar")):
        return "controls"
    if "NavDrawerIcon" in selector or "Icon" in selector:
        return "icons"
    return "other"


def generate_localized(
    rules: RuleMap,
    dictionary: AliasDictionary | None = None,
    translator: ValueTranslator | None = None,
) -> str:
    """Render *rules* as localized text grouped under ``# <category>`` headers.

    Selectors, properties and values with a known alias are written with it;
    everything else is written verbatim.
    """
    dictionary = dictionary or default_dictionary()
    translator = translator or ValueTranslator(dictionary)

    buckets: dict[str, list[str]] = {category: [] for category in CATEGORY_TITLES}
    for selector, props in rules.items():
        if not props:
            continue
        lines = [f"{dictionary.element_alias(selector)} {{"]
        for prop, value in props.items():
            lines.append(f"  {dictionary.property_alias(prop)}: {translator.format(value, prop)}")
        lines.append("}")
        buckets[localized_category(selector)].append("\n".join(lines) + "\n")

    sections: list[str] = []
    for category, blocks in buckets.items():
        if blocks:
            sections.append(f"# {CATEGORY_TITLES[category]}\n" + "".join(blocks))
    return "\n".join(sections).strip()


def export_theme(
    rules: RuleMap,
    name: str | None = None,
    date: _dt.date | None = None,
    dictionary: AliasDictionary | None = None,
) -> tuple[str, str]:
    """Return ``(filename, localized_text)`` for downloading *rules* as a theme."""
    date = date or _dt.date.today()
    filename = f"视觉主题-{name or DEFAULT_THEME_NAME}-{date.isoformat()}.css"
    return filename, generate_localized(rules, dictionary)
