"""Value translation between the localized dialect and canonical CSS values.

``translate`` turns a localized raw value into canonical syntax in a fixed
order: surrounding quotes are stripped, keywords are looked up (entries scoped
to the property first), a whole-value localized function call is rewritten,
``<number><unit>`` is rewritten, then the handler table runs, and anything
left over passes through unchanged. ``format`` is the mirror image.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable

from dialectcss.dictionary import AliasDictionary, default_dictionary
from dialectcss.dictionary.tables import GRADIENT_STOP_SEPARATOR
from dialectcss.translate.colors import hex_to_rgb, is_hex_color
from dialectcss.translate.functions import rewrite_calls, split_top_level, whole_call

logger = logging.getLogger(__name__)

__all__ = ["ValueTranslator", "ValueHandler", "strip_quotes"]

_NUMBER = r"[-+]?(?:\d+(?:\.\d+)?|\.\d+)"

# Keywords that are valid unquoted ``content`` values.
_CONTENT_KEYWORDS = frozenset({
    "none", "normal", "open-quote", "close-quote", "no-open-quote", "no-close-quote",
})

ValueHandler = Callable[["ValueTranslator", str, str], "str | None"]


def strip_quotes(value: str) -> str:
    """Remove one matching pair of surrounding quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        inner = value[1:-1]
        if value[0] not in inner:
            return inner
    return value


def _alternation(tokens: Iterable[str]) -> str:
    ordered = sorted(tokens, key=len, reverse=True)
    return "|".join(re.escape(t) for t in ordered)


# ---------------------------------------------------------------------------
# Handlers (run after keyword, function and unit lookups)
# ---------------------------------------------------------------------------


def _enabled_flag(translator: ValueTranslator, value: str, prop: str) -> str | None:
    """``*-enabled`` switches accept only enabled/disabled."""
    if not prop.endswith("-enabled"):
        return None
    return "enabled" if value == "enabled" else "disabled"


def _hex_color(translator: ValueTranslator, value: str, prop: str) -> str | None:
    if is_hex_color(value):
        return hex_to_rgb(value)
    return None


def _inline_rewrite(translator: ValueTranslator, value: str, prop: str) -> str | None:
    """Rewrite localized calls and unit suffixes embedded in a longer value."""
    result = translator.translate_inline(value)
    return result if result != value else None


DEFAULT_HANDLERS: tuple[ValueHandler, ...] = (_enabled_flag, _hex_color, _inline_rewrite)


class ValueTranslator:
    """Translate values for one dictionary; stateless apart from compiled patterns."""

    def __init__(
        self,
        dictionary: AliasDictionary | None = None,
        handlers: Iterable[ValueHandler] | None = None,
    ) -> None:
        self.dictionary = dictionary or default_dictionary()
        self.handlers: tuple[ValueHandler, ...] = tuple(
            DEFAULT_HANDLERS if handlers is None else handlers
        )
        self._localized_units = self.dictionary.localized_units()
        localized = _alternation(self._localized_units)
        canonical = _alternation(self.dictionary.units.reverse)
        self._localized_number_re = re.compile(rf"^({_NUMBER})({localized})$")
        self._localized_unit_re = re.compile(rf"(?<![\w.])({_NUMBER})({localized})")
        self._canonical_number_re = re.compile(rf"^({_NUMBER})({canonical})$")
        self._canonical_unit_re = re.compile(
            rf"(?<![\w.#-])({_NUMBER})({canonical})(?![\w%])"
        )
        self._owned_translate: dict[str, Callable[[str, str], str]] = {
            "content": self._translate_content,
            "decoration-overflow-mode": self._translate_overflow,
        }
        self._owned_format: dict[str, Callable[[str], str]] = {
            "content": self._format_content,
        }

    # ---- localized -> canonical ----

    def translate(self, raw: str, prop: str) -> str:
        """Canonical value for the localized *raw* value of canonical property *prop*."""
        stripped = raw.strip()
        value = strip_quotes(stripped)
        owner = self._owned_translate.get(prop)
        if owner is not None:
            return owner(value, stripped)
        if not value:
            return value

        keyword = self.dictionary.resolve_keyword(value, prop)
        if keyword is not None:
            return keyword

        call = whole_call(value)
        if call is not None and call.name in self.dictionary.functions:
            return self._translate_call(call.name, call.args)

        match = self._localized_number_re.match(value)
        if match:
            return match.group(1) + self._localized_units[match.group(2)]

        for handler in self.handlers:
            result = handler(self, value, prop)
            if result is not None:
                return result
        return value

    def translate_inline(self, text: str) -> str:
        """Rewrite every localized call and ``<number><unit>`` inside *text*."""
        text = rewrite_calls(text, self._localized_call)
        return self._localized_unit_re.sub(
            lambda m: m.group(1) + self._localized_units[m.group(2)], text
        )

    def _localized_call(self, name: str, args: str) -> str | None:
        if name not in self.dictionary.functions:
            return None
        return self._translate_call(name, args)

    def _translate_call(self, name: str, args: str) -> str:
        canonical = self.dictionary.functions.resolve(name)
        if canonical.endswith("-gradient") and GRADIENT_STOP_SEPARATOR in args:
            stops = [
                self.translate(stop, "background")
                for stop in args.split(GRADIENT_STOP_SEPARATOR)
            ]
            return f"{canonical}({', '.join(stops)})"
        return f"{canonical}({self.translate_inline(args)})"

    def _translate_content(self, value: str, raw: str) -> str:
        scoped = self.dictionary.scoped_keywords.get("content")
        hit = scoped.lookup(value) if scoped is not None else None
        if hit is not None or not value:
            return hit or "''"
        was_quoted = raw != value
        if not was_quoted and (value in _CONTENT_KEYWORDS or whole_call(value)):
            return value
        quote = "'" if '"' in value else '"'
        return f"{quote}{value}{quote}"

    def _translate_overflow(self, value: str, raw: str) -> str:
        scoped = self.dictionary.scoped_keywords.get("decoration-overflow-mode")
        hit = scoped.lookup(value) if scoped is not None else None
        if hit is not None:
            return hit
        if value == "allow-overflow":
            return value
        if value and value != "contain":
            logger.debug("Unknown overflow mode %r, using contain", value)
        return "contain"

    # ---- canonical -> localized ----

    def format(self, value: str, prop: str) -> str:
        """Localized spelling of the canonical *value* of property *prop*."""
        value = value.strip()
        owner = self._owned_format.get(prop)
        if owner is not None:
            return owner(value)
        if not value:
            return value

        alias = self.dictionary.keyword_alias(value, prop)
        if alias is not None:
            return alias

        match = self._canonical_number_re.match(value)
        if match:
            return match.group(1) + self.dictionary.units.alias_for(match.group(2))

        return self.format_inline(value)

    def format_inline(self, text: str) -> str:
        text = rewrite_calls(text, self._canonical_call)
        return self._canonical_unit_re.sub(
            lambda m: m.group(1) + self.dictionary.units.alias_for(m.group(2)), text
        )

    def _canonical_call(self, name: str, args: str) -> str | None:
        localized = self.dictionary.functions.reverse_lookup(name)
        if localized is None:
            return None
        if name.endswith("-gradient"):
            stops = split_top_level(args)
            # Only the exact two-stop form that translate() emits round-trips.
            if len(stops) == 2 and args == ", ".join(stops):
                first, second = (self.format(stop, "background") for stop in stops)
                return f"{localized}({first}{GRADIENT_STOP_SEPARATOR}{second})"
        return f"{localized}({self.format_inline(args)})"

    def _format_content(self, value: str) -> str:
        if value in ("''", '""'):
            scoped = self.dictionary.scoped_keywords.get("content")
            alias = scoped.reverse_lookup("''") if scoped is not None else None
            return alias or value
        return value
