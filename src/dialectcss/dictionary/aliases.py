"""Immutable bidirectional alias tables built once from the source pairs."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from dialectcss.dictionary import tables

__all__ = ["AliasTable", "AliasDictionary", "default_dictionary"]

# Selector syntax characters: a header containing one of these is a selector,
# not an alias.
_SELECTOR_CHARS_RE = re.compile(r"[.#@\[\]:>*~+(),=]")
_TAG_RE = re.compile(r"^[a-z][a-z0-9]*$")
_CANONICAL_PROPERTY_RE = re.compile(r"^-{0,2}[a-zA-Z][a-zA-Z0-9-]*$")


@dataclass(frozen=True)
class AliasTable:
    """One forward/reverse pair of lookups.

    ``forward`` maps every localized alias to its canonical token. ``reverse``
    maps a canonical token back to the first alias registered for it.
    """

    name: str
    forward: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    reverse: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_pairs(cls, name: str, pairs: Iterable[tuple[str, str]]) -> AliasTable:
        forward: dict[str, str] = {}
        reverse: dict[str, str] = {}
        for alias, canonical in pairs:
            existing = forward.get(alias)
            if existing is not None and existing != canonical:
                raise ValueError(
                    f"{name} alias {alias!r} maps to both {existing!r} and {canonical!r}"
                )
            forward[alias] = canonical
            reverse.setdefault(canonical, alias)
        return cls(name, MappingProxyType(forward), MappingProxyType(reverse))

    def resolve(self, alias: str) -> str:
        """Canonical token for *alias*, or *alias* itself when unknown."""
        return self.forward.get(alias, alias)

    def alias_for(self, canonical: str) -> str:
        """Preferred alias for *canonical*, or *canonical* itself when unknown."""
        return self.reverse.get(canonical, canonical)

    def lookup(self, alias: str) -> str | None:
        return self.forward.get(alias)

    def reverse_lookup(self, canonical: str) -> str | None:
        return self.reverse.get(canonical)

    def __contains__(self, alias: object) -> bool:
        return alias in self.forward

    def __len__(self) -> int:
        return len(self.forward)


@dataclass(frozen=True)
class AliasDictionary:
    """All alias tables used by the translator, parser and generator."""

    elements: AliasTable
    properties: AliasTable
    keywords: AliasTable
    units: AliasTable
    functions: AliasTable
    scoped_keywords: Mapping[str, AliasTable] = field(default_factory=lambda: MappingProxyType({}))
    forward_only_units: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_tables(
        cls,
        elements: Iterable[tuple[str, str]] = tables.ELEMENT_ALIASES,
        properties: Iterable[tuple[str, str]] = tables.PROPERTY_ALIASES,
        keywords: Iterable[tuple[str, str]] = tables.KEYWORD_ALIASES,
        units: Iterable[tuple[str, str]] = tables.UNIT_ALIASES,
        functions: Iterable[tuple[str, str]] = tables.FUNCTION_ALIASES,
        scoped_keywords: Mapping[str, Iterable[tuple[str, str]]] = tables.SCOPED_KEYWORD_ALIASES,
        forward_only_units: Iterable[tuple[str, str]] = tables.FORWARD_ONLY_UNITS,
    ) -> AliasDictionary:
        unit_table = AliasTable.from_pairs("unit", units)
        extra_units = dict(forward_only_units)
        clash = set(extra_units) & set(unit_table.forward)
        if clash:
            raise ValueError(f"forward-only units shadow unit aliases: {sorted(clash)}")
        return cls(
            elements=AliasTable.from_pairs("element", elements),
            properties=AliasTable.from_pairs("property", properties),
            keywords=AliasTable.from_pairs("keyword", keywords),
            units=unit_table,
            functions=AliasTable.from_pairs("function", functions),
            scoped_keywords=MappingProxyType({
                prop: AliasTable.from_pairs(f"{prop} keyword", pairs)
                for prop, pairs in scoped_keywords.items()
            }),
            forward_only_units=MappingProxyType(extra_units),
        )

    # ---- elements ----

    def resolve_element(self, alias: str) -> str:
        return self.elements.resolve(alias.strip())

    def element_alias(self, selector: str) -> str:
        return self.elements.alias_for(selector)

    def is_known_element(self, alias: str) -> bool:
        return alias.strip() in self.elements

    @staticmethod
    def looks_like_selector(text: str) -> bool:
        """True for raw selectors such as ``.cls``, ``#id``, ``a:hover`` or ``@font-face``."""
        text = text.strip()
        return bool(_SELECTOR_CHARS_RE.search(text) or _TAG_RE.match(text))

    # ---- properties ----

    def resolve_property(self, alias: str) -> str:
        return self.properties.resolve(alias.strip())

    def property_alias(self, prop: str) -> str:
        return self.properties.alias_for(prop)

    def is_known_property(self, alias: str) -> bool:
        return alias.strip() in self.properties

    @staticmethod
    def looks_like_property(text: str) -> bool:
        return bool(_CANONICAL_PROPERTY_RE.match(text.strip()))

    # ---- keywords ----

    def resolve_keyword(self, value: str, prop: str | None = None) -> str | None:
        """Canonical keyword for *value*, property-scoped entries first."""
        scoped = self.scoped_keywords.get(prop) if prop else None
        if scoped is not None:
            hit = scoped.lookup(value)
            if hit is not None:
                return hit
        return self.keywords.lookup(value)

    def keyword_alias(self, value: str, prop: str | None = None) -> str | None:
        scoped = self.scoped_keywords.get(prop) if prop else None
        if scoped is not None:
            hit = scoped.reverse_lookup(value)
            if hit is not None:
                return hit
        return self.keywords.reverse_lookup(value)

    # ---- units ----

    def localized_units(self) -> dict[str, str]:
        """Every accepted localized unit suffix, including forward-only ones."""
        merged = dict(self.units.forward)
        merged.update(self.forward_only_units)
        return merged

    def table(self, name: str) -> AliasTable:
        try:
            return {
                "elements": self.elements,
                "properties": self.properties,
                "keywords": self.keywords,
                "units": self.units,
                "functions": self.functions,
            }[name]
        except KeyError:
            raise KeyError(f"Unknown alias table: {name!r}") from None


@functools.lru_cache(maxsize=1)
def default_dictionary() -> AliasDictionary:
    """The shared dictionary built from :mod:`dialectcss.dictionary.tables`."""
    return AliasDictionary.from_tables()
