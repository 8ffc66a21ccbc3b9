"""RuleMap: ordered selector -> property map collection."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

PropertyMap = dict[str, str]


class RuleMap:
    """Ordered collection of ``(selector, properties)`` pairs.

    Selectors are unique keys kept in first-insertion order. A selector whose
    property map becomes empty is removed, so iterating a RuleMap never yields
    an empty rule.
    """

    def __init__(
        self,
        rules: Mapping[str, Mapping[str, str]]
        | Iterable[tuple[str, Mapping[str, str]]]
        | None = None,
    ) -> None:
        self._rules: dict[str, PropertyMap] = {}
        if rules is None:
            return
        items = rules.items() if isinstance(rules, Mapping) else rules
        for selector, properties in items:
            self.update(selector, properties)

    # ---- mutation ----

    def set(self, selector: str, properties: Mapping[str, str]) -> None:
        """Replace the properties of *selector*; an empty map removes it."""
        if properties:
            self._rules[selector] = dict(properties)
        else:
            self._rules.pop(selector, None)

    def update(self, selector: str, properties: Mapping[str, str]) -> None:
        """Merge *properties* into *selector*, later values winning."""
        if not properties:
            return
        self._rules.setdefault(selector, {}).update(properties)

    def set_property(self, selector: str, prop: str, value: str) -> None:
        self._rules.setdefault(selector, {})[prop] = value

    def remove_property(self, selector: str, prop: str) -> None:
        props = self._rules.get(selector)
        if props is None:
            return
        props.pop(prop, None)
        if not props:
            del self._rules[selector]

    def remove(self, selector: str) -> None:
        self._rules.pop(selector, None)

    # ---- read access ----

    def get(self, selector: str) -> PropertyMap | None:
        props = self._rules.get(selector)
        return dict(props) if props is not None else None

    def selectors(self) -> list[str]:
        return list(self._rules)

    def items(self) -> list[tuple[str, PropertyMap]]:
        return [(sel, dict(props)) for sel, props in self._rules.items()]

    def copy(self) -> RuleMap:
        return RuleMap(self._rules)

    def merged(self, other: RuleMap) -> RuleMap:
        """Return a new map with *other* layered on top of this one."""
        result = self.copy()
        for selector, props in other.items():
            result.update(selector, props)
        return result

    def to_dict(self) -> dict[str, PropertyMap]:
        return {sel: dict(props) for sel, props in self._rules.items()}

    def __contains__(self, selector: object) -> bool:
        return selector in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        return bool(self._rules)

    def __eq__(self, other: object) -> bool:
        # Order-insensitive: same selectors with the same property pairs.
        if isinstance(other, RuleMap):
            return self._rules == other._rules
        if isinstance(other, Mapping):
            return self._rules == {k: dict(v) for k, v in other.items()}
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"RuleMap({self._rules!r})"
