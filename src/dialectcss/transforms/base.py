"""Base protocol for rule-map transforms."""

from __future__ import annotations

from typing import Protocol

from dialectcss.model.rules import RuleMap


class RuleTransform(Protocol):
    """A rule-map-to-rule-map rewriting step run between parsing and generation."""

    def apply(self, rules: RuleMap) -> RuleMap: ...
