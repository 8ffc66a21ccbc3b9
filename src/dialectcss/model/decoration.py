"""Decoration rule model: synthetic elements attached to matching page elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

OVERFLOW_PROPERTY = "decoration-overflow-mode"


class OverflowMode(Enum):
    CONTAIN = "contain"
    ALLOW = "allow-overflow"


@dataclass(frozen=True)
class DecorationRule:
    """A named decoration declared by an ``@element:name { ... }`` block.

    ``id`` is derived from the element alias and decoration name so it stays
    stable across edits of the block body.
    """

    id: str
    element_name: str
    decoration_name: str
    selector: str
    styles: dict[str, str] = field(default_factory=dict)
    source: str = ""

    @property
    def class_name(self) -> str:
        return "ve-decoration-" + "-".join(self.decoration_name.split())

    @property
    def overflow_mode(self) -> OverflowMode:
        if self.styles.get(OVERFLOW_PROPERTY) == OverflowMode.ALLOW.value:
            return OverflowMode.ALLOW
        return OverflowMode.CONTAIN

    @property
    def node_styles(self) -> dict[str, str]:
        """Styles applied to the synthetic node (control property removed)."""
        styles = {k: v for k, v in self.styles.items() if k != OVERFLOW_PROPERTY}
        styles.setdefault("pointer-events", "none")
        return styles


@dataclass(frozen=True)
class ReconcileDiff:
    """Rule ids affected by one reconciliation pass."""

    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()
    changed: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.changed)


@dataclass
class SyntheticNode:
    """A decoration node materialized under an anchor element."""

    rule_id: str
    decoration_name: str
    class_name: str
    styles: dict[str, str] = field(default_factory=dict)
