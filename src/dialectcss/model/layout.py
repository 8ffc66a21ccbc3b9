"""Layout intent model: mode, anchor position, offsets and rotation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping


class LayoutMode(Enum):
    NONE = "none"
    SQUEEZE = "squeeze"
    OVERLAY = "overlay"

    @classmethod
    def parse(cls, value: str | None) -> LayoutMode:
        """Map a canonical mode string to a mode; missing or unknown is NONE."""
        if not value:
            return cls.NONE
        try:
            return cls(value.strip())
        except ValueError:
            return cls.NONE


class AnchorPosition(Enum):
    """Where an anchor sits relative to its message: ``<edge>-<alignment>``."""

    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    RIGHT_TOP = "right-top"
    RIGHT_MIDDLE = "right-middle"
    RIGHT_BOTTOM = "right-bottom"
    LEFT_TOP = "left-top"
    LEFT_MIDDLE = "left-middle"
    LEFT_BOTTOM = "left-bottom"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"

    @classmethod
    def parse(cls, value: str | None) -> AnchorPosition | None:
        if not value:
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None

    @property
    def edge(self) -> str:
        return self.value.split("-", 1)[0]

    @property
    def alignment(self) -> str:
        return self.value.split("-", 1)[1]

    @property
    def vertical(self) -> str:
        """Vertical component: ``top``, ``middle`` or ``bottom``."""
        if self.edge in ("top", "bottom"):
            return self.edge
        return self.alignment

    @property
    def horizontal(self) -> str | None:
        """Horizontal component for top/bottom anchors, else None."""
        if self.edge in ("top", "bottom"):
            return self.alignment
        return None

    @property
    def is_vertical_edge(self) -> bool:
        return self.edge in ("top", "bottom")

    @property
    def reorders(self) -> bool:
        """True when the anchor paints after its siblings in flow layout."""
        return self.edge in ("bottom", "right")


@dataclass(frozen=True)
class LayoutIntent:
    """Declarative placement request carried by an anchor rule.

    Built from the ``<prefix>-layout-mode``, ``<prefix>-position``,
    ``<prefix>-offset-x``, ``<prefix>-offset-y`` and ``<prefix>-rotate``
    properties of an anchor rule, plus ``info-direction`` for info anchors.
    """

    mode: LayoutMode = LayoutMode.NONE
    position: AnchorPosition | None = None
    offset_x: str = "0px"
    offset_y: str = "0px"
    rotation: str = "0deg"
    direction: str | None = None

    @classmethod
    def from_properties(cls, props: Mapping[str, str], prefix: str) -> LayoutIntent:
        return cls(
            mode=LayoutMode.parse(props.get(f"{prefix}-layout-mode")),
            position=AnchorPosition.parse(props.get(f"{prefix}-position")),
            offset_x=props.get(f"{prefix}-offset-x") or "0px",
            offset_y=props.get(f"{prefix}-offset-y") or "0px",
            rotation=props.get(f"{prefix}-rotate") or "0deg",
            direction=props.get(f"{prefix}-direction") or None,
        )

    @property
    def has_offset(self) -> bool:
        return not (_is_zero(self.offset_x) and _is_zero(self.offset_y))

    @property
    def is_rotated(self) -> bool:
        return not _is_zero(self.rotation)


def _is_zero(value: str) -> bool:
    """True for ``0``, ``0px``, ``0deg``, ``-0.0turn`` and similar."""
    number = value.strip().lstrip("+-")
    digits = ""
    for ch in number:
        if ch.isdigit() or ch == ".":
            digits += ch
        else:
            break
    if not digits or digits == ".":
        return False
    try:
        return float(digits) == 0.0
    except ValueError:
        return False
