"""Layout transform: expands anchor layout intents into concrete geometry rules.

An anchor rule (an avatar or message-info element) may carry intent
properties such as ``avatar-layout-mode: overlay`` and
``avatar-position: bottom-right``. The transform removes them and emits
ordinary declarations split across up to four selectors:

- the *flow container* the anchor sits in (squeeze mode only),
- an *ordering wrapper* that moves the anchor after its siblings,
- the *anchor container* holding position/offset/transform, and
- the *content* selector holding the visual properties.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from dialectcss.config import CompilerConfig
from dialectcss.model.layout import AnchorPosition, LayoutIntent, LayoutMode
from dialectcss.model.rules import RuleMap

logger = logging.getLogger(__name__)

_INTENT_SUFFIXES = ("layout-mode", "position", "offset-x", "offset-y", "rotate", "direction")


@dataclass(frozen=True)
class AnchorFamily:
    """Selector pattern and property split for one kind of anchor."""

    prefix: str
    pattern: re.Pattern[str]
    layout_properties: frozenset[str]
    content_suffix: str
    container_trim: re.Pattern[str]
    wrapper_suffix: str | None = None
    squeeze_margin: str | None = None

    @property
    def intent_properties(self) -> tuple[str, ...]:
        return tuple(f"{self.prefix}-{suffix}" for suffix in _INTENT_SUFFIXES)

    def matches(self, selector: str) -> bool:
        return bool(self.pattern.search(selector))

    def has_intent(self, props: dict[str, str]) -> bool:
        return any(name in props for name in self.intent_properties)

    def content_selector(self, selector: str) -> str:
        return selector + self.content_suffix

    def flow_container(self, selector: str) -> str:
        return self.container_trim.sub("", selector)


AVATAR_FAMILY = AnchorFamily(
    prefix="avatar",
    pattern=re.compile(r'is_user="(?:true|false)"\].*\.avatar$'),
    layout_properties=frozenset({
        "position", "top", "right", "bottom", "left", "z-index", "transform",
        "margin", "margin-top", "margin-right", "margin-bottom", "margin-left",
    }),
    content_suffix=" img",
    container_trim=re.compile(r"\s+\.avatar.*$"),
    wrapper_suffix=" > .mesAvatarWrapper",
)

INFO_FAMILY = AnchorFamily(
    prefix="info",
    pattern=re.compile(
        r'(?:\.mesIDDisplay|\.tokenCounterDisplay|is_user="false"\].*\.mes_timer)$'
    ),
    layout_properties=frozenset({
        "position", "display", "flex-direction", "align-items", "justify-content",
        "top", "right", "bottom", "left", "transform", "z-index", "order",
    }),
    content_suffix="",
    container_trim=re.compile(r"\s+\S+$"),
    squeeze_margin="0 2px",
)

ANCHOR_FAMILIES: tuple[AnchorFamily, ...] = (AVATAR_FAMILY, INFO_FAMILY)


def find_family(selector: str, families: tuple[AnchorFamily, ...] = ANCHOR_FAMILIES) -> AnchorFamily | None:
    for family in families:
        if family.matches(selector):
            return family
    return None


# (top, right, bottom, left, centering transform) templates; E is the edge
# distance, x/y the offsets.
_OVERLAY_TABLE: dict[AnchorPosition | None, dict[str, str]] = {
    AnchorPosition.TOP_LEFT: {"top": "calc(-{E} + {y})", "left": "calc(0px + {x})"},
    AnchorPosition.TOP_CENTER: {
        "top": "calc(-{E} + {y})", "left": "50%",
        "transform": "translateX(-50%) translateX({x})",
    },
    AnchorPosition.TOP_RIGHT: {"top": "calc(-{E} + {y})", "right": "calc(0px - {x})"},
    AnchorPosition.RIGHT_TOP: {"top": "calc(0px + {y})", "right": "calc(-{E} - {x})"},
    AnchorPosition.RIGHT_MIDDLE: {
        "top": "50%", "right": "calc(-{E} - {x})",
        "transform": "translateY(-50%) translateY({y})",
    },
    AnchorPosition.RIGHT_BOTTOM: {"bottom": "calc(0px - {y})", "right": "calc(-{E} - {x})"},
    AnchorPosition.LEFT_TOP: {"top": "calc(0px + {y})", "left": "calc(-{E} + {x})"},
    AnchorPosition.LEFT_MIDDLE: {
        "top": "50%", "left": "calc(-{E} + {x})",
        "transform": "translateY(-50%) translateY({y})",
    },
    AnchorPosition.LEFT_BOTTOM: {"bottom": "calc(0px - {y})", "left": "calc(-{E} + {x})"},
    AnchorPosition.BOTTOM_LEFT: {"bottom": "calc(-{E} + {y})", "left": "calc(0px + {x})"},
    AnchorPosition.BOTTOM_CENTER: {
        "bottom": "calc(-{E} + {y})", "left": "50%",
        "transform": "translateX(-50%) translateX({x})",
    },
    AnchorPosition.BOTTOM_RIGHT: {"bottom": "calc(-{E} + {y})", "right": "calc(0px - {x})"},
    None: {"bottom": "calc(-{E} + {y})", "right": "calc(20px + {x})"},
}

_FLEX_ALIGN = {
    "top": "flex-start",
    "left": "flex-start",
    "middle": "center",
    "center": "center",
    "bottom": "flex-end",
    "right": "flex-end",
}


class LayoutTransform:
    """Rewrite anchor rules carrying layout intent into concrete rules.

    Rules that do not match an anchor family, or that carry no intent
    property, pass through unchanged. The input map is never mutated.
    """

    def __init__(
        self,
        config: CompilerConfig | None = None,
        families: tuple[AnchorFamily, ...] = ANCHOR_FAMILIES,
    ) -> None:
        self.config = config or CompilerConfig()
        self.families = families

    def apply(self, rules: RuleMap) -> RuleMap:
        result = RuleMap()
        for selector, props in rules.items():
            family = find_family(selector, self.families)
            if family is None or not family.has_intent(props):
                result.update(selector, props)
                continue
            for target, expanded in self.expand(family, selector, props):
                result.update(target, expanded)
        return result

    def expand(
        self, family: AnchorFamily, selector: str, props: dict[str, str]
    ) -> list[tuple[str, dict[str, str]]]:
        """Concrete ``(selector, properties)`` pairs for one anchor rule, in emit order."""
        intent = LayoutIntent.from_properties(props, family.prefix)
        intent_names = set(family.intent_properties)
        layout = {
            k: v for k, v in props.items()
            if k in family.layout_properties and k not in intent_names
        }
        visual = {
            k: v for k, v in props.items()
            if k not in family.layout_properties and k not in intent_names
        }
        logger.debug("Expanding %s anchor %s (%s)", family.prefix, selector, intent.mode.value)

        content = family.content_selector(selector)
        if intent.mode is LayoutMode.NONE:
            return [(content, visual)] if visual else []

        out: list[tuple[str, dict[str, str]]] = []
        if intent.mode is LayoutMode.OVERLAY:
            container = {**layout, **self._overlay(intent)}
        else:
            container = {**layout, **self._squeeze(intent, family)}
            if intent.position is not None:
                flow = family.flow_container(selector)
                out.append((flow, _flow_container(intent.position)))
                if family.wrapper_suffix and intent.position.reorders:
                    out.append((flow + family.wrapper_suffix, {"order": "1"}))

        if intent.direction:
            container["flex-direction"] = intent.direction
        if content == selector:
            out.append((selector, {**container, **visual}))
        else:
            out.append((selector, container))
            if visual:
                out.append((content, visual))
        return out

    def _overlay(self, intent: LayoutIntent) -> dict[str, str]:
        css = {
            "position": "absolute",
            "z-index": self.config.overlay_z_index,
        }
        template = _OVERLAY_TABLE.get(intent.position, _OVERLAY_TABLE[None])
        for prop, pattern in template.items():
            css[prop] = pattern.format(
                E=self.config.overlay_edge_distance, x=intent.offset_x, y=intent.offset_y
            )
        if intent.is_rotated:
            rotate = f"rotate({intent.rotation})"
            css["transform"] = f"{css['transform']} {rotate}" if "transform" in css else rotate
        elif "transform" not in css:
            # Clear any rotation left over from an earlier declaration.
            css["transform"] = "none"
        return css

    def _squeeze(self, intent: LayoutIntent, family: AnchorFamily) -> dict[str, str]:
        css = {
            "position": "static",
            "display": "flex",
            "top": "auto",
            "right": "auto",
            "bottom": "auto",
            "left": "auto",
            "z-index": "auto",
        }
        if family.squeeze_margin:
            css["margin"] = family.squeeze_margin
        if intent.position is not None:
            css["align-self"] = _FLEX_ALIGN[intent.position.vertical]
            if intent.position.horizontal is not None:
                css["justify-self"] = _FLEX_ALIGN[intent.position.horizontal]
        if intent.has_offset:
            css["margin-left"] = intent.offset_x
            css["margin-top"] = intent.offset_y
        css["transform"] = f"rotate({intent.rotation})" if intent.is_rotated else "none"
        return css


def _flow_container(position: AnchorPosition) -> dict[str, str]:
    if position.is_vertical_edge:
        align = _FLEX_ALIGN[position.alignment]
        direction = "column"
    else:
        align = "flex-start"
        direction = "row"
    return {
        "display": "flex",
        "align-items": align,
        "position": "relative",
        "z-index": "auto",
        "flex-direction": direction,
    }
