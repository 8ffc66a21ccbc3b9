"""Tests for the layout-intent preprocessor."""

import pytest

from dialectcss.config import CompilerConfig
from dialectcss.model.layout import AnchorPosition, LayoutIntent, LayoutMode
from dialectcss.model.rules import RuleMap
from dialectcss.transforms import (
    AVATAR_FAMILY,
    INFO_FAMILY,
    LayoutTransform,
    apply_transforms,
    find_family,
)

AI_AVATAR = '.mes[is_user="false"] .avatar'
USER_AVATAR = '.mes[is_user="true"] .avatar'
AI_MESSAGE = '.mes[is_user="false"]'
USER_ID = '.mes[is_user="true"] .mesIDDisplay'


def _expand(selector, props, config=None):
    return LayoutTransform(config).apply(RuleMap({selector: props})).to_dict()


# ---------------------------------------------------------------------------
# Intent model
# ---------------------------------------------------------------------------


class TestLayoutIntent:
    def test_defaults(self):
        intent = LayoutIntent.from_properties({}, "avatar")
        assert intent.mode is LayoutMode.NONE
        assert intent.position is None
        assert not intent.has_offset
        assert not intent.is_rotated

    def test_from_properties(self):
        intent = LayoutIntent.from_properties({
            "avatar-layout-mode": "overlay",
            "avatar-position": "top-center",
            "avatar-offset-x": "5px",
            "avatar-rotate": "15deg",
        }, "avatar")
        assert intent.mode is LayoutMode.OVERLAY
        assert intent.position is AnchorPosition.TOP_CENTER
        assert intent.has_offset
        assert intent.is_rotated

    def test_unknown_values_degrade(self):
        intent = LayoutIntent.from_properties(
            {"avatar-layout-mode": "floating", "avatar-position": "middle"}, "avatar"
        )
        assert intent.mode is LayoutMode.NONE
        assert intent.position is None

    def test_zero_variants(self):
        for zero in ("0", "0px", "-0.0deg", "0turn"):
            assert not LayoutIntent(rotation=zero).is_rotated

    @pytest.mark.parametrize("value, vertical, horizontal", [
        ("top-left", "top", "left"),
        ("bottom-center", "bottom", "center"),
        ("right-middle", "middle", None),
        ("left-bottom", "bottom", None),
    ])
    def test_position_components(self, value, vertical, horizontal):
        position = AnchorPosition(value)
        assert position.vertical == vertical
        assert position.horizontal == horizontal


# ---------------------------------------------------------------------------
# Families
# ---------------------------------------------------------------------------


class TestFamilies:
    def test_avatar_family(self):
        assert find_family(AI_AVATAR) is AVATAR_FAMILY
        assert find_family(USER_AVATAR) is AVATAR_FAMILY

    def test_info_family(self):
        assert find_family(USER_ID) is INFO_FAMILY
        assert find_family('.mes[is_user="false"] .mes_timer') is INFO_FAMILY

    def test_user_timer_is_not_an_anchor(self):
        assert find_family('.mes[is_user="true"] .mes_timer') is None

    def test_plain_selector(self):
        assert find_family("#chat") is None
        assert find_family(".avatar img") is None


# ---------------------------------------------------------------------------
# Pass-through
# ---------------------------------------------------------------------------


class TestPassThrough:
    def test_non_anchor_unchanged(self):
        assert _expand("#chat", {"avatar-layout-mode": "overlay"}) == {
            "#chat": {"avatar-layout-mode": "overlay"},
        }

    def test_anchor_without_intent_unchanged(self):
        assert _expand(AI_AVATAR, {"width": "40px"}) == {AI_AVATAR: {"width": "40px"}}

    def test_input_not_mutated(self):
        rules = RuleMap({AI_AVATAR: {"avatar-layout-mode": "overlay"}})
        LayoutTransform().apply(rules)
        assert rules.to_dict() == {AI_AVATAR: {"avatar-layout-mode": "overlay"}}


# ---------------------------------------------------------------------------
# none mode
# ---------------------------------------------------------------------------


class TestNoneMode:
    def test_visual_moves_to_content(self):
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "none",
            "position": "absolute",
            "width": "40px",
            "border-radius": "50%",
        })
        assert out == {AI_AVATAR + " img": {"width": "40px", "border-radius": "50%"}}

    def test_only_layout_properties_emit_nothing(self):
        assert _expand(AI_AVATAR, {"avatar-layout-mode": "none", "top": "1px"}) == {}


# ---------------------------------------------------------------------------
# overlay mode
# ---------------------------------------------------------------------------


class TestOverlayMode:
    def test_bottom_right_offset(self):
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "overlay",
            "avatar-position": "bottom-right",
            "avatar-offset-x": "5px",
            "avatar-offset-y": "0px",
            "width": "40px",
        })
        container = out[AI_AVATAR]
        assert container["position"] == "absolute"
        assert container["z-index"] == "10"
        assert container["bottom"] == "calc(-30px + 0px)"
        assert "5px" in container["right"]
        assert container["transform"] == "none"
        assert out[AI_AVATAR + " img"] == {"width": "40px"}

    def test_center_position_uses_translate(self):
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "overlay",
            "avatar-position": "top-center",
            "avatar-offset-x": "3px",
        })
        container = out[AI_AVATAR]
        assert container["left"] == "50%"
        assert container["transform"] == "translateX(-50%) translateX(3px)"

    def test_rotation_composes_with_centering(self):
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "overlay",
            "avatar-position": "right-middle",
            "avatar-rotate": "15deg",
        })
        assert out[AI_AVATAR]["transform"] == "translateY(-50%) translateY(0px) rotate(15deg)"

    def test_rotation_alone(self):
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "overlay",
            "avatar-position": "top-left",
            "avatar-rotate": "-10deg",
        })
        assert out[AI_AVATAR]["transform"] == "rotate(-10deg)"

    def test_missing_position_uses_fallback(self):
        out = _expand(AI_AVATAR, {"avatar-layout-mode": "overlay"})
        assert out[AI_AVATAR]["bottom"] == "calc(-30px + 0px)"
        assert out[AI_AVATAR]["right"] == "calc(20px + 0px)"

    def test_config_controls_edge_and_z_index(self):
        config = CompilerConfig(overlay_edge_distance="12px", overlay_z_index="99")
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "overlay",
            "avatar-position": "top-left",
        }, config)
        assert out[AI_AVATAR]["top"] == "calc(-12px + 0px)"
        assert out[AI_AVATAR]["z-index"] == "99"

    def test_every_position_sets_absolute(self):
        for position in AnchorPosition:
            out = _expand(AI_AVATAR, {
                "avatar-layout-mode": "overlay",
                "avatar-position": position.value,
            })
            assert out[AI_AVATAR]["position"] == "absolute", position


# ---------------------------------------------------------------------------
# squeeze mode
# ---------------------------------------------------------------------------


class TestSqueezeMode:
    def test_bottom_left_emits_flow_and_order(self):
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "squeeze",
            "avatar-position": "bottom-left",
            "width": "40px",
        })
        assert list(out) == [
            AI_MESSAGE,
            AI_MESSAGE + " > .mesAvatarWrapper",
            AI_AVATAR,
            AI_AVATAR + " img",
        ]
        assert out[AI_MESSAGE]["display"] == "flex"
        assert out[AI_MESSAGE]["flex-direction"] == "column"
        assert out[AI_MESSAGE]["align-items"] == "flex-start"
        assert out[AI_MESSAGE + " > .mesAvatarWrapper"] == {"order": "1"}
        container = out[AI_AVATAR]
        assert container["position"] == "static"
        for side in ("top", "right", "bottom", "left", "z-index"):
            assert container[side] == "auto"
        assert container["align-self"] == "flex-end"
        assert container["justify-self"] == "flex-start"

    def test_right_top_is_row_and_reordered(self):
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "squeeze",
            "avatar-position": "right-top",
        })
        assert out[AI_MESSAGE]["flex-direction"] == "row"
        assert out[AI_MESSAGE + " > .mesAvatarWrapper"] == {"order": "1"}
        assert out[AI_AVATAR]["align-self"] == "flex-start"
        assert "justify-self" not in out[AI_AVATAR]

    def test_left_middle_has_no_order_rule(self):
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "squeeze",
            "avatar-position": "left-middle",
        })
        assert AI_MESSAGE + " > .mesAvatarWrapper" not in out
        assert out[AI_AVATAR]["align-self"] == "center"

    def test_offsets_apply_as_margin(self):
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "squeeze",
            "avatar-position": "top-left",
            "avatar-offset-x": "4px",
            "avatar-offset-y": "-2px",
        })
        assert out[AI_AVATAR]["margin-left"] == "4px"
        assert out[AI_AVATAR]["margin-top"] == "-2px"
        assert "top" in out[AI_AVATAR] and out[AI_AVATAR]["top"] == "auto"

    def test_rotation_replaces_transform(self):
        out = _expand(AI_AVATAR, {
            "avatar-layout-mode": "squeeze",
            "avatar-position": "top-left",
            "avatar-rotate": "20deg",
            "transform": "scale(2)",
        })
        assert out[AI_AVATAR]["transform"] == "rotate(20deg)"

    def test_without_position_no_flow_rule(self):
        out = _expand(AI_AVATAR, {"avatar-layout-mode": "squeeze"})
        assert list(out) == [AI_AVATAR]

    def test_switch_from_overlay_clears_rotation(self):
        rules = RuleMap([
            (AI_AVATAR, {
                "avatar-layout-mode": "overlay",
                "avatar-position": "top-left",
                "avatar-rotate": "30deg",
            }),
        ])
        before = LayoutTransform().apply(rules).get(AI_AVATAR)
        assert before["transform"] == "rotate(30deg)"
        rules.set(AI_AVATAR, {
            "avatar-layout-mode": "squeeze",
            "avatar-position": "top-left",
            "avatar-rotate": "0deg",
        })
        after = LayoutTransform().apply(rules).get(AI_AVATAR)
        assert after["transform"] == "none"


# ---------------------------------------------------------------------------
# Info anchors
# ---------------------------------------------------------------------------


class TestInfoAnchors:
    def test_squeeze_merges_container_and_content(self):
        out = _expand(USER_ID, {
            "info-layout-mode": "squeeze",
            "info-position": "right-top",
            "info-direction": "column",
            "color": "red",
        })
        assert list(out) == ['.mes[is_user="true"]', USER_ID]
        info = out[USER_ID]
        assert info["margin"] == "0 2px"
        assert info["flex-direction"] == "column"
        assert info["color"] == "red"
        assert info["position"] == "static"

    def test_overlay_keeps_selector(self):
        out = _expand(USER_ID, {"info-layout-mode": "overlay", "info-position": "top-right"})
        assert list(out) == [USER_ID]
        assert out[USER_ID]["position"] == "absolute"


# ---------------------------------------------------------------------------
# apply_transforms
# ---------------------------------------------------------------------------


class TestApplyTransforms:
    def test_builtin_layout_runs(self):
        rules = RuleMap({AI_AVATAR: {"avatar-layout-mode": "overlay"}})
        out = apply_transforms(rules)
        assert out.get(AI_AVATAR)["position"] == "absolute"

    def test_custom_transform_runs_after_builtins(self):
        seen = []

        class Recorder:
            def apply(self, rules):
                seen.append(rules.selectors())
                return rules

        rules = RuleMap({AI_AVATAR: {"avatar-layout-mode": "none", "width": "1px"}})
        apply_transforms(rules, custom_transforms=[Recorder()])
        assert seen == [[AI_AVATAR + " img"]]

    def test_builtins_can_be_replaced(self):
        rules = RuleMap({AI_AVATAR: {"avatar-layout-mode": "overlay"}})
        assert apply_transforms(rules, builtin_transforms=[]) == rules
