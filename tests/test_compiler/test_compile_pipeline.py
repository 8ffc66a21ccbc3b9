"""Tests for the end-to-end compile pipeline."""

from dialectcss import Compiler, CompilerConfig
from dialectcss.events import StylesheetCompiled, StylesParsed
from dialectcss.generator import CanonicalOptions

USER_BLOCK = '.mes[is_user="true"] .mes_block'
AI_AVATAR = '.mes[is_user="false"] .avatar'

HALO = "@用户消息:光环 { 宽度: 20像素 }"
THEME = (
    "# 消息样式\n"
    "用户消息 {\n"
    "  背景颜色: #336699\n"
    "  圆角: 8像素\n"
    "}\n"
    "角色头像 {\n"
    "  布局模式: 悬浮模式\n"
    "  头像位置: 底部右\n"
    "  宽度: 40像素\n"
    "}\n"
    + HALO
)


# ---------------------------------------------------------------------------
# Full theme
# ---------------------------------------------------------------------------


class TestCompileTheme:
    def test_parsed_rules(self, compiler):
        result = compiler.compile(THEME)
        assert result.rules.to_dict() == {
            USER_BLOCK: {"background-color": "rgb(51,102,153)", "border-radius": "8px"},
            AI_AVATAR: {
                "avatar-layout-mode": "overlay",
                "avatar-position": "bottom-right",
                "width": "40px",
            },
        }

    def test_layout_expanded(self, compiler):
        result = compiler.compile(THEME)
        assert result.expanded.selectors() == [USER_BLOCK, AI_AVATAR, AI_AVATAR + " img"]
        assert result.expanded.get(AI_AVATAR)["position"] == "absolute"

    def test_canonical_text(self, compiler):
        canonical = compiler.compile(THEME).canonical
        assert f"{AI_AVATAR} img {{\n  width: 40px !important;\n}}" in canonical
        assert "avatar-layout-mode" not in canonical
        assert "border-radius: 8px !important;" in canonical

    def test_localized_text_keeps_decorations(self, compiler):
        localized = compiler.compile(THEME).localized
        assert localized.startswith("# 消息样式\n用户消息 {\n  背景颜色: rgb(51,102,153)\n")
        assert "  布局模式: 悬浮模式\n" in localized
        assert localized.endswith("\n\n" + HALO)

    def test_decorations_materialized_after_flush(self, compiler, page):
        result = compiler.compile(THEME)
        assert [rule.id for rule in result.decorations] == ["用户消息-光环"]
        compiler.decorations.frames.flush()
        assert len(page.get("u1").children) == 1
        assert len(page.get("u2").children) == 1

    def test_no_warnings(self, compiler):
        assert compiler.compile(THEME).diagnostics == []

    def test_options_override(self, compiler):
        result = compiler.compile(THEME, CanonicalOptions(use_important=False))
        assert "!important" not in result.canonical

    def test_to_dict(self, compiler):
        data = compiler.compile(THEME).to_dict()
        assert set(data) == {"canonical", "localized", "rules", "diagnostics", "decorations", "applied"}
        assert data["decorations"] == [
            {"id": "用户消息-光环", "selector": USER_BLOCK, "styles": {"width": "20px"}},
        ]
        assert data["applied"] is True


# ---------------------------------------------------------------------------
# Fallbacks
# ---------------------------------------------------------------------------


class TestFallbacks:
    def test_blank_input_applies_empty_stylesheet(self, compiler):
        compiler.compile(THEME)
        result = compiler.compile("   \n")
        assert result.applied
        assert result.canonical == ""
        assert compiler.last_canonical == ""

    def test_unparseable_input_keeps_previous(self, compiler):
        first = compiler.compile(THEME)
        result = compiler.compile("这不是样式")
        assert not result.applied
        assert result.canonical == first.canonical
        assert [d.rule for d in result.warnings] == ["stray_line"]

    def test_decorations_only_is_applied(self, compiler):
        result = compiler.compile(HALO)
        assert result.applied
        assert result.canonical == ""
        assert len(result.decorations) == 1

    def test_warnings_do_not_block(self, compiler):
        result = compiler.compile("聊天区域 {\n  宽度 1像素\n  高度: 2像素\n}")
        assert result.applied
        assert "height: 2px" in result.canonical
        assert result.warnings[0].rule == "missing_separator"
        assert result.errors == []

    def test_decoration_warnings_included(self, compiler):
        result = compiler.compile("@用户消息:光环 { 奇怪: 1 }")
        assert [d.rule for d in result.diagnostics] == ["unknown_decoration_property"]


# ---------------------------------------------------------------------------
# Configuration and collaborators
# ---------------------------------------------------------------------------


class TestConfiguration:
    def test_config_sets_default_options(self):
        compiler = Compiler(CompilerConfig(use_important=False, minify=True))
        assert compiler.compile("聊天区域 {\n  宽度: 1像素\n}").canonical == "#chat{width:1px}"

    def test_transforms_can_be_disabled(self):
        compiler = Compiler(transforms=[])
        canonical = compiler.compile("角色头像 {\n  布局模式: 悬浮模式\n}").canonical
        assert "avatar-layout-mode: overlay" in canonical

    def test_config_from_mapping(self):
        config = CompilerConfig.from_mapping({
            "use_important": "false", "cache_size": "3", "debounce_seconds": 1, "bogus": 1,
        })
        assert config.use_important is False
        assert config.cache_size == 3
        assert config.debounce_seconds == 1.0

    def test_config_from_empty_mapping(self):
        assert CompilerConfig.from_mapping(None) == CompilerConfig()


class TestEvents:
    def test_parse_and_compile_events(self, compiler, bus):
        events = []
        bus.on_all(events.append)
        compiler.compile(THEME)
        compiler.compile(THEME)
        parsed = [e for e in events if isinstance(e, StylesParsed)]
        compiled = [e for e in events if isinstance(e, StylesheetCompiled)]
        assert [(e.rule_count, e.warning_count, e.cached) for e in parsed] == [
            (2, 0, False), (2, 0, True),
        ]
        assert all(e.applied for e in compiled)
        assert len(compiled) == 2

    def test_parsed_event_carries_rules(self, compiler, bus):
        parsed = []
        bus.subscribe(StylesParsed, parsed.append)
        compiler.compile("聊天区域 {\n  宽度: 10像素\n}")
        assert parsed[0].rules.to_dict() == {"#chat": {"width": "10px"}}

    def test_parsed_event_rules_are_a_copy(self, compiler, bus):
        parsed = []
        bus.subscribe(StylesParsed, parsed.append)
        compiler.compile("聊天区域 {\n  宽度: 10像素\n}")
        parsed[0].rules.set_property("#chat", "width", "99px")
        compiler.compile("聊天区域 {\n  宽度: 10像素\n}")
        assert parsed[1].rules.get("#chat") == {"width": "10px"}

    def test_cache_used_for_repeat_input(self, compiler):
        compiler.compile(THEME)
        compiler.compile(THEME)
        assert compiler.cache.hits == 1
        assert compiler.cache.misses == 1
