"""Tests for the dialectcss CLI commands."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dialectcss.cli.main import cli

THEME = (
    "# 消息样式\n"
    "角色头像 {\n"
    "  布局模式: 悬浮模式\n"
    "  头像位置: 底部右\n"
    "  宽度: 40像素\n"
    "}\n"
    "聊天区域 {\n"
    "  背景颜色: 透明\n"
    "}\n"
    "@用户消息:光环 { 宽度: 20像素 }\n"
)


@pytest.fixture
def theme_file(tmp_path: Path) -> Path:
    path = tmp_path / "theme.txt"
    path.write_text(THEME, encoding="utf-8")
    return path


def _write(tmp_path: Path, name: str, text: str) -> str:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("compile", "format", "validate", "import", "inspect", "serve"):
            assert name in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


# ---------------------------------------------------------------------------
# compile
# ---------------------------------------------------------------------------


class TestCompileCommand:
    def test_prints_canonical_css(self, theme_file: Path) -> None:
        result = CliRunner().invoke(cli, ["compile", str(theme_file)])
        assert result.exit_code == 0
        assert "position: absolute !important;" in result.output
        assert "background-color: transparent !important;" in result.output

    def test_no_important(self, theme_file: Path) -> None:
        result = CliRunner().invoke(cli, ["compile", "--no-important", str(theme_file)])
        assert "!important" not in result.output

    def test_minify(self, theme_file: Path) -> None:
        result = CliRunner().invoke(cli, ["compile", "--minify", str(theme_file)])
        assert "#chat{background-color:transparent !important}" in result.output

    def test_json_format(self, theme_file: Path) -> None:
        result = CliRunner().invoke(cli, ["compile", "--format", "json", str(theme_file)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert ["#chat", {"background-color": "transparent"}] in data

    def test_output_file(self, theme_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.css"
        result = CliRunner().invoke(cli, ["compile", str(theme_file), "-o", str(out)])
        assert result.exit_code == 0
        assert "Wrote 3 rule(s)" in result.output
        assert "#chat {" in out.read_text(encoding="utf-8")

    def test_nothing_to_apply_exits_1(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "bad.txt", "只有文字\n")
        result = CliRunner().invoke(cli, ["compile", path])
        assert result.exit_code == 1

    def test_missing_file(self) -> None:
        result = CliRunner().invoke(cli, ["compile", "/no/such/file.txt"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# format
# ---------------------------------------------------------------------------


class TestFormatCommand:
    def test_regenerates_localized_text(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "t.txt", "聊天区域 {\n  宽度：10像素; 高度: 2像素\n}\n")
        result = CliRunner().invoke(cli, ["format", path])
        assert result.exit_code == 0
        assert result.output == "# 布局样式\n聊天区域 {\n  宽度: 10像素\n  高度: 2像素\n}\n"


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_valid_file(self, theme_file: Path) -> None:
        result = CliRunner().invoke(cli, ["validate", str(theme_file)])
        assert result.exit_code == 0
        assert "OK: theme.txt is valid" in result.output

    def test_errors_exit_1(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "bad.txt", "聊天区域 {\n  宽度 1像素\n}\n")
        result = CliRunner().invoke(cli, ["validate", path])
        assert result.exit_code == 1
        assert "Summary: 1 error(s), 0 warning(s), 0 info" in result.output

    def test_warnings_exit_0(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "warn.txt", "神秘元素 {\n  宽度: 1像素\n}\n")
        result = CliRunner().invoke(cli, ["validate", path])
        assert result.exit_code == 0
        assert "WARNING" in result.output


# ---------------------------------------------------------------------------
# import
# ---------------------------------------------------------------------------


class TestImportCommand:
    def test_canonical_css(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "theme.css", "#chat { width: 10px !important; }")
        result = CliRunner().invoke(cli, ["import", path])
        assert result.exit_code == 0
        assert result.stdout == "# 布局样式\n聊天区域 {\n  宽度: 10像素\n}\n"
        assert "imported from canonical" in result.stderr

    def test_parse_error_exits_1(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "broken.css", "#chat { width 10px; }")
        result = CliRunner().invoke(cli, ["import", path])
        assert result.exit_code == 1
        assert "Parse error" in result.output


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_shows_structure(self, theme_file: Path) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(theme_file)])
        assert result.exit_code == 0
        assert "Rules:       2" in result.output
        assert "Decorations: 1" in result.output
        assert "family=avatar" in result.output
        assert "mode=overlay" in result.output
        assert "position=bottom-right" in result.output
        assert "用户消息-光环" in result.output


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------


class TestServeCommand:
    def test_help_shows_options(self) -> None:
        result = CliRunner().invoke(cli, ["serve", "--help"])
        assert result.exit_code == 0
        assert "--host" in result.output
        assert "--port" in result.output
        assert "--debug" in result.output
