"""
Tests for the cssmatch command line.
"""

import json
import logging

import pytest
from click.testing import CliRunner

from cssmatch.cli.main import __version__, main


@pytest.fixture
def runner():
    return CliRunner()


class TestList:
    """Test `cssmatch list`."""

    def test_lists_names(self, runner):
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        assert "CssLength" in result.stdout
        assert "HtmlTagAttributes" in result.stdout

    def test_with_definitions(self, runner):
        result = runner.invoke(main, ["list", "--definitions"])
        assert result.exit_code == 0
        assert "CssPercentage\t(?:([0-9]*\\.[0-9]+|[0-9]+))%" in result.stdout


class TestShow:
    """Test `cssmatch show`."""

    def test_show_compound(self, runner):
        result = runner.invoke(main, ["show", "CssLength"])
        assert result.exit_code == 0
        assert "references: CssNumber" in result.stdout
        assert "used by: CssLineHeight, CssBorderWidth, CssFontSize" in result.stdout

    def test_show_primitive(self, runner):
        result = runner.invoke(main, ["show", "HtmlTag"])
        assert result.exit_code == 0
        assert "references: -" in result.stdout

    def test_show_unknown(self, runner):
        result = runner.invoke(main, ["show", "Nope"])
        assert result.exit_code == 2
        assert "Unknown pattern" in result.output


class TestFind:
    """Test `cssmatch find`."""

    def test_stdin(self, runner):
        result = runner.invoke(main, ["find", "CssLength"], input="margin: 12px 0.5em")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["8\t12px", "13\t0.5em"]

    def test_first(self, runner):
        result = runner.invoke(main, ["find", "--first", "CssLength"], input="margin: 12px 0.5em")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["8\t12px"]

    def test_no_match_exit_code(self, runner):
        result = runner.invoke(main, ["find", "CssLength"], input="margin: auto")
        assert result.exit_code == 1
        assert result.stdout == ""

    def test_custom_template(self, runner):
        result = runner.invoke(
            main,
            ["find", "--custom", r"padding:\s*{CssLength}"],
            input="p { padding: 4px }",
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["4\tpadding: 4px"]

    def test_custom_invalid(self, runner):
        result = runner.invoke(main, ["find", "--custom", "({CssLength}"], input="x")
        assert result.exit_code == 2
        assert "not a valid regular expression" in result.output

    def test_unknown_pattern(self, runner):
        result = runner.invoke(main, ["find", "Nope"], input="x")
        assert result.exit_code == 2

    def test_files_are_prefixed(self, runner, tmp_path):
        first = tmp_path / "a.css"
        second = tmp_path / "b.css"
        first.write_text("p { color: red; }", encoding="utf-8")
        second.write_text("a { color: #fff; }", encoding="utf-8")

        result = runner.invoke(main, ["find", "CssColors", str(first), str(second)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            f"{first}:11\tred",
            f"{second}:11\t#fff",
        ]

    def test_json(self, runner, tmp_path):
        sheet = tmp_path / "style.css"
        sheet.write_text("@media print { p{color:red;} }", encoding="utf-8")

        result = runner.invoke(main, ["find", "--json", "CssBlocks", str(sheet)])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == [
            {"file": str(sheet), "start": 14, "value": " p{color:red;}"},
        ]

    def test_undecodable_file(self, runner, tmp_path):
        sheet = tmp_path / "broken.css"
        sheet.write_bytes(b"width: 12px\xff")

        result = runner.invoke(main, ["find", "CssLength", str(sheet)])
        assert result.exit_code == 2
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "cannot decode as utf-8" in result.output

    def test_encoding_option(self, runner, tmp_path):
        sheet = tmp_path / "latin.css"
        sheet.write_bytes(b"width: 12px\xff")

        result = runner.invoke(main, ["find", "--encoding", "latin-1", "CssLength", str(sheet)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == ["7\t12px"]

    def test_unknown_encoding(self, runner, tmp_path):
        sheet = tmp_path / "style.css"
        sheet.write_text("width: 12px", encoding="utf-8")

        result = runner.invoke(main, ["find", "--encoding", "no-such-codec", "CssLength", str(sheet)])
        assert result.exit_code == 2
        assert "no-such-codec" in result.output


class TestLogging:
    """Test that -v switches the log level."""

    @pytest.fixture
    def basic_config(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        return calls

    def test_verbose_is_debug(self, runner, basic_config):
        result = runner.invoke(main, ["-v", "find", "CssNumber"], input="1")
        assert result.exit_code == 0
        assert "0\t1" in result.stdout
        assert basic_config[0]["level"] == logging.DEBUG

    def test_default_is_info(self, runner, basic_config):
        result = runner.invoke(main, ["find", "CssNumber"], input="1")
        assert result.exit_code == 0
        assert basic_config[0]["level"] == logging.INFO


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
