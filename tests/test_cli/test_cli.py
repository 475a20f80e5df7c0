"""Tests for the crow CLI commands."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from crow import __version__
from crow.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "tiny subset of HTML and CSS" in result.output

    def test_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert "dom" in result.output
        assert "css" in result.output
        assert "check" in result.output

    def test_bad_timeout_setting(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CROW_TIMEOUT", "soon")
        result = runner.invoke(cli, ["dom", str(FIXTURES / "test.html")])
        assert result.exit_code == 1
        assert "Config error: CROW_TIMEOUT must be a number" in result.output
        assert "Traceback" not in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# dom command
# ---------------------------------------------------------------------------


class TestDomCommand:
    def test_prints_tree(self, runner: CliRunner, tmp_path: Path) -> None:
        page = tmp_path / "page.html"
        page.write_text('<div class="a"><p>hello</p></div>')
        result = runner.invoke(cli, ["dom", str(page)])
        assert result.exit_code == 0
        assert result.output.splitlines() == ['<div class="a">', "  <p>", "    'hello'"]

    def test_markup_flag(self, runner: CliRunner, tmp_path: Path) -> None:
        page = tmp_path / "page.html"
        page.write_text("<p>a</p><p>b</p>")
        result = runner.invoke(cli, ["dom", "--markup", str(page)])
        assert result.exit_code == 0
        assert result.output.strip() == "<html><p>a</p><p>b</p></html>"

    def test_fixture(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["dom", str(FIXTURES / "test.html")])
        assert result.exit_code == 0
        assert "<title>" in result.output

    def test_parse_error(self, runner: CliRunner, tmp_path: Path) -> None:
        page = tmp_path / "bad.html"
        page.write_text("<div>text</span>")
        result = runner.invoke(cli, ["dom", str(page)])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["dom", str(tmp_path / "nope.html")])
        assert result.exit_code == 1
        assert "Load error" in result.output


# ---------------------------------------------------------------------------
# css command
# ---------------------------------------------------------------------------


class TestCssCommand:
    def test_fixture(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["css", str(FIXTURES / "test.css")])
        assert result.exit_code == 0
        assert "Rules: 6" in result.output
        assert "span#name.highlight.big, .warning, p {" in result.output

    def test_parse_error(self, runner: CliRunner, tmp_path: Path) -> None:
        sheet = tmp_path / "bad.css"
        sheet.write_text("p { margin: 2em; }")
        result = runner.invoke(cli, ["css", str(sheet)])
        assert result.exit_code == 1
        assert "unrecognized unit" in result.output


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_all_ok(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["check", str(FIXTURES / "test.html"), str(FIXTURES / "test.css")]
        )
        assert result.exit_code == 0
        assert "Summary: 2 ok, 0 failed" in result.output

    def test_reports_failures(self, runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.css"
        bad.write_text("div p { color: red; }")
        result = runner.invoke(cli, ["check", str(FIXTURES / "test.css"), str(bad)])
        assert result.exit_code == 1
        assert f"FAIL: {bad}" in result.output
        assert "Summary: 1 ok, 1 failed" in result.output

    def test_requires_sources(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check"])
        assert result.exit_code != 0
