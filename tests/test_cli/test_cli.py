"""Tests for the scopecss CLI commands."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from scopecss import __version__
from scopecss.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PREFIX", "GLOBAL_PREFIX", "CLASS_NAME_STRATEGY", "CLASS_NAME_LENGTH", "STRICT"):
        monkeypatch.delenv(f"SCOPECSS_{name}", raising=False)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "compile" in result.output
        assert "check" in result.output
        assert "inspect" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# compile command
# ---------------------------------------------------------------------------


class TestCompileCommand:
    def test_explicit_class_name(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compile", str(FIXTURES / "card.css"), "--class-name", "c"])
        assert result.exit_code == 0
        assert ".c {\nwidth: 200px;" in result.output
        assert ".c .title {" in result.output
        assert ".c:hover {" in result.output

    def test_counter_strategy(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "compile", str(FIXTURES / "card.css"),
                "--prefix", "card",
                "--strategy", "counter",
            ],
        )
        assert result.exit_code == 0
        assert result.output.startswith("/* card-0 */\n.card-0 {")

    def test_global(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compile", str(FIXTURES / "responsive.css"), "--global"])
        assert result.exit_code == 0
        assert "html {\nwidth: 100vw;\n}" in result.output
        assert "@media only screen and (min-width: 1000px) {" in result.output

    def test_html_output(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "compile", str(FIXTURES / "keyframes.css"),
                "--prefix", "spin",
                "--strategy", "counter",
                "--html",
            ],
        )
        assert result.exit_code == 0
        assert result.output.startswith('<style data-style="spin-0">.spin-0 {')
        assert "@keyframes move {" in result.output
        assert result.output.rstrip().endswith("</style>")

    def test_parse_error_exits_nonzero(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compile", str(FIXTURES / "unsupported_rule.css")])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_parse_error_with_class_name(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["compile", str(FIXTURES / "unsupported_rule.css"), "--class-name", "c"]
        )
        assert result.exit_code == 1

    def test_nonexistent_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compile", "/nonexistent/file.css"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_valid_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["check", str(FIXTURES / "responsive.css")])
        assert result.exit_code == 0
        assert "OK: responsive.css (4 scope(s), 5 block(s)/rule(s))" in result.output

    def test_invalid_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["check", str(FIXTURES / "unsupported_rule.css")])
        assert result.exit_code == 1
        assert "Unrecognized at-rule '@page'" in result.output

    def test_written_file(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.css"
        path.write_text(".a { color: red;\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["check", str(path)])
        assert result.exit_code == 1
        assert "Unterminated block" in result.output


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_structure(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", str(FIXTURES / "card.css")])
        assert result.exit_code == 0
        assert "Scopes: 1" in result.output
        assert "Scope: (default)" in result.output
        assert "  Block: (root)" in result.output
        assert "    width: 200px" in result.output
        assert "  Block: &:hover" in result.output

    def test_rule_summary(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", str(FIXTURES / "keyframes.css")])
        assert result.exit_code == 0
        assert "  Rule: @keyframes move" in result.output
        assert "brace group(s)" in result.output

    def test_invalid_file(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", str(FIXTURES / "unsupported_rule.css")])
        assert result.exit_code == 1
