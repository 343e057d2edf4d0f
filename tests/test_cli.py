"""
mylex CLI Test Suite
====================

Tests for the mylex command-line tool using click's CliRunner.
"""

import click
import pytest
from click.testing import CliRunner

from mython.cli.errors import ExitCode, handle_cli_exception
from mython.cli.mylex import main
from mython.errors import MalformedLiteralError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "prog.my"
    path.write_text("if x:\n  return x\n", encoding="utf-8")
    return path


class TestMylexCLI:
    """Tests for the mylex CLI tool."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Print the Mython token stream" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_cli_dump(self, runner, program):
        result = runner.invoke(main, [str(program)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "If", "Id{x}", "Char{:}", "Newline",
            "Indent", "Return", "Id{x}", "Newline",
            "Dedent", "Eof",
        ]

    def test_cli_positions(self, runner, program):
        result = runner.invoke(main, [str(program), "--positions"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "1:1\tIf"
        assert lines[4] == "2:3\tIndent"

    def test_cli_count(self, runner, program):
        result = runner.invoke(main, [str(program), "-c"])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "10 tokens"

    def test_cli_indent_width(self, runner, program):
        """With four-space levels the two-space block is not indented."""
        result = runner.invoke(main, [str(program), "-w", "4"])
        assert result.exit_code == 0
        assert "Indent" not in result.output.splitlines()

    def test_cli_scan_error(self, runner, tmp_path):
        path = tmp_path / "bad.my"
        path.write_text("x = 'abc\n", encoding="utf-8")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.SCAN_ERROR
        assert "unterminated string literal" in result.output

    def test_cli_number_limits(self, runner, tmp_path):
        path = tmp_path / "big.my"
        path.write_text("99999999999\n", encoding="utf-8")

        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.SCAN_ERROR

        result = runner.invoke(main, [str(path), "--no-max-number"])
        assert result.exit_code == 0
        assert "Number{99999999999}" in result.output

        result = runner.invoke(main, [str(path), "--max-number", "5"])
        assert result.exit_code == ExitCode.SCAN_ERROR

    def test_cli_conflicting_limits(self, runner, program):
        result = runner.invoke(main, [str(program), "--max-number", "5", "--no-max-number"])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_cli_env_indent_width(self, runner, program):
        result = runner.invoke(main, [str(program)], env={"MYTHON_INDENT_WIDTH": "4"})
        assert result.exit_code == 0
        assert "Indent" not in result.output.splitlines()

    def test_cli_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.my")])
        assert result.exit_code == 2

    def test_cli_undecodable_file(self, runner, tmp_path):
        path = tmp_path / "latin.my"
        path.write_bytes(b"x = 1\n\xff\n")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "latin.my is not valid UTF-8 text" in result.output


class TestHandleCliException:
    """Tests for the exit code chosen per exception type."""

    @pytest.mark.parametrize("error, code", [
        (click.BadParameter("bad"), ExitCode.INVALID_ARGS),
        (FileNotFoundError("gone"), ExitCode.INVALID_ARGS),
        (MalformedLiteralError("abc"), ExitCode.SCAN_ERROR),
        (ValueError("not an argument problem"), ExitCode.INTERNAL_ERROR),
        (RuntimeError("boom"), ExitCode.INTERNAL_ERROR),
    ])
    def test_exit_codes(self, error, code):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(error)
        assert exc_info.value.code == code
