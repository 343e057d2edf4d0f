# =============================================================================
# test_errors.py - Error Formatting and Configuration Tests
# =============================================================================
# Tests for the exception hierarchy in mython.errors and for LexerOptions,
# including the environment variable overrides.
# =============================================================================

import dataclasses
import logging

import pytest
from mython.config import DEFAULT_MAX_NUMBER, LexerOptions
from mython.errors import (
    ExpectationError,
    LexerError,
    MalformedLiteralError,
    MythonError,
    NumberOverflowError,
    SourceLocation,
)
from mython.lexer import Lexer, scan_source


# =============================================================================
# Exception Hierarchy Tests
# =============================================================================

class TestHierarchy:
    """All lexer errors can be caught through their bases."""

    @pytest.mark.parametrize("error", [
        ExpectationError("Number"),
        MalformedLiteralError("abc"),
        NumberOverflowError("100", 99),
    ])
    def test_bases(self, error):
        assert isinstance(error, LexerError)
        assert isinstance(error, MythonError)

    def test_overflow_is_malformed_literal(self):
        assert issubclass(NumberOverflowError, MalformedLiteralError)


class TestFormatting:
    """Tests for error message layout."""

    def test_without_location(self):
        assert str(MythonError("boom")) == "error: boom"

    def test_with_location(self):
        error = MythonError("boom", SourceLocation("prog.my", 3, 7))
        assert str(error) == "prog.my:3:7: error: boom"

    def test_with_source_line_and_hint(self):
        error = MalformedLiteralError(
            "oops",
            location=SourceLocation("prog.my", 2, 7),
            hint="add the closing '",
            source_line="print 'oops",
        )
        assert str(error).splitlines() == [
            "prog.my:2:7: error: unterminated string literal: 'oops'",
            "    print 'oops",
            "          ^",
            "hint: add the closing '",
        ]

    def test_lexer_error_has_source_line(self):
        """Errors from in-memory sources quote the offending line."""
        result = scan_source("x = 1\ny = 'abc\n", "prog.my")
        assert result.error.source_line == "y = 'abc"
        assert "prog.my:2:5: error:" in str(result.error)

    def test_stream_errors_have_no_source_line(self):
        import io
        lexer = Lexer(io.StringIO("'abc"), "prog.my")
        with pytest.raises(MalformedLiteralError) as exc_info:
            lexer.next_token()
        assert exc_info.value.source_line is None


# =============================================================================
# Configuration Tests
# =============================================================================

class TestLexerOptions:
    """Tests for LexerOptions."""

    def test_defaults(self):
        options = LexerOptions()
        assert options.indent_width == 2
        assert options.max_number == DEFAULT_MAX_NUMBER == 2**31 - 1

    def test_invalid_indent_width(self):
        with pytest.raises(ValueError):
            LexerOptions(indent_width=0)

    def test_invalid_max_number(self):
        with pytest.raises(ValueError):
            LexerOptions(max_number=-1)

    def test_options_are_immutable(self):
        options = LexerOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.indent_width = 0

    def test_replace_revalidates(self):
        options = LexerOptions()
        assert dataclasses.replace(options, indent_width=4).indent_width == 4
        with pytest.raises(ValueError):
            dataclasses.replace(options, indent_width=0)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MYTHON_INDENT_WIDTH", "4")
        monkeypatch.setenv("MYTHON_MAX_NUMBER", "1000")
        options = LexerOptions.from_env()
        assert options.indent_width == 4
        assert options.max_number == 1000

    def test_from_env_unbounded(self, monkeypatch):
        monkeypatch.setenv("MYTHON_MAX_NUMBER", "None")
        assert LexerOptions.from_env().max_number is None

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv("MYTHON_INDENT_WIDTH", raising=False)
        monkeypatch.delenv("MYTHON_MAX_NUMBER", raising=False)
        assert LexerOptions.from_env() == LexerOptions()

    def test_from_env_invalid_values_ignored(self, monkeypatch, caplog):
        """Bad values keep the defaults and are logged."""
        monkeypatch.setenv("MYTHON_INDENT_WIDTH", "wide")
        monkeypatch.setenv("MYTHON_MAX_NUMBER", "-5")
        with caplog.at_level(logging.WARNING, logger="mython.config"):
            options = LexerOptions.from_env()
        assert options == LexerOptions()
        assert "MYTHON_INDENT_WIDTH" in caplog.text
        assert "MYTHON_MAX_NUMBER" in caplog.text
