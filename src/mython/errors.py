"""
Mython Lexer Error Hierarchy
============================

This module defines the exception hierarchy for the Mython lexer.
All exceptions inherit from MythonError, allowing callers to catch all
lexer-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
MythonError (base)
└── LexerError (scanning and token expectations)
    ├── ExpectationError - current token is not the one the caller required
    └── MalformedLiteralError - literal that cannot be read
        └── NumberOverflowError - integer literal above the configured limit

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception Class
# =============================================================================

class MythonError(Exception):
    """
    Base exception for all Mython lexer errors.

    Provides common formatting of the error message with source location,
    source line context and an optional hint.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.my:3:9: error: unterminated string literal
                print "hello
                      ^
            hint: add the closing '"' before the end of the line
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(MythonError):
    """
    Base exception for errors raised while scanning a token stream.

    Catching LexerError covers both failed token expectations and
    malformed literals.
    """
    pass


class ExpectationError(LexerError):
    """
    The current token does not match what the caller required.

    Raised by Lexer.expect() and Lexer.expect_next(). Carries a description
    of the expected token and the token actually found (None when no token
    has been scanned yet).
    """

    def __init__(
        self,
        expected: str,
        found=None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.expected = expected
        self.found = found

        found_text = "no token" if found is None else f"'{found}'"
        super().__init__(
            f"expected {expected}, found {found_text}",
            location=location,
            source_line=source_line,
        )


class MalformedLiteralError(LexerError):
    """
    A literal could not be read.

    Raised by the string reader when the end of the line or the end of
    input is reached before the closing quote. The text read so far is
    kept in `text`.

    Example:
        x = "hello      # Missing closing quote
    """

    def __init__(
        self,
        text: str,
        message: str = "unterminated string literal",
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.text = text
        super().__init__(
            f"{message}: {text!r}",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class NumberOverflowError(MalformedLiteralError):
    """
    Integer literal larger than the configured maximum.

    The digits are kept in `text` and the limit in `limit`.
    """

    def __init__(
        self,
        text: str,
        limit: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.limit = limit
        super().__init__(
            text,
            message=f"integer literal exceeds {limit}",
            location=location,
            hint="integer literals must fit the configured max_number",
            source_line=source_line,
        )
