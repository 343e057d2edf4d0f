"""
Mython Lexer (Tokenizer)
========================

This module implements the lexer for Mython, a small indentation-sensitive
language with Python-like syntax. It converts source text into a stream of
tokens for a parser, one token per request.

Logical Lines and Indentation
-----------------------------
Blocks are delimited by indentation instead of braces. Each indentation
level is `indent_width` spaces (2 by default). The lexer compares the
indentation of every non-blank line with the number of levels currently
open and emits one INDENT or DEDENT per call until they match, so a line
that closes three blocks produces three consecutive DEDENT tokens.

- A non-blank line ends with NEWLINE (also at end of input without '\\n')
- Blank lines and comment-only lines produce no tokens at all
- A trailing comment does not hide the NEWLINE of its line
- At end of input all open levels are closed before EOF
- After EOF, every further request returns EOF again

Example Usage
-------------
>>> from mython.lexer import Lexer
>>> lexer = Lexer("if x:\\n  return x\\n")
>>> for token in lexer.tokenize():
...     print(token)
If
Id{x}
Char{:}
Newline
Indent
Return
Id{x}
Newline
Dedent
Eof

Parsers usually drive the lexer with the expectation helpers:

>>> lexer = Lexer("def f(a):\\n")
>>> lexer.expect_next(TokenType.DEF)
Token(DEF, 1:1)
>>> lexer.expect_next(TokenType.IDENTIFIER).value
'f'
>>> lexer.expect_next(TokenType.CHAR, "(")
Token(CHAR, '(', 1:6)
"""

from dataclasses import dataclass, field, replace
from typing import Iterator, Optional
import logging

from mython.config import LexerOptions
from mython.errors import ExpectationError, LexerError
from mython.readers import (
    QUOTES,
    count_spaces,
    is_digit,
    is_name_char,
    read_line,
    read_name,
    read_number,
    read_string,
)
from mython.source import CharSource, as_source
from mython.tokens import DUAL_SYMBOLS, Token, TokenType, keyword_or_identifier


logger = logging.getLogger(__name__)

# Marks "any value" in expect(); None is not usable since it is a real value
_ANY = object()


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Pull-based tokenizer for Mython source code.

    Every call to next_token() scans exactly one token. The lexer keeps the
    scanning state between calls:

    - whether the scanner is still at the start of a logical line
    - how many indentation levels are currently open
    - the indentation level of the line being entered

    The lexer is not thread-safe; use one lexer per source.

    Usage:
        lexer = Lexer(source_text, "program.my")
        tokens = list(lexer.tokenize())

    Attributes:
        options: The LexerOptions in effect
        filename: Name of the source (for error messages)
    """

    def __init__(
        self,
        source,
        filename: str = "<input>",
        options: Optional[LexerOptions] = None,
    ):
        """
        Initialize the lexer.

        Args:
            source: Source text, a text stream, or a CharSource
            filename: Name of the source file (for error messages)
            options: Lexer configuration (uses defaults if None)
        """
        self.options = options or LexerOptions()
        self._source: CharSource = as_source(source, filename)
        self.filename = self._source.filename

        # True until the first significant token of a logical line
        self._start_of_line = True
        # Indentation levels currently open
        self._current_indent = 0
        # Indentation level of the line being entered
        self._line_indent = 0

        self._current_token: Optional[Token] = None

    # =========================================================================
    # Public Interface
    # =========================================================================

    @property
    def current_token(self) -> Optional[Token]:
        """The last scanned token, or None before the first next_token()."""
        return self._current_token

    @property
    def indent_level(self) -> int:
        """Number of indentation levels currently open."""
        return self._current_indent

    def next_token(self) -> Token:
        """
        Scan the next token and make it the current one.

        Returns:
            The new current token (EOF forever once the input is exhausted)

        Raises:
            MalformedLiteralError: If a literal cannot be read
        """
        self._current_token = self._read_next_token()
        return self._current_token

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens up to and including EOF.

        Raises:
            LexerError: If invalid input is encountered
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def expect(self, token_type: TokenType, value=_ANY) -> Token:
        """
        Check that the current token has the given type (and value).

        Args:
            token_type: Required token type
            value: Required value; omit to accept any value

        Returns:
            The current token

        Raises:
            ExpectationError: If the current token does not match
        """
        token = self._current_token
        if token is not None and token.type is token_type:
            if value is _ANY or token.value == value:
                return token

        if value is _ANY:
            expected = token_type.value
        else:
            expected = f"{token_type.value}{{{value}}}"

        if token is not None:
            location = token.location(self.filename)
        else:
            location = self._source.location
        raise ExpectationError(
            expected,
            token,
            location=location,
            source_line=self._source.line_text(location.line),
        )

    def expect_next(self, token_type: TokenType, value=_ANY) -> Token:
        """
        Scan the next token and check it with expect().

        Raises:
            ExpectationError: If the new token does not match
        """
        self.next_token()
        return self.expect(token_type, value)

    # =========================================================================
    # Line and Indentation State Machine
    # =========================================================================

    def _read_next_token(self) -> Token:
        """
        Decide and scan the next token.

        Comments, spaces and blank lines produce nothing, so the decision
        is repeated until a token comes out.
        """
        while True:
            char = self._source.peek()

            if char == "":
                return self._parse_eof()

            if char == "\n":
                token = self._parse_line_end()
            elif char == "#":
                token = self._parse_comment()
            elif char == " ":
                token = self._parse_spaces()
            elif self._start_of_line and self._current_indent != self._line_indent:
                return self._parse_indent()
            else:
                token = self._parse_token()
                self._start_of_line = False

            if token is not None:
                return token

    def _next_line(self) -> None:
        """Move past the current line and start a new logical line."""
        read_line(self._source)
        self._start_of_line = True
        self._line_indent = 0

    def _parse_eof(self) -> Token:
        """
        Handle end of input.

        An unfinished line is ended with NEWLINE first, then open levels are
        closed one DEDENT at a time, then EOF.
        """
        if not self._start_of_line:
            token = self._make_token(TokenType.NEWLINE)
            self._next_line()
            return token

        if self._current_indent > 0:
            self._current_indent -= 1
            logger.debug(f"End of input: closing indent level {self._current_indent + 1}")
            return self._make_token(TokenType.DEDENT)

        if self._current_token is None or self._current_token.type is not TokenType.EOF:
            logger.debug(f"End of input in {self.filename} at line {self._source.line}")
        return self._make_token(TokenType.EOF)

    def _parse_line_end(self) -> Optional[Token]:
        """End a logical line, or skip the line if nothing was on it."""
        if self._start_of_line:
            logger.debug(f"Skipping blank line {self._source.line}")
            self._next_line()
            return None

        token = self._make_token(TokenType.NEWLINE)
        self._next_line()
        return token

    def _parse_comment(self) -> None:
        """Skip a comment up to, but not including, the newline."""
        while self._source.peek() not in ("\n", ""):
            self._source.get()
        return None

    def _parse_spaces(self) -> None:
        """Skip spaces, recording the indentation if at the start of a line."""
        spaces = count_spaces(self._source)
        if self._start_of_line:
            self._line_indent = spaces // self.options.indent_width
        return None

    def _parse_indent(self) -> Token:
        """Open or close one indentation level toward the line's level."""
        if self._current_indent < self._line_indent:
            self._current_indent += 1
            logger.debug(f"Line {self._source.line}: indent to level {self._current_indent}")
            return self._make_token(TokenType.INDENT)

        self._current_indent -= 1
        logger.debug(f"Line {self._source.line}: dedent to level {self._current_indent}")
        return self._make_token(TokenType.DEDENT)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _parse_token(self) -> Token:
        """Scan a significant token: number, name, string or symbol."""
        line = self._source.line
        column = self._source.column
        char = self._source.peek()

        if is_digit(char):
            token = Token(TokenType.NUMBER, read_number(self._source, self.options.max_number))
        elif is_name_char(char):
            token = keyword_or_identifier(read_name(self._source))
        elif char in QUOTES:
            token = Token(TokenType.STRING, read_string(self._source))
        else:
            token = self._parse_char()

        return replace(token, line=line, column=column)

    def _parse_char(self) -> Token:
        """
        Scan a dual-symbol operator or a single character.

        The second character is only consumed if the pair is a dual symbol.
        """
        first = self._source.get()
        dual = DUAL_SYMBOLS.get(first + self._source.peek())
        if dual is not None:
            self._source.get()
            return dual
        return Token(TokenType.CHAR, first)

    def _make_token(self, token_type: TokenType) -> Token:
        """Create a bare token at the current position."""
        return Token(token_type, line=self._source.line, column=self._source.column)


# =============================================================================
# Convenience Functions
# =============================================================================

@dataclass
class ScanResult:
    """
    Result of scanning a whole source.

    Attributes:
        filename: Source filename
        tokens: Tokens scanned (up to EOF, or up to the error)
        error: The LexerError that stopped scanning, if any
    """
    filename: str = "<input>"
    tokens: list[Token] = field(default_factory=list)
    error: Optional[LexerError] = None

    @property
    def success(self) -> bool:
        """True if the whole source was scanned up to EOF."""
        return self.error is None


def tokenize(
    source,
    filename: str = "<input>",
    options: Optional[LexerOptions] = None,
) -> list[Token]:
    """
    Tokenize a whole source.

    Args:
        source: Source text, a text stream, or a CharSource
        filename: Source filename for error messages
        options: Lexer configuration

    Returns:
        All tokens, ending with EOF

    Raises:
        LexerError: If the source cannot be tokenized
    """
    return list(Lexer(source, filename, options).tokenize())


def scan_source(
    source,
    filename: str = "<input>",
    options: Optional[LexerOptions] = None,
) -> ScanResult:
    """
    Tokenize a whole source without raising on lexical errors.

    The tokens produced before an error are kept in the result, so callers
    can report them along with the error.

    Example:
        result = scan_source(text, "prog.my")
        if not result.success:
            print(result.error)
    """
    lexer = Lexer(source, filename, options)
    result = ScanResult(filename=lexer.filename)
    try:
        for token in lexer.tokenize():
            result.tokens.append(token)
    except LexerError as e:
        logger.debug(f"Scanning {lexer.filename} stopped: {e.message}")
        result.error = e
    return result
