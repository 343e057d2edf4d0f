"""
Mython Lexer
============

This package provides the scanner stage of a front end for Mython, a small
indentation-sensitive language with Python-like syntax. It turns source
text into a stream of typed tokens, including synthetic INDENT/DEDENT
tokens derived from leading spaces.

Main Components
---------------
- **lexer**: The Lexer class (pull API), tokenize() and scan_source()
- **tokens**: TokenType, Token, and the KEYWORDS / DUAL_SYMBOLS tables
- **readers**: Character classification and literal readers
- **source**: Character sources over strings and text streams
- **config**: LexerOptions
- **errors**: Exception hierarchy

Quick Start
-----------
    >>> from mython import tokenize
    >>> [str(t) for t in tokenize("x == 2\\n")]
    ['Id{x}', 'Eq', 'Number{2}', 'Newline', 'Eof']

Or use the command-line tool:
    $ mylex program.my --positions
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from mython.config import LexerOptions
from mython.errors import (
    MythonError,
    SourceLocation,
    LexerError,
    ExpectationError,
    MalformedLiteralError,
    NumberOverflowError,
)
from mython.lexer import Lexer, ScanResult, scan_source, tokenize
from mython.source import CharSource, StringSource, StreamSource
from mython.tokens import (
    DUAL_SYMBOLS,
    KEYWORDS,
    Token,
    TokenType,
    format_tokens,
)

__all__ = [
    "__version__",
    # Lexer
    "Lexer",
    "ScanResult",
    "scan_source",
    "tokenize",
    "LexerOptions",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "DUAL_SYMBOLS",
    "format_tokens",
    # Sources
    "CharSource",
    "StringSource",
    "StreamSource",
    # Errors
    "MythonError",
    "SourceLocation",
    "LexerError",
    "ExpectationError",
    "MalformedLiteralError",
    "NumberOverflowError",
]
