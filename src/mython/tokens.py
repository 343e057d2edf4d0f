"""
Mython Tokens
=============

Token types, the Token value class, and the static lookup tables used by
the lexer.

Token Categories
----------------
- Value-bearing: Number, Identifier, Char, StringLiteral
- Keywords: class, return, if, else, def, print, and, or, not,
  None, True, False
- Dual-symbol operators: ==, !=, <=, >=
- Structural: Newline, Indent, Dedent, Eof

Any punctuation or operator that is not a dual symbol is a Char token
holding that single character (for example ':' or '+').

Equality
--------
Two tokens are equal when they have the same type and, for value-bearing
types, the same value. The position (line, column) is informational only:

>>> Token(TokenType.NUMBER, 1, line=3, column=7) == Token(TokenType.NUMBER, 1)
True
>>> str(Token(TokenType.IDENTIFIER, "x"))
'Id{x}'
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from mython.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Mython language.

    The value of each member is the name used when a token is rendered
    for diagnostics.
    """

    # === Value-bearing Tokens ===
    NUMBER = "Number"               # Integer literal
    IDENTIFIER = "Id"               # Variable/function/class names
    CHAR = "Char"                   # Any other single character
    STRING = "String"               # String literal '...' or "..."

    # === Keywords ===
    CLASS = "Class"                 # class
    RETURN = "Return"               # return
    IF = "If"                       # if
    ELSE = "Else"                   # else
    DEF = "Def"                     # def
    PRINT = "Print"                 # print
    AND = "And"                     # and
    OR = "Or"                       # or
    NOT = "Not"                     # not
    NONE = "None"                   # None
    TRUE = "True"                   # True
    FALSE = "False"                 # False

    # === Dual-symbol Operators ===
    EQ = "Eq"                       # ==
    NOT_EQ = "NotEq"                # !=
    LESS_OR_EQ = "LessOrEq"         # <=
    GREATER_OR_EQ = "GreaterOrEq"   # >=

    # === Structural Tokens ===
    NEWLINE = "Newline"             # End of a logical line
    INDENT = "Indent"               # One indent level opened
    DEDENT = "Dedent"               # One indent level closed
    EOF = "Eof"                     # End of input

    @property
    def has_value(self) -> bool:
        """True for types whose tokens carry a value."""
        return self in VALUED_TYPES


VALUED_TYPES = frozenset({
    TokenType.NUMBER,
    TokenType.IDENTIFIER,
    TokenType.CHAR,
    TokenType.STRING,
})

STRUCTURAL_TYPES = frozenset({
    TokenType.NEWLINE,
    TokenType.INDENT,
    TokenType.DEDENT,
    TokenType.EOF,
})


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from Mython source code.

    Attributes:
        type: The TokenType classification
        value: int for NUMBER, str for IDENTIFIER/CHAR/STRING, None otherwise
        line: Line where the token starts (1-indexed, 0 if unknown)
        column: Column where the token starts (1-indexed, 0 if unknown)
    """
    type: TokenType
    value: str | int | None = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __post_init__(self):
        if self.type.has_value:
            if self.value is None:
                raise ValueError(f"{self.type.name} token requires a value")
        elif self.value is not None:
            raise ValueError(f"{self.type.name} token carries no value")

    def __str__(self) -> str:
        """Render as Number{42}, Id{x}, Char{:} or a bare name like Indent."""
        if self.type.has_value:
            return f"{self.type.value}{{{self.value}}}"
        return self.type.value

    def __repr__(self) -> str:
        if self.value is not None:
            if isinstance(self.value, int):
                return f"Token({self.type.name}, {self.value}, {self.line}:{self.column})"
            return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    def location(self, filename: str = "<input>") -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(filename, self.line, self.column)

    def is_structural(self) -> bool:
        """Return True for Newline, Indent, Dedent and Eof."""
        return self.type in STRUCTURAL_TYPES


# =============================================================================
# Static Lookup Tables
# =============================================================================

# Reserved words; the match is exact and case-sensitive
KEYWORDS: Mapping[str, Token] = MappingProxyType({
    "class": Token(TokenType.CLASS),
    "return": Token(TokenType.RETURN),
    "if": Token(TokenType.IF),
    "else": Token(TokenType.ELSE),
    "def": Token(TokenType.DEF),
    "print": Token(TokenType.PRINT),
    "and": Token(TokenType.AND),
    "or": Token(TokenType.OR),
    "not": Token(TokenType.NOT),
    "None": Token(TokenType.NONE),
    "True": Token(TokenType.TRUE),
    "False": Token(TokenType.FALSE),
})

# Two-character operators that form a single token
DUAL_SYMBOLS: Mapping[str, Token] = MappingProxyType({
    "==": Token(TokenType.EQ),
    "!=": Token(TokenType.NOT_EQ),
    ">=": Token(TokenType.GREATER_OR_EQ),
    "<=": Token(TokenType.LESS_OR_EQ),
})


def keyword_or_identifier(name: str) -> Token:
    """Map a name to its keyword token, or wrap it as an IDENTIFIER."""
    keyword = KEYWORDS.get(name)
    if keyword is not None:
        return keyword
    return Token(TokenType.IDENTIFIER, name)


def format_token(token: Token, positions: bool = False) -> str:
    """Render a token for diagnostics, optionally prefixed by 'line:column'."""
    if positions:
        return f"{token.line}:{token.column}\t{token}"
    return str(token)


def format_tokens(tokens, positions: bool = False) -> str:
    """
    Render tokens one per line for diagnostics.

    Args:
        tokens: Iterable of Token
        positions: Prefix each line with 'line:column'
    """
    return "\n".join(format_token(token, positions) for token in tokens)
