"""
Character Classification and Literal Readers
============================================

Low-level helpers used by the lexer. Each reader consumes the longest
matching prefix of a CharSource and leaves it positioned immediately after
what was read.

Only ASCII letters and digits are recognized. End of input ("") belongs to
no character class.

String Escapes
--------------
| Escape | Result      |
|--------|-------------|
| \\"     | "           |
| \\'     | '           |
| \\n     | newline     |
| \\t     | tab         |
| other  | (dropped)   |

An unknown escape drops both the backslash and the escaped character, so
"a\\qb" reads as "ab" and "a\\\\b" also reads as "ab".
"""

import string
from typing import Optional

from mython.errors import MalformedLiteralError, NumberOverflowError
from mython.source import CharSource


DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)
ALNUM = DIGITS | LETTERS
NAME_CHARS = ALNUM | {"_"}

QUOTES = ("'", '"')

ESCAPE_SEQUENCES = {
    '"': '"',
    "'": "'",
    "n": "\n",
    "t": "\t",
}


# =============================================================================
# Character Classification
# =============================================================================

def is_digit(char: str) -> bool:
    """Check if the character is a decimal digit."""
    return char in DIGITS


def is_alpha(char: str) -> bool:
    """Check if the character is an ASCII letter."""
    return char in LETTERS


def is_alnum(char: str) -> bool:
    """Check if the character is a letter or a digit."""
    return char in ALNUM


def is_name_char(char: str) -> bool:
    """Check if the character can appear in a name (letter, digit or '_')."""
    return char in NAME_CHARS


# =============================================================================
# Readers
# =============================================================================

def read_number(source: CharSource, max_value: Optional[int] = None) -> int:
    """
    Read a run of digits as a non-negative integer.

    Returns 0 if the source is not positioned on a digit.

    Args:
        source: Character source
        max_value: Largest accepted value, or None for no limit

    Raises:
        NumberOverflowError: If the value exceeds max_value
    """
    location = source.location
    digits = []
    while is_digit(source.peek()):
        digits.append(source.get())

    if not digits:
        return 0

    text = "".join(digits)
    value = int(text)
    if max_value is not None and value > max_value:
        raise NumberOverflowError(
            text,
            max_value,
            location=location,
            source_line=source.line_text(location.line),
        )
    return value


def read_name(source: CharSource) -> str:
    """Read a run of name characters (letters, digits, underscores)."""
    chars = []
    while is_name_char(source.peek()):
        chars.append(source.get())
    return "".join(chars)


def read_string(source: CharSource) -> str:
    """
    Read a quoted string literal and return its processed contents.

    The opening character (' or ") selects the closing quote; the other
    quote may appear unescaped inside. The closing quote is consumed.

    Raises:
        MalformedLiteralError: If the line or the input ends before the
            closing quote. The newline itself is left unconsumed.
    """
    location = source.location
    quote = source.get()
    chars = []

    while True:
        char = source.peek()
        if char == "" or char == "\n":
            break

        source.get()
        if char == quote:
            return "".join(chars)

        if char == "\\":
            escaped = source.peek()
            if escaped == "" or escaped == "\n":
                break
            source.get()
            if escaped in ESCAPE_SEQUENCES:
                chars.append(ESCAPE_SEQUENCES[escaped])
            continue

        chars.append(char)

    raise MalformedLiteralError(
        "".join(chars),
        location=location,
        hint=f"add the closing {quote} before the end of the line",
        source_line=source.line_text(location.line),
    )


def count_spaces(source: CharSource) -> int:
    """Consume a run of space characters and return how many there were."""
    count = 0
    while source.peek() == " ":
        source.get()
        count += 1
    return count


def read_line(source: CharSource) -> str:
    """
    Consume the rest of the current line, including its newline.

    Returns:
        The consumed text without the trailing newline
    """
    chars = []
    while True:
        char = source.get()
        if char == "" or char == "\n":
            return "".join(chars)
        chars.append(char)
