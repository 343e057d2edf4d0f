"""
Character Sources
=================

The lexer never touches a string or a file directly. It reads characters
through a CharSource, which offers exactly what the scanner needs:

- peek():   look at the next character without consuming it
- get():    consume and return the next character
- unget():  push back the character returned by the last get()
- at_end(): end-of-input detection

End of input is represented by the empty string "" for both peek() and
get(), so callers can compare against it without a separate check.

Two implementations are provided:

- StringSource: an in-memory string (keeps the text, so errors can quote
  the offending source line)
- StreamSource: any text stream with a read(1) method (open files,
  io.StringIO, sys.stdin)

Example Usage
-------------
>>> source = StringSource("x = 1\\n")
>>> source.peek()
'x'
>>> source.get()
'x'
>>> source.unget("x")
>>> source.get(), source.get()
('x', ' ')
"""

from abc import ABC, abstractmethod
from typing import Optional, TextIO

from mython.errors import SourceLocation


class CharSource(ABC):
    """
    Abstract sequential character source with one character of lookahead.

    Subclasses implement _read(), which returns the next raw character from
    the underlying store or "" at the end. Position tracking (1-indexed line
    and column of the next character) is shared here.

    Attributes:
        filename: Name used in SourceLocation (default "<input>")
    """

    def __init__(self, filename: str = "<input>"):
        self.filename = filename
        self._line = 1
        self._column = 1

        # Characters already taken from _read() but not consumed yet.
        # The top of the stack is the next character.
        self._buffer: list[str] = []

        # Position before the last get(), restored by unget()
        self._last_position: Optional[tuple[int, int]] = None

    @abstractmethod
    def _read(self) -> str:
        """Read the next raw character, or "" at end of input."""

    # =========================================================================
    # Character Access
    # =========================================================================

    def peek(self) -> str:
        """Return the next character without consuming it ("" at end)."""
        if not self._buffer:
            self._buffer.append(self._read())
        return self._buffer[-1]

    def get(self) -> str:
        """
        Consume and return the next character ("" at end).

        Reading past the end keeps returning "" and does not move the
        position.
        """
        char = self.peek()
        if char == "":
            self._last_position = None
            return char

        self._buffer.pop()
        self._last_position = (self._line, self._column)
        if char == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return char

    def unget(self, char: str) -> None:
        """
        Push back the character returned by the last get().

        Only one character can be pushed back, and only right after a
        successful get().

        Raises:
            ValueError: If there is nothing to push back
        """
        if self._last_position is None or not char:
            raise ValueError("unget() must follow a successful get()")
        self._buffer.append(char)
        self._line, self._column = self._last_position
        self._last_position = None

    def at_end(self) -> bool:
        """Check if the input is exhausted."""
        return self.peek() == ""

    # =========================================================================
    # Position Information
    # =========================================================================

    @property
    def line(self) -> int:
        """Line number of the next character (1-indexed)."""
        return self._line

    @property
    def column(self) -> int:
        """Column number of the next character (1-indexed)."""
        return self._column

    @property
    def location(self) -> SourceLocation:
        """SourceLocation of the next character."""
        return SourceLocation(self.filename, self._line, self._column)

    def line_text(self, line: int) -> Optional[str]:
        """
        Return the text of a source line for error context.

        Sources that do not keep their text return None.
        """
        return None


class StringSource(CharSource):
    """Character source over an in-memory string."""

    def __init__(self, text: str, filename: str = "<input>"):
        super().__init__(filename)
        self.text = text
        self._pos = 0

    def _read(self) -> str:
        if self._pos >= len(self.text):
            return ""
        char = self.text[self._pos]
        self._pos += 1
        return char

    def line_text(self, line: int) -> Optional[str]:
        lines = self.text.split("\n")
        if 1 <= line <= len(lines):
            return lines[line - 1]
        return None


class StreamSource(CharSource):
    """
    Character source over a text stream.

    The stream is read one character at a time and is not closed by the
    source; the caller owns it.
    """

    def __init__(self, stream: TextIO, filename: Optional[str] = None):
        if filename is None:
            filename = getattr(stream, "name", "<stream>")
            if not isinstance(filename, str):
                filename = "<stream>"
        super().__init__(filename)
        self.stream = stream

    def _read(self) -> str:
        char = self.stream.read(1)
        if not isinstance(char, str):
            raise TypeError(
                f"{self.filename} is not a text stream (read() returned {type(char).__name__}); "
                "open it in text mode"
            )
        return char


def as_source(data, filename: str = "<input>") -> CharSource:
    """
    Wrap a string or text stream in a CharSource.

    CharSource instances are returned unchanged.

    Raises:
        TypeError: If data is not a str, a text stream or a CharSource
    """
    if isinstance(data, CharSource):
        return data
    if isinstance(data, str):
        return StringSource(data, filename)
    if hasattr(data, "read"):
        return StreamSource(data, filename if filename != "<input>" else None)
    raise TypeError(f"cannot read characters from {type(data).__name__}")
