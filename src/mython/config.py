"""
Lexer Configuration
===================

Options that tune how source text is scanned. Configuration can come from:
- Default values (defined here)
- Keyword arguments / CLI options
- Environment variables (LexerOptions.from_env)

Environment Variables
---------------------
MYTHON_INDENT_WIDTH: Spaces per indentation level (integer >= 1)
MYTHON_MAX_NUMBER:   Largest integer literal, or "none" for no limit
"""

from dataclasses import dataclass
from typing import Optional
import logging
import os


logger = logging.getLogger(__name__)

# Range of a signed 32-bit int
DEFAULT_MAX_NUMBER = 2**31 - 1


@dataclass(frozen=True)
class LexerOptions:
    """
    Lexer configuration options.

    Options are immutable; use dataclasses.replace() to derive a variant.

    Attributes:
        indent_width: Number of leading spaces that make one indentation
                      level. Leftover spaces are ignored, so with the
                      default of 2, three spaces open one level.
        max_number: Largest accepted integer literal. Larger literals raise
                    NumberOverflowError. None disables the check.
    """
    indent_width: int = 2
    max_number: Optional[int] = DEFAULT_MAX_NUMBER

    def __post_init__(self):
        if self.indent_width < 1:
            raise ValueError(f"indent_width must be at least 1, got {self.indent_width}")
        if self.max_number is not None and self.max_number < 0:
            raise ValueError(f"max_number must not be negative, got {self.max_number}")

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Invalid values are logged and ignored.

        Returns:
            LexerOptions with values from environment variables
        """
        overrides = {}

        if width := os.environ.get("MYTHON_INDENT_WIDTH"):
            try:
                value = int(width)
            except ValueError:
                value = 0
            if value >= 1:
                overrides["indent_width"] = value
            else:
                logger.warning(f"Ignoring invalid MYTHON_INDENT_WIDTH={width!r}")

        if limit := os.environ.get("MYTHON_MAX_NUMBER"):
            if limit.strip().lower() == "none":
                overrides["max_number"] = None
            else:
                try:
                    value = int(limit)
                except ValueError:
                    value = -1
                if value >= 0:
                    overrides["max_number"] = value
                else:
                    logger.warning(f"Ignoring invalid MYTHON_MAX_NUMBER={limit!r}")

        return cls(**overrides)
