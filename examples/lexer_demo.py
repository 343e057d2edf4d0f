#!/usr/bin/env python3
"""
Mython Lexer Demo
=================

This script demonstrates how to use the Mython lexer to:
1. Dump the token stream of a small program
2. Drive the lexer the way a parser does, with expect_next()
3. Report a malformed literal without an exception (scan_source)

Usage:
    python examples/lexer_demo.py
"""

from mython import Lexer, TokenType, format_tokens, scan_source, tokenize


PROGRAM = """\
class Counter:
  def add(self, n):
    # keep a running total
    self.total = self.total + n
    if self.total >= 10:
      print 'big'
"""


def read_assignment(lexer: Lexer) -> tuple[str, int]:
    """Read one 'name = number' line, as a parser would."""
    name = lexer.expect_next(TokenType.IDENTIFIER).value
    lexer.expect_next(TokenType.CHAR, "=")
    value = lexer.expect_next(TokenType.NUMBER).value
    lexer.expect_next(TokenType.NEWLINE)
    return name, value


def main():
    # ==========================================================================
    # 1. Token dump with positions
    # ==========================================================================
    print("Tokens:")
    print(format_tokens(tokenize(PROGRAM, "counter.my"), positions=True))

    # ==========================================================================
    # 2. Pull API
    # ==========================================================================
    lexer = Lexer("width = 80\nheight = 24\n", "screen.my")
    print()
    print("Assignments:", [read_assignment(lexer) for _ in range(2)])
    lexer.expect_next(TokenType.EOF)

    # ==========================================================================
    # 3. Errors as results
    # ==========================================================================
    result = scan_source("greeting = 'hello\n", "broken.my")
    print()
    print(f"Scanned {len(result.tokens)} tokens before failing:")
    print(result.error)


if __name__ == "__main__":
    main()
