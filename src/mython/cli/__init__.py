"""
Mython Command-Line Interface
=============================

This package provides the command-line tools for the Mython lexer:

- **mylex**: Dump the token stream of a source file

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["mylex"]
