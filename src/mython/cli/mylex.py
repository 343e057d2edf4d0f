"""
mylex - Mython Token Dump Command-Line Interface
================================================

This module implements a command-line tool that runs the Mython lexer over
a source file and prints the resulting tokens, one per line. It is meant
for inspecting how the lexer sees a program, in particular where INDENT,
DEDENT and NEWLINE tokens are produced.

Usage Examples
--------------
Dump tokens:
    $ mylex program.my

With source positions:
    $ mylex program.my --positions

Four-space indentation and no integer limit:
    $ mylex -w 4 --no-max-number program.my

Verbose mode (debug logging from the lexer):
    $ mylex -v program.my
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click

from mython import __version__
from mython.cli.errors import handle_cli_exception
from mython.config import LexerOptions
from mython.lexer import Lexer
from mython.source import StreamSource
from mython.tokens import format_token


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s" if verbose else "%(levelname)s: %(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-p", "--positions",
    is_flag=True,
    help="Prefix each token with its line:column",
)
@click.option(
    "-c", "--count",
    is_flag=True,
    help="Print a summary of how many tokens were produced",
)
@click.option(
    "-w", "--indent-width",
    type=click.IntRange(min=1),
    default=None,
    help="Spaces per indentation level (default: 2, or MYTHON_INDENT_WIDTH)",
)
@click.option(
    "--max-number",
    type=click.IntRange(min=0),
    default=None,
    help="Largest accepted integer literal (default: 2147483647, or MYTHON_MAX_NUMBER)",
)
@click.option(
    "--no-max-number",
    is_flag=True,
    help="Accept integer literals of any size",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="mylex")
def main(
    input_file: Path,
    positions: bool,
    count: bool,
    indent_width: Optional[int],
    max_number: Optional[int],
    no_max_number: bool,
    verbose: bool,
) -> None:
    """
    Print the Mython token stream of a source file.

    INPUT_FILE is the Mython source file to scan.

    \b
    Examples:
        mylex prog.my                # One token per line
        mylex prog.my -p             # With line:column positions
        mylex prog.my -w 4           # Four spaces per indent level
    """
    setup_logging(verbose)

    try:
        if max_number is not None and no_max_number:
            raise click.BadParameter("--max-number and --no-max-number are mutually exclusive")

        options = LexerOptions.from_env()
        if indent_width is not None:
            options = replace(options, indent_width=indent_width)
        if no_max_number:
            options = replace(options, max_number=None)
        elif max_number is not None:
            options = replace(options, max_number=max_number)

        if verbose:
            limit = "none" if options.max_number is None else options.max_number
            click.echo(f"Scanning {input_file} (indent width {options.indent_width}, max number {limit})")

        produced = 0
        with open(input_file, encoding="utf-8") as stream:
            lexer = Lexer(StreamSource(stream, str(input_file)), options=options)
            for token in lexer.tokenize():
                produced += 1
                click.echo(format_token(token, positions))

        logger.debug(f"Scanned {produced} tokens from {input_file}")
        if count:
            click.echo(f"{produced} tokens")

    except UnicodeDecodeError as e:
        handle_cli_exception(
            click.BadParameter(f"{input_file} is not valid UTF-8 text: {e.reason} at byte {e.start}"),
            verbose=verbose,
        )
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
