"""
sexpc - Compiler Command-Line Interface
=======================================

This module implements the command-line interface for the compiler.

Usage Examples
--------------
Compile to stdout:
    $ sexpc program.lisp

With output file:
    $ sexpc program.lisp -o program.c

From stdin:
    $ echo '(add 2 3)' | sexpc -

Debug dumps:
    $ sexpc --tokens program.lisp
    $ sexpc --ast program.lisp

Verbose mode:
    $ sexpc -v program.lisp
"""

import logging
from pathlib import Path
from typing import Optional, TextIO

import click

from sexpc import __version__
from sexpc.compiler import Compiler, CompilerOptions
from sexpc.lexer import lex
from sexpc.parser import parse_source
from sexpc.printer import ASTPrinter
from sexpc.cli.errors import handle_cli_exception


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument("input_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token stream and exit (for debugging)",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the source AST and exit (for debugging)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="sexpc")
def main(
    input_file: TextIO,
    output: Optional[Path],
    tokens: bool,
    ast: bool,
    verbose: bool,
) -> None:
    """
    Compile call expressions to C-like call syntax.

    INPUT_FILE is the source file to compile, or '-' for stdin.

    \b
    Examples:
        sexpc program.lisp               # Print to stdout
        sexpc program.lisp -o out.c      # Write to a file
        echo '(add 2 3)' | sexpc -       # Read stdin
        sexpc --ast program.lisp         # Dump the AST

    \b
    Input language:
        (name arg ...)   call; args are numbers, "strings" or calls
    """
    setup_logging(verbose)

    try:
        if verbose:
            click.echo(f"Compiling {input_file.name}...", err=True)

        source = input_file.read()

        if tokens:
            for token in lex(source):
                click.echo(repr(token))
            return

        if ast:
            click.echo(ASTPrinter().print(parse_source(source)))
            return

        compiler = Compiler(CompilerOptions(trailing_newline=output is not None))
        result = compiler.compile_source(source)

        if output is not None:
            output.write_text(result.output, encoding="utf-8")
            if verbose:
                click.echo(f"Wrote {len(result.output)} characters to {output}", err=True)
        elif result.output:
            click.echo(result.output)

        if verbose:
            click.echo(f"Tokenized: {result.token_count} tokens", err=True)
            click.echo(f"Generated: {len(result.target.body)} statements", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
