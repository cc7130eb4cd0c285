"""
CLI Error Reporting
===================

Maps exceptions raised during a compile run to stderr messages and exit codes.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from sexpc.errors import SexpcError


class ExitCode(IntEnum):
    """Process exit codes returned by sexpc."""
    SUCCESS = 0
    BUILD_ERROR = 1      # Lex, parse or code generation error
    INVALID_ARGS = 2     # Invalid arguments, missing or undecodable files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception on stderr and exit with the matching code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, SexpcError):
        # Compiler errors already carry the "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.BUILD_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, UnicodeDecodeError):
        click.echo(f"Error: input is not valid UTF-8 ({error.reason} at byte {error.start})", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            click.echo(traceback.format_exc(), err=True)
        sys.exit(ExitCode.INTERNAL_ERROR)
