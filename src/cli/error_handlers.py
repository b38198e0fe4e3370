"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click

from src.cli.utils.formatters import format_error, format_warning

EXIT_CONFIGURATION_ERROR = 1
EXIT_DATA_VALIDATION_ERROR = 3
EXIT_PROCESSING_ERROR = 4
EXIT_CANCELLED = 130
EXIT_UNEXPECTED_ERROR = 255


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    pass


class DataValidationError(CLIError):
    """Error related to rejected input or an invalid catalog file."""

    pass


class ProcessingError(CLIError):
    """Error related to catalog processing."""

    pass


_CLI_ERRORS = (
    (ConfigurationError, "Configuration Error", EXIT_CONFIGURATION_ERROR),
    (DataValidationError, "Data Validation Error", EXIT_DATA_VALIDATION_ERROR),
    (ProcessingError, "Processing Error", EXIT_PROCESSING_ERROR),
)


def handle_cli_error(error: BaseException, debug: bool = False) -> int:
    """
    Print a user-friendly message for an error.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code for the error type
    """
    for error_cls, title, exit_code in _CLI_ERRORS:
        if isinstance(error, error_cls):
            click.echo(format_error(f"{title}: {error.message}"))
            if error.recovery_hint:
                click.echo(format_warning(f"Hint: {error.recovery_hint}"))
            return exit_code

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return EXIT_CANCELLED

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
    click.echo(str(error))

    if debug:
        click.echo("\nFull stack trace:")
        click.echo(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        )
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"))

    return EXIT_UNEXPECTED_ERROR


def with_error_handling(debug: bool = False):
    """
    Context manager that turns exceptions into messages and exit codes.

    Args:
        debug: Whether to show full stack traces

    Returns:
        Context manager

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                # Command implementation
                pass
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_val is None or isinstance(exc_val, (SystemExit, click.exceptions.Exit)):
                return False
            exit_code = handle_cli_error(exc_val, self.show_debug)
            sys.exit(exit_code)

    return ErrorHandler(debug)
