"""
Error handling utilities for the loggit CLI
"""

import sys
from typing import Optional
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

console = Console(stderr=True)


class CLIError(Exception):
    """Base exception for CLI errors"""

    def __init__(self, message: str, exit_code: int = 1):
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class InputError(CLIError):
    """Typed input could not be parsed"""

    def __init__(self, message: str):
        super().__init__(message, exit_code=2)


class TerminalError(CLIError):
    """Terminal could not be switched to or from raw mode"""

    def __init__(self, message: str):
        super().__init__(message, exit_code=3)


class StorageError(CLIError):
    """Log store could not be read or written"""

    def __init__(self, message: str):
        super().__init__(message, exit_code=4)


def format_exception(exc: Exception, context: Optional[str] = None) -> str:
    """
    Format exception with context

    Args:
        exc: The exception to format
        context: Optional context about where error occurred

    Returns:
        Formatted error message
    """
    lines = []

    if context:
        lines.append(f"Error in {context}:")

    lines.append(f"{type(exc).__name__}: {str(exc)}")

    return "\n".join(lines)


def show_error(exc: Exception, context: Optional[str] = None, verbose: bool = False):
    """
    Display error message to user

    Args:
        exc: The exception to display
        context: Optional context about where error occurred
        verbose: Show full traceback if True
    """
    if verbose:
        console.print_exception()
    else:
        error_msg = format_exception(exc, context)
        console.print(Panel(Text(error_msg), title="Error", border_style="red"))

        suggestion = suggest_fix(exc)
        if suggestion:
            console.print(f"\n[cyan]Suggestion:[/cyan] {suggestion}")


def suggest_fix(exc: Exception) -> Optional[str]:
    """
    Suggest fixes for common errors

    Args:
        exc: The exception to analyze

    Returns:
        Suggestion string or None
    """
    error_msg = str(exc).lower()

    if isinstance(exc, InputError):
        return "Enter hours as a number, e.g. 1.5"

    if isinstance(exc, TerminalError) or "/dev/tty" in error_msg:
        return "Run loggit from an interactive terminal."

    if "permission denied" in error_msg:
        return "Check file permissions on the log store directory."

    if "corrupted" in error_msg or "json" in error_msg:
        return "Check that the log file is valid JSON, or move it aside to start fresh."

    if "no such file or directory" in error_msg or "does not exist" in error_msg:
        return "Check that the path exists and is spelled correctly."

    if "yaml" in error_msg:
        return "Check that the config file is valid YAML."

    return None


def handle_cli_error(exc: Exception, verbose: bool = False):
    """
    Handle CLI error and exit with appropriate code

    Args:
        exc: The exception to handle
        verbose: Show full traceback if True
    """
    show_error(exc, verbose=verbose)
    if isinstance(exc, CLIError):
        sys.exit(exc.exit_code)
    sys.exit(1)
