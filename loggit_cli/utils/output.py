"""
Output utilities for the loggit CLI using Rich
"""

from rich.console import Console

console = Console()


def print_success(message: str):
    """Print success message with green checkmark"""
    console.print(f"✓ {message}", style="bold green")


def print_warning(message: str):
    """Print warning message with yellow triangle"""
    console.print(f"⚠ {message}", style="bold yellow")


def print_info(message: str):
    """Print info message with blue icon"""
    console.print(f"ℹ {message}", style="bold blue")
