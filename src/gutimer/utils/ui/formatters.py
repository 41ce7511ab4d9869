"""Message formatters for gutimer.

Everything here goes to stderr so it never interleaves with the
status line written on stdout.
"""

from rich.markup import escape

from .console import get_error_console


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_error_console().print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_info(message: str) -> None:
    """Display a plain diagnostic line."""
    get_error_console().print(message, markup=False)
