"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich. Messages passed
to the print helpers are shown literally: paths may contain square
brackets, so any markup in them is escaped.
"""

import sys

from rich.console import Console
from rich.markup import escape

from targetctl.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def format_header(count: int, elapsed: float) -> str:
    """Format the result list header.

    Args:
        count: Number of target folders currently listed.
        elapsed: Scan duration in seconds.

    Returns:
        Header text, e.g. "Found 3 target folders (0.12s)".
    """
    return f"Found {count} target folders ({elapsed:.2f}s)"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
