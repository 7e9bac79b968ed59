"""Main CLI application entry point.

Defines the Typer application: scan a directory tree, then open the
interactive list of target folders.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from targetctl import __version__
from targetctl.core.exit_codes import ExitCode
from targetctl.core.session import CleanupSession
from targetctl.operators.trash import TrashOperator
from targetctl.scanner.models import ScanError, ScanReport
from targetctl.scanner.scanner import TargetScanner
from targetctl.tui import run_interactive
from targetctl.utils.formatting import (
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from targetctl.utils.logs import configure_logging

app = typer.Typer(
    name="targetctl",
    help="Find Rust target folders and move them to the trash.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"targetctl version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    path: Annotated[
        Path | None,
        typer.Argument(
            help="Directory to scan.",
            show_default="current directory",
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """Scan for Rust [bold]target[/bold] folders and trash them interactively.

    Keys: Up/Down select, Del trashes the selected folder, [bold]a[/bold]
    trashes all folders, Esc or Ctrl-C quits.
    """
    configure_logging(verbose)
    root = path if path is not None else Path.cwd()

    console.print("[muted]Scanning...[/]")
    try:
        report = TargetScanner().scan(root)
    except ScanError as e:
        print_error(f"Scanning failed: {e}")
        raise typer.Exit(code=ExitCode.SCAN_FAILED) from e

    _print_scan_errors(report, verbose)

    if report.is_empty:
        print_info("No target folders found!")
        raise typer.Exit(code=ExitCode.OK)

    session = CleanupSession(report.matches, TrashOperator(), report.stats)
    outcome = run_interactive(session)

    _print_session_summary(session)

    if outcome.error is not None:
        print_error(outcome.error)
    if outcome.exit_code != ExitCode.OK:
        raise typer.Exit(code=outcome.exit_code)


# === Private helper functions ===


def _print_scan_errors(report: ScanReport, verbose: bool) -> None:
    """Warn about directories that could not be scanned."""
    if not report.errors:
        return
    print_warning(f"{len(report.errors)} director(ies) could not be scanned.")
    if verbose:
        for error in report.errors:
            line = escape(f"{error.path}: {error.reason}")
            console.print(f"  [muted]{line}[/muted]")


def _print_session_summary(session: CleanupSession) -> None:
    """Print how many folders were trashed during the session."""
    if session.trashed_count:
        print_success(
            f"Trashed {session.trashed_count} of {session.stats.match_count} target folder(s)."
        )
    if session.failed_count:
        print_warning(f"{session.failed_count} trash operation(s) failed.")


if __name__ == "__main__":
    app()
