"""CLI package for targetctl.

This package contains the Typer application.
"""

from targetctl.cli.main import app

__all__ = ["app"]
