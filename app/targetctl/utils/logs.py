"""Logging setup for the command line.

Log records go to stderr through Rich. While the full-screen list is
shown, console logging is muted so records cannot overwrite the
display.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from rich.logging import RichHandler

from targetctl.utils.formatting import err_console

_HANDLER_NAME = "targetctl-console"


def configure_logging(verbose: bool = False) -> logging.Handler:
    """Install the Rich console handler on the package logger.

    Calling this again replaces the previous handler.

    Args:
        verbose: Log DEBUG records instead of WARNING and above.

    Returns:
        The installed handler.
    """
    package_logger = logging.getLogger("targetctl")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_path=verbose, markup=False)
    handler.set_name(_HANDLER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    handler.setLevel(level)

    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler


@contextmanager
def suspend_console_logging() -> Iterator[None]:
    """Mute the console handler for the duration of the block."""
    package_logger = logging.getLogger("targetctl")
    muted: list[tuple[logging.Handler, int]] = []
    for handler in package_logger.handlers:
        if handler.get_name() == _HANDLER_NAME:
            muted.append((handler, handler.level))
            handler.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        for handler, level in muted:
            handler.setLevel(level)
