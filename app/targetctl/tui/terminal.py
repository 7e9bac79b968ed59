"""Terminal mode handling for the interactive list.

The curses screen (raw input, keypad mode, hidden cursor) is held as a
scoped resource: it is always released, whether the block exits
normally, raises, or the process receives SIGTERM.
"""

import curses
import logging
import signal
from collections.abc import Iterator
from contextlib import contextmanager
from types import FrameType

logger = logging.getLogger(__name__)

ESCAPE_DELAY_MS = 25


class TerminalTerminated(Exception):
    """Raised inside a terminal session when SIGTERM arrives."""


def _raise_terminated(signum: int, _frame: FrameType | None) -> None:
    raise TerminalTerminated(f"Received signal {signum}")


@contextmanager
def terminal_session() -> Iterator["curses.window"]:
    """Enter full-screen raw mode and restore the terminal on exit.

    Ctrl-C is delivered as a key press (code 3) instead of SIGINT while
    raw mode is active. SIGTERM raises TerminalTerminated so that the
    terminal is restored before the process exits.

    Yields:
        The curses standard screen.

    Raises:
        curses.error: If the terminal cannot be initialised.
    """
    screen = curses.initscr()
    previous_handler = signal.signal(signal.SIGTERM, _raise_terminated)
    try:
        curses.noecho()
        curses.raw()
        screen.keypad(True)
        curses.set_escdelay(ESCAPE_DELAY_MS)
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")
        yield screen
    finally:
        screen.keypad(False)
        curses.noraw()
        curses.echo()
        try:
            curses.curs_set(1)
        except curses.error:
            logger.debug("Terminal does not support showing the cursor")
        curses.endwin()
        signal.signal(signal.SIGTERM, previous_handler)
