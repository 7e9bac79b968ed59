"""Interactive terminal list.

This package contains the key bindings, the curses renderer, the
terminal mode scope and the interaction loop.
"""

import curses
import logging

from targetctl.core.exit_codes import ExitCode
from targetctl.core.session import CleanupSession
from targetctl.tui.loop import InteractionLoop, LoopOutcome
from targetctl.tui.render import render
from targetctl.tui.terminal import TerminalTerminated, terminal_session
from targetctl.utils.logs import suspend_console_logging

logger = logging.getLogger(__name__)


def run_interactive(session: CleanupSession) -> LoopOutcome:
    """Show the interactive list until the user quits.

    The terminal is always restored before this function returns.

    Args:
        session: Session with at least one scan result.

    Returns:
        LoopOutcome describing how the list was closed.
    """
    with suspend_console_logging():
        try:
            with terminal_session() as screen:
                loop = InteractionLoop(session, screen, render=lambda: render(screen, session))
                return loop.run()
        except (KeyboardInterrupt, TerminalTerminated):
            logger.info("Interrupted, leaving interactive list")
            return LoopOutcome(exit_code=ExitCode.OK)
        except curses.error as e:
            return LoopOutcome(exit_code=ExitCode.INTERACTIVE_ERROR, error=str(e))


__all__ = ["InteractionLoop", "LoopOutcome", "run_interactive"]
