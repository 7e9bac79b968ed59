"""Poll-dispatch-render loop for the interactive list."""

import curses
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from targetctl.core.exit_codes import ExitCode
from targetctl.core.session import CleanupSession
from targetctl.tui.keys import Action, resolve_action

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 100
NO_KEY = -1


class InputSource(Protocol):
    """The part of a curses window the loop reads keys from."""

    def timeout(self, delay: int) -> None: ...

    def getch(self) -> int: ...


@dataclass(frozen=True, slots=True)
class LoopOutcome:
    """Why the loop stopped.

    Attributes:
        exit_code: Process exit code to use once the terminal is restored.
        error: Error message for a failed loop, None on a normal quit.
    """

    exit_code: ExitCode
    error: str | None = None


class InteractionLoop:
    """Reads keys, applies them to the session and redraws.

    ``run`` blocks for at most ``poll_interval_ms`` per key read so the
    process stays responsive without spinning. It never exits the
    process; it returns a LoopOutcome to the caller instead.

    Args:
        session: Session state to drive.
        screen: Key source (a curses window).
        render: Callback that redraws the screen.
        poll_interval_ms: Maximum wait for a key press, in milliseconds.
    """

    def __init__(
        self,
        session: CleanupSession,
        screen: InputSource,
        render: Callable[[], None],
        poll_interval_ms: int = POLL_INTERVAL_MS,
    ) -> None:
        self._session = session
        self._screen = screen
        self._render = render
        self._poll_interval_ms = poll_interval_ms

    def run(self) -> LoopOutcome:
        """Run until the user quits or terminal I/O fails.

        Returns:
            LoopOutcome with ExitCode.OK on quit, or
            ExitCode.INTERACTIVE_ERROR and a message on failure.
        """
        try:
            self._screen.timeout(self._poll_interval_ms)
            self._render()
            while True:
                key = self._screen.getch()
                if key == NO_KEY:
                    continue
                action = resolve_action(key)
                if action is Action.QUIT:
                    return LoopOutcome(exit_code=ExitCode.OK)
                if action is not None:
                    self.dispatch(action)
                self._render()
        except (curses.error, OSError) as e:
            logger.debug("Interactive loop failed", exc_info=True)
            return LoopOutcome(exit_code=ExitCode.INTERACTIVE_ERROR, error=str(e))

    def dispatch(self, action: Action) -> None:
        """Apply a single non-quit action to the session."""
        session = self._session
        if action is Action.NEXT:
            session.select_next()
        elif action is Action.PREVIOUS:
            session.select_previous()
        elif action is Action.TRASH_SELECTED:
            session.trash_selected()
        elif action is Action.TRASH_ALL:
            session.trash_all()
