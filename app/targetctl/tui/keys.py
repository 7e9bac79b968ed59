"""Key bindings for the interactive list."""

import curses
from enum import Enum

KEY_ESCAPE = 27
KEY_CTRL_C = 3

HELP_TEXT = "Select (Up/Down)  Trash all (a)  Trash selected (Del)  Quit (Esc)"


class Action(str, Enum):
    """User action triggered by a key press."""

    PREVIOUS = "previous"
    NEXT = "next"
    TRASH_SELECTED = "trash_selected"
    TRASH_ALL = "trash_all"
    QUIT = "quit"
    REDRAW = "redraw"


_KEYMAP: dict[int, Action] = {
    curses.KEY_UP: Action.PREVIOUS,
    curses.KEY_DOWN: Action.NEXT,
    curses.KEY_DC: Action.TRASH_SELECTED,
    ord("a"): Action.TRASH_ALL,
    KEY_ESCAPE: Action.QUIT,
    KEY_CTRL_C: Action.QUIT,
    curses.KEY_RESIZE: Action.REDRAW,
}


def resolve_action(key: int) -> Action | None:
    """Map a curses key code to an action.

    Args:
        key: Value returned by ``window.getch()``.

    Returns:
        The bound Action, or None for unbound keys.
    """
    return _KEYMAP.get(key)
