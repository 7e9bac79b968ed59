"""Curses renderer for the interactive list.

Draws a bordered list of target folders with a header, the current
selection marked with ``>>``, a status line with the last trash outcome
and a help box with the key bindings. Layout math lives in
``compute_view`` so it can be tested without a terminal.
"""

import curses
from dataclasses import dataclass

from targetctl.core.session import CleanupSession
from targetctl.tui.keys import HELP_TEXT
from targetctl.utils.formatting import format_header

HIGHLIGHT_SYMBOL = ">> "
ACTIONS_HEIGHT = 3
MIN_HEIGHT = ACTIONS_HEIGHT + 3
MIN_WIDTH = 20


@dataclass(frozen=True, slots=True)
class ListRow:
    """One visible row of the result list."""

    text: str
    selected: bool


@dataclass(frozen=True, slots=True)
class ListView:
    """Visible slice of the result list.

    Attributes:
        offset: Index of the first visible entry.
        rows: Rows to draw, top to bottom.
    """

    offset: int
    rows: list[ListRow]


def compute_view(session: CleanupSession, visible: int) -> ListView:
    """Compute the visible rows and scroll offset.

    Scrolls the minimum amount needed to keep the selection on screen,
    and stores the new offset on the session cursor.

    Args:
        session: Session to display.
        visible: Number of rows available for entries.

    Returns:
        ListView with the rows to draw.
    """
    cursor = session.cursor
    count = len(session.results)
    visible = max(visible, 0)
    offset = min(cursor.offset, max(count - visible, 0))

    selected = cursor.selected
    if selected is not None:
        if selected < offset:
            offset = selected
        elif selected >= offset + visible:
            offset = selected - visible + 1
    cursor.offset = offset

    rows: list[ListRow] = []
    for index in range(offset, min(offset + visible, count)):
        path = session.results.get(index)
        is_selected = index == selected
        prefix = HIGHLIGHT_SYMBOL if is_selected else " " * len(HIGHLIGHT_SYMBOL)
        rows.append(ListRow(text=f"{prefix}{path}", selected=is_selected))
    return ListView(offset=offset, rows=rows)


def render(screen: "curses.window", session: CleanupSession) -> None:
    """Draw the whole screen for the current session state.

    Args:
        screen: Curses standard screen.
        session: Session to display.
    """
    height, width = screen.getmaxyx()
    screen.erase()

    if height < MIN_HEIGHT or width < MIN_WIDTH:
        screen.addnstr(0, 0, "Terminal too small", max(width - 1, 0))
        screen.noutrefresh()
        curses.doupdate()
        return

    list_height = height - ACTIONS_HEIGHT
    list_win = screen.derwin(list_height, width, 0, 0)
    actions_win = screen.derwin(ACTIONS_HEIGHT, width, list_height, 0)
    inner_width = width - 4

    list_win.box()
    header = format_header(len(session.results), session.stats.elapsed)
    list_win.addnstr(0, 2, header, inner_width)

    view = compute_view(session, list_height - 2)
    for row_number, row in enumerate(view.rows, start=1):
        attr = curses.A_BOLD if row.selected else curses.A_NORMAL
        list_win.addnstr(row_number, 2, row.text, inner_width, attr)

    if session.status:
        list_win.addnstr(list_height - 1, 2, f" {session.status} ", inner_width)

    actions_win.box()
    actions_win.addnstr(0, 2, "Actions", inner_width)
    actions_win.addnstr(1, 2, HELP_TEXT, inner_width)

    screen.noutrefresh()
    list_win.noutrefresh()
    actions_win.noutrefresh()
    curses.doupdate()
