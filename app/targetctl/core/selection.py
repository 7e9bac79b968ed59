"""Selection cursor over a ResultSet.

The cursor is either empty (``None``) or points at a valid index of the
result set it is bound to. Movement wraps around at both ends, and
``sync`` re-validates the cursor after the result set shrinks.
"""

from targetctl.core.results import ResultSet


class SelectionCursor:
    """Single highlighted index over a ResultSet.

    Invariant: when the result set is empty the cursor is ``None``;
    otherwise it is ``None`` or an index in ``[0, len)``.

    Attributes:
        offset: First visible row, maintained by the renderer for
            scrolling. Not used by any selection logic.
    """

    def __init__(self, results: ResultSet) -> None:
        self._results = results
        self._selected: int | None = None
        self.offset = 0

    @property
    def selected(self) -> int | None:
        """Currently selected index, or None."""
        return self._selected

    def select(self, index: int | None) -> None:
        """Select an index directly.

        Not bound to any key; the interactive list only moves with
        ``next`` and ``previous``. Used by tests and callers that need
        to place the cursor on a known entry.

        Args:
            index: Index to select, or None to clear the selection.

        Raises:
            IndexError: If index is outside the result set.
        """
        if index is not None and not 0 <= index < len(self._results):
            msg = f"Selection index {index} out of range for {len(self._results)} item(s)"
            raise IndexError(msg)
        self._selected = index

    def clear(self) -> None:
        """Reset to no selection and scroll back to the top."""
        self._selected = None
        self.offset = 0

    def next(self) -> None:
        """Move to the next entry, wrapping from the last to the first."""
        count = len(self._results)
        if count == 0:
            self._selected = None
            return
        if self._selected is None or self._selected >= count - 1:
            self._selected = 0
        else:
            self._selected += 1

    def previous(self) -> None:
        """Move to the previous entry, wrapping from the first to the last."""
        count = len(self._results)
        if count == 0:
            self._selected = None
            return
        if self._selected is None or self._selected == 0:
            self._selected = count - 1
        else:
            self._selected -= 1

    def sync(self) -> None:
        """Re-validate the cursor after the result set changed.

        An empty result set clears the selection. An index past the new
        end wraps to 0. Otherwise the index is kept and now refers to the
        entry that moved into that slot.
        """
        count = len(self._results)
        if count == 0:
            self.clear()
        elif self._selected is not None and self._selected >= count:
            self._selected = 0
