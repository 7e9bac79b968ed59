"""Cleanup session state and deletion operations.

Ties the result list, the selection cursor and a deletion backend
together so that every mutation keeps the cursor valid.
"""

import logging
from pathlib import Path

from targetctl.core.results import ResultSet
from targetctl.core.selection import SelectionCursor
from targetctl.operators.base import Deleter, TrashResult
from targetctl.scanner.models import RunStats

logger = logging.getLogger(__name__)


class CleanupSession:
    """State of one interactive cleanup run.

    Owns the scan results, the selection cursor and the run statistics.
    The cursor starts on the first entry when there is one.

    Args:
        paths: Scan matches in discovery order.
        deleter: Backend used to remove paths.
        stats: Statistics of the scan that produced the paths.
    """

    def __init__(self, paths: list[Path], deleter: Deleter, stats: RunStats) -> None:
        self.results = ResultSet(paths)
        self.cursor = SelectionCursor(self.results)
        self.stats = stats
        self._deleter = deleter
        self.trashed_count = 0
        self.failed_count = 0
        self.status: str | None = None
        self.cursor.next()

    @property
    def selected_path(self) -> Path | None:
        """Path under the cursor, or None."""
        index = self.cursor.selected
        if index is None:
            return None
        return self.results.get(index)

    def select_next(self) -> None:
        """Move the cursor down (wraps)."""
        self.cursor.next()

    def select_previous(self) -> None:
        """Move the cursor up (wraps)."""
        self.cursor.previous()

    def trash_selected(self) -> TrashResult | None:
        """Trash the selected entry.

        On success the entry is removed and the cursor stays on the same
        index, which now holds the following entry (wrapping to the top
        when the last entry was removed). On failure nothing changes so
        the operator can retry.

        Returns:
            TrashResult, or None if nothing was selected.
        """
        index = self.cursor.selected
        if index is None:
            return None
        path = self.results.get(index)
        if path is None:
            self.cursor.sync()
            return None

        result = self._deleter.trash(path)
        if result.success:
            self.results.remove(index)
            self.cursor.sync()
            self.trashed_count += 1
            self.status = f"Trashed {path}"
        else:
            self.failed_count += 1
            self.status = f"Failed to trash {path}: {result.error}"
        return result

    def trash_all(self) -> list[TrashResult]:
        """Trash every entry in list order.

        A failure does not stop the remaining deletions. Afterwards the
        list is cleared and the cursor reset, whatever the outcomes.

        Returns:
            One TrashResult per entry that was listed.
        """
        results = self._deleter.trash_many(list(self.results))
        failures = [r for r in results if r.failed]
        for failure in failures:
            logger.warning("Could not trash %s: %s", failure.path, failure.error)

        self.results.clear()
        self.cursor.clear()

        succeeded = len(results) - len(failures)
        self.trashed_count += succeeded
        self.failed_count += len(failures)
        if failures:
            self.status = f"Trashed {succeeded} folder(s), {len(failures)} failed"
        else:
            self.status = f"Trashed {succeeded} folder(s)"
        return results
