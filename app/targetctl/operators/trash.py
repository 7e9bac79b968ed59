"""Trash-based deletion operator.

Moves paths to the desktop trash (freedesktop.org trash on Linux,
Recycle Bin / Trash on Windows and macOS) so deletions can be undone
from the file manager.
"""

import logging
from pathlib import Path

from send2trash import send2trash

from targetctl.operators.base import Deleter, TrashResult

logger = logging.getLogger(__name__)


class TrashOperator(Deleter):
    """Moves paths to the platform trash using Send2Trash."""

    def trash(self, path: Path) -> TrashResult:
        """Move a single path to the trash.

        Args:
            path: Absolute path to move.

        Returns:
            TrashResult indicating success or failure.
        """
        if not path.exists():
            return TrashResult(
                path=path,
                success=False,
                error=f"Path does not exist: {path}",
            )

        try:
            send2trash(str(path))
        except OSError as e:
            logger.warning("Failed to trash %s: %s", path, e)
            return TrashResult(path=path, success=False, error=str(e))

        logger.info("Trashed %s", path)
        return TrashResult(path=path, success=True)
