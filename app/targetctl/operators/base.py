"""Abstract base class for deletion operators.

This module defines the Deleter interface used by the cleanup session
to remove a single path, and the result type it reports.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class TrashResult:
    """Result of a single deletion.

    Attributes:
        path: Path that was operated on.
        success: Whether the path was removed.
        error: Error message if the operation failed, None otherwise.
    """

    path: Path
    success: bool
    error: str | None = None

    @property
    def failed(self) -> bool:
        """Check if the deletion failed."""
        return not self.success


class Deleter(ABC):
    """Abstract base class for path deletion backends.

    A deleter removes one path per call and reports the outcome as a
    TrashResult. Failures are returned, never raised, so callers can
    continue with other paths.

    Example:
        >>> deleter = TrashOperator()
        >>> result = deleter.trash(Path("/home/me/code/app/target"))
        >>> result.success
        True
    """

    @abstractmethod
    def trash(self, path: Path) -> TrashResult:
        """Remove a single path.

        Args:
            path: Absolute path to remove.

        Returns:
            TrashResult describing the outcome.
        """

    def trash_many(self, paths: list[Path]) -> list[TrashResult]:
        """Remove several paths in order, isolating failures per path.

        Args:
            paths: Paths to remove.

        Returns:
            One TrashResult per input path, in input order.
        """
        return [self.trash(path) for path in paths]
