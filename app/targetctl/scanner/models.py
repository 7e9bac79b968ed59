"""Scanner domain models.

Data structures produced by a single scan run: the list of matched
build directories, directories that could not be read, and timing.
"""

from dataclasses import dataclass
from pathlib import Path


class ScanError(Exception):
    """Raised when the scan root itself cannot be scanned."""

    def __init__(self, root: Path, reason: str) -> None:
        self.root = root
        self.reason = reason
        super().__init__(f"Cannot scan {root}: {reason}")


@dataclass(frozen=True, slots=True)
class DirectoryError:
    """A directory below the scan root that could not be read.

    Attributes:
        path: Directory that failed to open or list.
        reason: Human-readable error description.
    """

    path: Path
    reason: str


@dataclass(frozen=True, slots=True)
class RunStats:
    """Informational statistics for one scan run.

    Attributes:
        elapsed: Wall-clock scan duration in seconds.
        match_count: Number of target directories found.
        error_count: Number of directories that could not be read.
    """

    elapsed: float
    match_count: int
    error_count: int = 0

    def __post_init__(self) -> None:
        """Validate statistics after initialization."""
        if self.elapsed < 0:
            msg = f"Elapsed time cannot be negative, got {self.elapsed}"
            raise ValueError(msg)
        if self.match_count < 0 or self.error_count < 0:
            msg = "Counts cannot be negative"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ScanReport:
    """Complete outcome of a scan.

    Attributes:
        root: Absolute scan root.
        matches: Matched ``target`` directories in discovery order.
        errors: Directories that were skipped because they could not be read.
        stats: Timing and counts for display.
    """

    root: Path
    matches: list[Path]
    errors: list[DirectoryError]
    stats: RunStats

    @property
    def is_empty(self) -> bool:
        """Check if the scan found nothing."""
        return not self.matches
