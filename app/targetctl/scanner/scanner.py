"""Recursive scanner for Cargo build directories.

Walks a directory tree depth-first and reports every ``target``
directory that sits next to a ``Cargo.toml``. Hidden entries and
symlinks are never followed, which keeps the walk inside the tree and
rules out symlink cycles. Unreadable directories below the root are
recorded and skipped.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path

from targetctl.scanner.filters import OUTPUT_DIR_NAME, EntryKind, classify_entry, should_descend
from targetctl.scanner.models import DirectoryError, RunStats, ScanError, ScanReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Entry:
    """Classified child of a scanned directory."""

    path: Path
    kind: EntryKind
    is_dir: bool


class TargetScanner:
    """Finds ``target`` directories of Cargo projects below a root.

    Each directory is listed once. If it directly contains both a
    ``Cargo.toml`` file and a ``target`` directory, the ``target`` path is
    recorded. The scanner then descends into every non-hidden,
    non-symlink subdirectory, so nested projects are reported
    independently.

    Example:
        >>> report = TargetScanner().scan(Path("~/code").expanduser())
        >>> for path in report.matches:
        ...     print(path)
    """

    def scan(self, root: Path | str) -> ScanReport:
        """Scan a directory tree for Cargo build directories.

        Args:
            root: Directory to scan. Made absolute before scanning.

        Returns:
            ScanReport with matches in discovery order, per-directory
            errors and run statistics.

        Raises:
            ScanError: If the root is missing, not a directory, or unreadable.
        """
        root_path = Path(root).absolute()
        start = time.perf_counter()

        if not root_path.is_dir():
            raise ScanError(root_path, "not a directory")

        try:
            root_entries = self._list_directory(root_path)
        except OSError as e:
            raise ScanError(root_path, e.strerror or str(e)) from e

        matches: list[Path] = []
        errors: list[DirectoryError] = []

        # Explicit stack keeps pre-order without hitting the recursion limit
        stack: list[tuple[Path, list[_Entry] | None]] = [(root_path, root_entries)]
        while stack:
            directory, entries = stack.pop()
            if entries is None:
                try:
                    entries = self._list_directory(directory)
                except OSError as e:
                    reason = e.strerror or str(e)
                    logger.warning("Cannot scan %s: %s", directory, reason)
                    errors.append(DirectoryError(path=directory, reason=reason))
                    continue

            if self._is_project_with_output(entries):
                matches.append(directory / OUTPUT_DIR_NAME)
                logger.debug("Found target directory in %s", directory)

            children = [e.path for e in entries if should_descend(e.kind, e.is_dir)]
            stack.extend((child, None) for child in reversed(children))

        elapsed = time.perf_counter() - start
        logger.debug(
            "Scanned %s in %.2fs: %d match(es), %d error(s)",
            root_path,
            elapsed,
            len(matches),
            len(errors),
        )

        return ScanReport(
            root=root_path,
            matches=matches,
            errors=errors,
            stats=RunStats(elapsed=elapsed, match_count=len(matches), error_count=len(errors)),
        )

    def _list_directory(self, directory: Path) -> list[_Entry]:
        """List and classify the immediate children of a directory.

        Entries whose metadata cannot be read are skipped.

        Args:
            directory: Directory to list.

        Returns:
            Classified entries in sorted name order.

        Raises:
            OSError: If the directory cannot be opened or listed.
        """
        entries: list[_Entry] = []
        for child in sorted(directory.iterdir()):
            try:
                is_symlink = child.is_symlink()
                is_dir = not is_symlink and child.is_dir()
                is_file = not is_symlink and child.is_file()
            except OSError:
                logger.debug("Cannot determine type of: %s", child)
                continue

            kind = classify_entry(child.name, is_symlink=is_symlink, is_dir=is_dir, is_file=is_file)
            entries.append(_Entry(path=child, kind=kind, is_dir=is_dir))
        return entries

    @staticmethod
    def _is_project_with_output(entries: list[_Entry]) -> bool:
        """Check if a directory listing holds both Cargo markers."""
        kinds = {e.kind for e in entries}
        return EntryKind.OUTPUT_DIR in kinds and EntryKind.MANIFEST in kinds
