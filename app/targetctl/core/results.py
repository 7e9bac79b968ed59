"""Ordered list of discovered build directories."""

from collections.abc import Iterable, Iterator
from pathlib import Path


class ResultSet:
    """Mutable, ordered collection of scan matches.

    Entries keep discovery order. The only mutations are removal by
    index, which shifts later entries down by one, and a full clear.

    Args:
        paths: Initial paths in discovery order.
    """

    def __init__(self, paths: Iterable[Path] = ()) -> None:
        self._paths: list[Path] = list(paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._paths)

    def __bool__(self) -> bool:
        return bool(self._paths)

    @property
    def paths(self) -> tuple[Path, ...]:
        """Read-only snapshot of the current entries."""
        return tuple(self._paths)

    def get(self, index: int) -> Path | None:
        """Return the path at index, or None if out of range."""
        if not self._in_range(index):
            return None
        return self._paths[index]

    def remove(self, index: int) -> bool:
        """Remove the entry at index.

        Args:
            index: Position to remove. Negative indices are rejected.

        Returns:
            True if an entry was removed, False if index was out of range.
        """
        if not self._in_range(index):
            return False
        del self._paths[index]
        return True

    def clear(self) -> None:
        """Remove all entries."""
        self._paths.clear()

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._paths)
