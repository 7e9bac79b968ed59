"""Tests for scanner domain models."""

from pathlib import Path

import pytest
from targetctl.scanner.models import DirectoryError, RunStats, ScanError, ScanReport


class TestRunStats:
    """Tests for RunStats frozen dataclass."""

    def test_defaults(self) -> None:
        """error_count defaults to zero."""
        stats = RunStats(elapsed=1.5, match_count=3)
        assert stats.error_count == 0

    def test_negative_elapsed_rejected(self) -> None:
        """Negative durations are invalid."""
        with pytest.raises(ValueError, match="Elapsed time cannot be negative"):
            RunStats(elapsed=-0.1, match_count=0)

    def test_negative_counts_rejected(self) -> None:
        """Negative counts are invalid."""
        with pytest.raises(ValueError, match="Counts cannot be negative"):
            RunStats(elapsed=0.0, match_count=-1)

    def test_frozen(self) -> None:
        """RunStats is immutable."""
        stats = RunStats(elapsed=0.0, match_count=0)
        with pytest.raises(AttributeError):
            stats.match_count = 5  # type: ignore[misc]


class TestScanReport:
    """Tests for ScanReport."""

    def test_empty_report(self) -> None:
        """A report without matches is empty."""
        report = ScanReport(
            root=Path("/work"),
            matches=[],
            errors=[],
            stats=RunStats(elapsed=0.0, match_count=0),
        )
        assert report.is_empty

    def test_requires_stats(self) -> None:
        """A report cannot be built without its run statistics."""
        with pytest.raises(TypeError):
            ScanReport(root=Path("/work"), matches=[], errors=[])  # type: ignore[call-arg]

    def test_report_with_matches(self) -> None:
        """A report with matches is not empty."""
        report = ScanReport(
            root=Path("/work"),
            matches=[Path("/work/app/target")],
            errors=[DirectoryError(path=Path("/work/secret"), reason="Permission denied")],
            stats=RunStats(elapsed=0.1, match_count=1, error_count=1),
        )
        assert not report.is_empty
        assert report.errors[0].reason == "Permission denied"


class TestScanError:
    """Tests for ScanError."""

    def test_message(self) -> None:
        """ScanError carries root and reason in its message."""
        error = ScanError(Path("/nope"), "not a directory")
        assert error.root == Path("/nope")
        assert error.reason == "not a directory"
        assert str(error) == "Cannot scan /nope: not a directory"
