"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from targetctl.core.session import CleanupSession
from targetctl.operators.base import Deleter, TrashResult
from targetctl.scanner.models import RunStats


class FakeDeleter(Deleter):
    """Deleter that records calls and fails for selected paths."""

    def __init__(self, failing: set[Path] | None = None) -> None:
        self.failing = failing or set()
        self.calls: list[Path] = []

    def trash(self, path: Path) -> TrashResult:
        self.calls.append(path)
        if path in self.failing:
            return TrashResult(path=path, success=False, error="Permission denied")
        return TrashResult(path=path, success=True)


@pytest.fixture
def fake_deleter() -> FakeDeleter:
    """Deleter that succeeds for every path."""
    return FakeDeleter()


@pytest.fixture
def make_session() -> Callable[..., CleanupSession]:
    """Factory for sessions over /work/pN/target paths."""

    def _make(count: int, deleter: Deleter | None = None) -> CleanupSession:
        paths = [Path(f"/work/p{i}/target") for i in range(count)]
        return CleanupSession(
            paths,
            deleter if deleter is not None else FakeDeleter(),
            RunStats(elapsed=0.25, match_count=count),
        )

    return _make


@pytest.fixture
def make_project() -> Callable[..., Path]:
    """Factory creating a directory with Cargo.toml and/or target/."""

    def _make(path: Path, *, manifest: bool = True, target: bool = True) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        if manifest:
            (path / "Cargo.toml").write_text('[package]\nname = "demo"\n')
        if target:
            (path / "target" / "debug").mkdir(parents=True, exist_ok=True)
        return path

    return _make


@pytest.fixture
def make_deleter() -> Callable[..., FakeDeleter]:
    """Factory for deleters that fail for the given paths."""
    return FakeDeleter
