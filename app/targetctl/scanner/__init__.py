"""Filesystem scanning for Cargo build directories.

This module provides the entry filter, the recursive scanner and the
models describing a scan run.
"""

from targetctl.scanner.filters import (
    HIDDEN_PREFIX,
    MANIFEST_NAME,
    OUTPUT_DIR_NAME,
    EntryKind,
    classify_entry,
    should_descend,
)
from targetctl.scanner.models import DirectoryError, RunStats, ScanError, ScanReport
from targetctl.scanner.scanner import TargetScanner

__all__ = [
    "HIDDEN_PREFIX",
    "MANIFEST_NAME",
    "OUTPUT_DIR_NAME",
    "DirectoryError",
    "EntryKind",
    "RunStats",
    "ScanError",
    "ScanReport",
    "TargetScanner",
    "classify_entry",
    "should_descend",
]
