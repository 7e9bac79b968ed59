"""Directory entry classification for the target scanner.

Decides which entries take part in a scan: hidden entries and symlinks
are always excluded, and the two Cargo marker names are recognised.
"""

from enum import Enum

# Marker convention (not configurable)
MANIFEST_NAME = "Cargo.toml"
OUTPUT_DIR_NAME = "target"
HIDDEN_PREFIX = "."


class EntryKind(str, Enum):
    """Classification of a single directory entry.

    Attributes:
        HIDDEN: Name starts with the hidden prefix; always skipped.
        SYMLINK: Symbolic link (any target); always skipped.
        OUTPUT_DIR: Directory named ``target``.
        MANIFEST: Regular file named ``Cargo.toml``.
        PLAIN: Any other file or directory.
    """

    HIDDEN = "hidden"
    SYMLINK = "symlink"
    OUTPUT_DIR = "output_dir"
    MANIFEST = "manifest"
    PLAIN = "plain"


def classify_entry(name: str, *, is_symlink: bool, is_dir: bool, is_file: bool) -> EntryKind:
    """Classify a directory entry by name and metadata.

    Hidden names win over every other rule, then symlinks. A symlink is
    never a marker even when its name matches one.

    Args:
        name: Entry basename.
        is_symlink: True if the entry itself is a symbolic link.
        is_dir: True if the entry is a directory (not following symlinks).
        is_file: True if the entry is a regular file (not following symlinks).

    Returns:
        EntryKind classification.
    """
    if name.startswith(HIDDEN_PREFIX):
        return EntryKind.HIDDEN
    if is_symlink:
        return EntryKind.SYMLINK
    if is_dir and name == OUTPUT_DIR_NAME:
        return EntryKind.OUTPUT_DIR
    if is_file and name == MANIFEST_NAME:
        return EntryKind.MANIFEST
    return EntryKind.PLAIN


def should_descend(kind: EntryKind, is_dir: bool) -> bool:
    """Return True if the scanner should recurse into this entry."""
    if kind in (EntryKind.HIDDEN, EntryKind.SYMLINK):
        return False
    return is_dir
