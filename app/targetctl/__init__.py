"""targetctl - find and trash Rust build directories.

Scans a directory tree for ``target/`` folders that sit next to a
``Cargo.toml`` and lets you move them to the trash from an
interactive terminal list.
"""

__version__ = "0.1.0"
