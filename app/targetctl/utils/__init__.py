"""Utility modules for targetctl.

This module exports commonly used console helpers.
"""

from targetctl.utils.formatting import (
    console,
    err_console,
    format_header,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "format_header",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
