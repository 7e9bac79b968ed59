"""Process exit codes."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit status of a targetctl run.

    Attributes:
        OK: Normal quit, or nothing was found.
        SCAN_FAILED: The scan root could not be scanned.
        INTERACTIVE_ERROR: The interactive list failed while handling input.
    """

    OK = 0
    SCAN_FAILED = 1
    INTERACTIVE_ERROR = 2
