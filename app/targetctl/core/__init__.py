"""Core session state: result list, selection cursor and cleanup session."""

from targetctl.core.results import ResultSet
from targetctl.core.selection import SelectionCursor
from targetctl.core.session import CleanupSession

__all__ = ["CleanupSession", "ResultSet", "SelectionCursor"]
