"""Deletion operators.

This module exports the Deleter interface and the trash implementation.
"""

from targetctl.operators.base import Deleter, TrashResult
from targetctl.operators.trash import TrashOperator

__all__ = ["Deleter", "TrashOperator", "TrashResult"]
