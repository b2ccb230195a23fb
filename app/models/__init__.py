"""
Record models package
"""

from .record import Record, COLUMNS

__all__ = ["Record", "COLUMNS"]
