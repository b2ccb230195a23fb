"""
Pydantic schemas package
"""

from .common import *
from .record import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "RegisterRequest",
    "CheckInRequest",
    "RecordResponse",
    "SearchResponse"
]
