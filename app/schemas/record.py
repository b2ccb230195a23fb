"""
Record-related Pydantic schemas
"""

from typing import List, Optional
from pydantic import BaseModel

class RegisterRequest(BaseModel):
    """Registration form. Fields are optional here so that missing ones
    are reported by the store as a 400 instead of a framework 422."""
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None

class CheckInRequest(BaseModel):
    """Check-in by phone number"""
    phone: Optional[str] = None

class RecordResponse(BaseModel):
    """A record as returned to clients"""
    name: str
    phone: str
    email: str
    company: str
    checkin: str

class SearchResponse(BaseModel):
    """Search results"""
    found: bool
    users: List[RecordResponse] = []
    error: Optional[str] = None
