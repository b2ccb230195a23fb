"""
Record store wiring: one store per process, injected into routes
"""

import logging
from functools import lru_cache

from app.core.config import settings
from app.services.record_store import RecordStore
from app.services.repositories import MemoryRowRepo, SheetsRowRepo, use_memory_store

logger = logging.getLogger(__name__)

HEADER_ROW = ["Name", "Phone", "Email", "Company", "Check-in"]


@lru_cache(maxsize=1)
def get_record_store() -> RecordStore:
    """FastAPI dependency returning the process-wide record store"""
    if use_memory_store():
        logger.info("Using in-memory record store")
        repo = MemoryRowRepo([HEADER_ROW])
    else:
        repo = SheetsRowRepo(settings.SPREADSHEET_ID)
    return RecordStore(repo, settings.SHEET_RANGE, settings.CHECKIN_MARKER)
