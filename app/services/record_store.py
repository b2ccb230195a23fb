"""
Record store: register, search and check-in over a single sheet range
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional

from app.core.errors import StoreError, ValidationError
from app.models import Record
from app.services.repositories import RowRepo

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "User not found"


@dataclass
class SearchResult:
    found: bool
    users: List[Record] = field(default_factory=list)


@dataclass
class CheckInResult:
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
    record: Optional[Record] = None


class RecordStore:
    """Attendee records kept as rows of one spreadsheet range.

    Row 0 of the range is the header and is never treated as data. The
    store keeps nothing between calls: every operation reads or writes the
    backend directly. Writes go through ``_write_lock`` so a check-in's
    read-modify-write cannot interleave with another write from this
    process.
    """

    def __init__(self, repo: RowRepo, range_a1: str, checkin_marker: str):
        self.repo = repo
        self.range_a1 = range_a1
        self.checkin_marker = checkin_marker
        self._write_lock = threading.Lock()

    def register(self, name: str, phone: str, email: str, company: str) -> Record:
        """Append a new record, already marked as checked in"""
        if not name or not phone or not email or not company:
            raise ValidationError("All fields are required")

        record = Record(name, phone, email, company, self.checkin_marker)
        with self._write_lock:
            self._call("append", self.repo.append_row, self.range_a1, record.to_row())
        return record

    def search(self, query: Optional[str]) -> SearchResult:
        """Case-insensitive substring search over name, email and company.

        Phone is matched raw against the folded query. An empty query never
        reaches the backend.
        """
        q = (query or "").strip().lower()
        if not q:
            return SearchResult(found=False)

        matches = [
            record for record in self._data_records()
            if q in record.name.lower()
            or q in record.phone
            or q in record.email.lower()
            or q in record.company.lower()
        ]
        return SearchResult(found=bool(matches), users=matches)

    def check_in(self, phone: Optional[str]) -> CheckInResult:
        if not phone:
            raise ValidationError("phone required")

        with self._write_lock:
            rows = self._fetch()
            # exact match, first hit wins; index 0 is the header
            row_index = next(
                (idx for idx, row in enumerate(rows) if idx > 0 and len(row) > 1 and row[1] == phone),
                None,
            )
            if row_index is None:
                return CheckInResult(success=False, error=NOT_FOUND_MESSAGE)

            record = Record.from_row(rows[row_index])
            record.status = self.checkin_marker
            self._call("update", self.repo.update_row, self.range_a1, row_index, record.to_row())

        return CheckInResult(success=True, message="Check-in updated", record=record)

    def list_records(self) -> List[Record]:
        """All data rows in store order"""
        return self._data_records()

    def summary(self) -> dict:
        records = self._data_records()
        checked_in = sum(1 for r in records if r.is_checked_in(self.checkin_marker))
        return {
            "total": len(records),
            "checked_in": checked_in,
            "pending": len(records) - checked_in,
        }

    def _data_records(self) -> List[Record]:
        return [Record.from_row(row) for row in self._fetch()[1:]]

    def _fetch(self) -> List[List[str]]:
        return self._call("fetch", self.repo.fetch_rows, self.range_a1) or []

    def _call(self, op: str, fn, *args):
        try:
            return fn(*args)
        except StoreError:
            raise
        except Exception as e:
            logger.debug("Sheet %s failed on %s", op, self.range_a1)
            raise StoreError(str(e)) from e
