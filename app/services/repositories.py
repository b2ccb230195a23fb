"""
Repository layer abstracting row storage (Google Sheets vs in-memory).
"""

from __future__ import annotations

import re
import threading
from typing import List, Protocol

from app.core.config import settings
from app.services.sheets_client import get_sheets_service


def use_memory_store() -> bool:
    return settings.USE_MEMORY_STORE is True


# "A:E", "A3:E", "B2:F200"
_BLOCK = re.compile(r"^([A-Za-z]+)(\d*)(?::([A-Za-z]+)\d*)?$")


def sheet_name(range_a1: str) -> str:
    """``"Sheet1!A:E"`` -> ``"Sheet1"``, ``""`` when the range names no sheet"""
    return range_a1.rsplit("!", 1)[0] if "!" in range_a1 else ""


def row_range(range_a1: str, row_index: int) -> str:
    """A1 range covering one row of the configured block.

    ``row_index`` is 0-based within the rows fetched for ``range_a1``, so
    the block's first row and columns are taken from the range itself.
    """
    block = range_a1.rsplit("!", 1)[-1]
    m = _BLOCK.match(block)
    if not m:
        raise ValueError(f"Unsupported sheet range {range_a1!r}")

    start_col = m.group(1).upper()
    end_col = (m.group(3) or m.group(1)).upper()
    row = int(m.group(2) or 1) + row_index
    prefix = f"{sheet_name(range_a1)}!" if "!" in range_a1 else ""
    return f"{prefix}{start_col}{row}:{end_col}{row}"


class RowRepo(Protocol):
    """The three primitives the record store needs from a tabular backend"""

    def fetch_rows(self, range_a1: str) -> List[List[str]]: ...

    def append_row(self, range_a1: str, row: List[str]) -> None: ...

    def update_row(self, range_a1: str, row_index: int, row: List[str]) -> None: ...


# -------- Google Sheets repository --------

class SheetsRowRepo:
    def __init__(self, spreadsheet_id: str, service=None):
        self.spreadsheet_id = spreadsheet_id
        self._service = service

    @property
    def service(self):
        if self._service is None:
            self._service = get_sheets_service()
        return self._service

    def fetch_rows(self, range_a1: str) -> List[List[str]]:
        result = self.service.spreadsheets().values().get(
            spreadsheetId=self.spreadsheet_id,
            range=range_a1,
        ).execute()
        return result.get("values", [])

    def append_row(self, range_a1: str, row: List[str]) -> None:
        self.service.spreadsheets().values().append(
            spreadsheetId=self.spreadsheet_id,
            range=range_a1,
            valueInputOption="RAW",
            body={"values": [row]},
        ).execute()

    def update_row(self, range_a1: str, row_index: int, row: List[str]) -> None:
        self.service.spreadsheets().values().update(
            spreadsheetId=self.spreadsheet_id,
            range=row_range(range_a1, row_index),
            valueInputOption="RAW",
            body={"values": [row]},
        ).execute()


# -------- In-memory repository --------

class MemoryRowRepo:
    """Process-local rows, header included. Ignores the range argument."""

    def __init__(self, rows: List[List[str]] | None = None):
        self._rows: List[List[str]] = [list(r) for r in (rows or [])]
        self._lock = threading.Lock()

    def fetch_rows(self, range_a1: str) -> List[List[str]]:
        with self._lock:
            return [list(r) for r in self._rows]

    def append_row(self, range_a1: str, row: List[str]) -> None:
        with self._lock:
            self._rows.append(list(row))

    def update_row(self, range_a1: str, row_index: int, row: List[str]) -> None:
        with self._lock:
            if row_index >= len(self._rows):
                raise IndexError(f"row {row_index + 1} is outside {range_a1}")
            self._rows[row_index] = list(row)
