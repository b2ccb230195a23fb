"""
Shared test doubles for the row backend
"""

import time

from app.services.repositories import MemoryRowRepo

HEADER = ["Name", "Phone", "Email", "Company", "Check-in"]
MARKER = "✔ CHECKED IN"
RANGE = "Sheet1!A:E"


class RecordingRepo(MemoryRowRepo):
    """In-memory rows that remember every remote-style call made on them"""

    def __init__(self, rows=None):
        super().__init__(rows if rows is not None else [HEADER])
        self.calls = []

    def fetch_rows(self, range_a1):
        self.calls.append(("fetch", range_a1))
        return super().fetch_rows(range_a1)

    def append_row(self, range_a1, row):
        self.calls.append(("append", range_a1, list(row)))
        super().append_row(range_a1, row)

    def update_row(self, range_a1, row_index, row):
        self.calls.append(("update", range_a1, row_index, list(row)))
        super().update_row(range_a1, row_index, row)

    def ops(self):
        return [call[0] for call in self.calls]


class FailingRepo:
    """Every call fails the way a quota or network error would"""

    def __init__(self, message="quota exceeded"):
        self.message = message

    def fetch_rows(self, range_a1):
        raise RuntimeError(self.message)

    def append_row(self, range_a1, row):
        raise RuntimeError(self.message)

    def update_row(self, range_a1, row_index, row):
        raise RuntimeError(self.message)


class SlowRepo(RecordingRepo):
    """Recording rows whose reads and row writes take a while, to widen race windows"""

    def __init__(self, rows=None, delay=0.05):
        super().__init__(rows)
        self.delay = delay

    def fetch_rows(self, range_a1):
        rows = super().fetch_rows(range_a1)
        time.sleep(self.delay)
        return rows

    def update_row(self, range_a1, row_index, row):
        time.sleep(self.delay)
        super().update_row(range_a1, row_index, row)
