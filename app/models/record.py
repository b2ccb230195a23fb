"""
Attendee record model
"""

from dataclasses import dataclass, asdict
from typing import Dict, List, Sequence

# Column order of the A:E block
COLUMNS = ["name", "phone", "email", "company", "status"]


@dataclass
class Record:
    name: str
    phone: str
    email: str
    company: str
    status: str = ""

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Record":
        """Build a record from a sheet row, padding short rows with empty cells"""
        cells = [str(c) if c is not None else "" for c in row[:len(COLUMNS)]]
        cells += [""] * (len(COLUMNS) - len(cells))
        return cls(*cells)

    def to_row(self) -> List[str]:
        return [self.name, self.phone, self.email, self.company, self.status]

    def to_public(self) -> Dict[str, str]:
        """Shape returned to API clients (status is exposed as ``checkin``)"""
        data = asdict(self)
        data["checkin"] = data.pop("status")
        return data

    def is_checked_in(self, marker: str) -> bool:
        return self.status == marker
