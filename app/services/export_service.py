"""
Excel export of the attendee sheet
"""

import io
from typing import List
import pandas as pd

from app.models import Record

class ExportService:
    """Service for exporting records to Excel"""

    COLUMNS = ['Name', 'Phone', 'Email', 'Company', 'Check-in']

    @staticmethod
    def export_records(records: List[Record], sheet_name: str = 'Attendees') -> bytes:
        """Export records to an .xlsx workbook, one row per record in store order"""
        data = [
            dict(zip(ExportService.COLUMNS, record.to_row()))
            for record in records
        ]
        df = pd.DataFrame(data, columns=ExportService.COLUMNS)

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine='openpyxl') as writer:
            df.to_excel(writer, index=False, sheet_name=sheet_name)

        return buffer.getvalue()
