"""
Admin API routes - requires authentication
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from app.core.errors import StoreError
from app.core.store import get_record_store
from app.services.export_service import ExportService
from app.services.record_store import RecordStore
from app.utils.security import verify_admin_token
from app.utils.responses import success_response, error_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/summary")
async def get_summary(
    store: RecordStore = Depends(get_record_store),
    token: str = Depends(verify_admin_token)
):
    """Registration and check-in counts"""
    try:
        summary = await run_in_threadpool(store.summary)
    except StoreError as e:
        logger.error("SUMMARY ERROR: %s", e)
        return error_response(str(e), status_code=500)

    return success_response(message="Summary retrieved", data=summary)

@router.get("/export.xlsx")
async def export_records(
    store: RecordStore = Depends(get_record_store),
    token: str = Depends(verify_admin_token)
):
    """Download every record as an Excel workbook"""
    try:
        records = await run_in_threadpool(store.list_records)
    except StoreError as e:
        logger.error("EXPORT ERROR: %s", e)
        return error_response(str(e), status_code=500)

    excel_bytes = ExportService.export_records(records)

    return Response(
        content=excel_bytes,
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": "attachment; filename=attendees.xlsx"}
    )
