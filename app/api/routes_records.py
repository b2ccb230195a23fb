"""
Attendee API routes: register, search, check-in
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from app.core.errors import StoreError, ValidationError
from app.core.store import get_record_store
from app.schemas.record import RegisterRequest, CheckInRequest
from app.services.record_store import RecordStore
from app.utils.security import rate_limit_check, get_client_ip
from app.utils.responses import success_response, error_response, search_response, rate_limit_error

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/register")
async def register(
    request: Request,
    data: Optional[RegisterRequest] = None,
    store: RecordStore = Depends(get_record_store)
):
    """Register an attendee (the new row is already checked in)"""
    if data is None:
        data = RegisterRequest()
    if not rate_limit_check(get_client_ip(request)):
        return rate_limit_error()

    try:
        await run_in_threadpool(store.register, data.name, data.phone, data.email, data.company)
    except ValidationError as e:
        return error_response(str(e), status_code=400)
    except StoreError as e:
        logger.error("REGISTER ERROR: %s", e)
        return error_response(str(e), status_code=500)

    return success_response(message="User registered & checked in")

@router.get("/search")
async def search(
    q: Optional[str] = None,
    store: RecordStore = Depends(get_record_store)
):
    """Search attendees by name, phone, email or company"""
    try:
        result = await run_in_threadpool(store.search, q)
    except StoreError as e:
        logger.error("SEARCH ERROR: %s", e)
        return search_response([], error=str(e), status_code=500)

    return search_response(result.users)

@router.post("/checkin")
async def check_in(
    request: Request,
    data: Optional[CheckInRequest] = None,
    store: RecordStore = Depends(get_record_store)
):
    """Mark the first attendee with this exact phone number as checked in"""
    if data is None:
        data = CheckInRequest()
    if not rate_limit_check(get_client_ip(request)):
        return rate_limit_error()

    try:
        result = await run_in_threadpool(store.check_in, data.phone)
    except ValidationError as e:
        return error_response(str(e), status_code=400)
    except StoreError as e:
        logger.error("CHECKIN ERROR: %s", e)
        return error_response(str(e), status_code=500)

    # not found is a successful request with success=false
    if not result.success:
        return error_response(result.error, status_code=200)

    return success_response(message=result.message)
