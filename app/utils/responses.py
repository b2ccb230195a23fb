"""
Standardized response utilities
"""

from typing import Any, List, Optional
from fastapi import HTTPException, status
from fastapi.responses import JSONResponse

from app.models import Record
from app.schemas.common import StandardResponse, ErrorResponse
from app.schemas.record import RecordResponse, SearchResponse

def success_response(
    message: str,
    data: Any = None,
    status_code: int = 200
) -> JSONResponse:
    """Create standardized success response"""
    response = StandardResponse(
        success=True,
        message=message,
        data=data
    )
    return JSONResponse(
        content=response.model_dump(exclude_none=True),
        status_code=status_code
    )

def error_response(
    error: str,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(error=error)
    return JSONResponse(
        content=response.model_dump(),
        status_code=status_code
    )

def search_response(
    users: List[Record],
    error: Optional[str] = None,
    status_code: int = 200
) -> JSONResponse:
    """Create search response; ``found`` mirrors whether any user matched"""
    response = SearchResponse(
        found=bool(users),
        users=[RecordResponse(**user.to_public()) for user in users],
        error=error
    )
    return JSONResponse(
        content=response.model_dump(exclude_none=True),
        status_code=status_code
    )

def unauthorized_error(message: str = "Unauthorized"):
    """Create unauthorized error"""
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message
    )

def rate_limit_error() -> JSONResponse:
    """Rate limit response, same shape as other write errors"""
    return error_response(
        "Rate limit exceeded. Please try again later.",
        status_code=status.HTTP_429_TOO_MANY_REQUESTS
    )
