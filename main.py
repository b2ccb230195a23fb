"""
Attendee Registration & Check-in - FastAPI Backend
Main application entry point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from app.core.config import settings
from app.api import routes_admin, routes_public, routes_records
from app.utils.responses import error_response

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info("Record store: %s (%s)",
                "memory" if settings.USE_MEMORY_STORE else settings.SPREADSHEET_ID,
                settings.SHEET_RANGE)
    yield
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title="Attendee Check-in",
    description="Registration, search and check-in backed by a Google Sheet",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RequestValidationError)
async def invalid_request_handler(request: Request, exc: RequestValidationError):
    """Unparseable or mistyped bodies get the same 400 shape as missing fields"""
    logger.info("Invalid request to %s: %s", request.url.path, exc.errors())
    return error_response("Invalid request body", status_code=400)

# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_records.router, tags=["records"])
app.include_router(routes_admin.router, prefix="/admin", tags=["admin"])
# Catch-all front-end route must stay last
app.include_router(routes_public.frontend_router)

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT
    )
