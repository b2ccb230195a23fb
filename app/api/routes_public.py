"""
Public API routes - no authentication required
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, Response

from app.core.config import settings
from app.services.qr_service import QRService

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}

@router.get("/qr.png")
async def get_qr_code():
    """QR code pointing at the front-end, for printing at the check-in desk"""
    qr_bytes = QRService.generate_frontend_qr()

    return Response(
        content=qr_bytes,
        media_type="image/png",
        headers={"Content-Disposition": "inline; filename=qr.png"}
    )

def resolve_static(full_path: str) -> Path | None:
    """Map a request path to a file under STATIC_DIR, falling back to index.html"""
    root = Path(settings.STATIC_DIR).resolve()
    if full_path:
        candidate = (root / full_path).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    index = root / "index.html"
    return index if index.is_file() else None

# Registered last in main.py so the API routes take precedence
frontend_router = APIRouter()

@frontend_router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str):
    """Serve the static front-end for every other GET path"""
    path = resolve_static(full_path)
    if path is None:
        raise HTTPException(status_code=404, detail="Front-end not found")
    return FileResponse(path)
