"""
Admin authentication and per-client rate limiting
"""

import time
from typing import Dict, List

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import settings
from app.utils.responses import unauthorized_error

WINDOW_SECONDS = 60

# client ip -> request times inside the current window
rate_limiter: Dict[str, List[float]] = {}

security = HTTPBearer()

def verify_admin_token(credentials: HTTPAuthorizationCredentials = Depends(security)):
    """Reject admin calls whose bearer token does not match ADMIN_TOKEN"""
    if credentials.credentials != settings.ADMIN_TOKEN:
        unauthorized_error("Invalid admin token")
    return credentials.credentials

def prune_rate_limiter(now: float) -> None:
    """Drop expired request times, and clients with none left"""
    cutoff = now - WINDOW_SECONDS
    for client_ip in list(rate_limiter):
        recent = [t for t in rate_limiter[client_ip] if t > cutoff]
        if recent:
            rate_limiter[client_ip] = recent
        else:
            del rate_limiter[client_ip]

def rate_limit_check(client_ip: str, limit: int = None) -> bool:
    """Sliding one-minute window per client; False once the limit is reached"""
    if limit is None:
        limit = settings.RATE_LIMIT_PER_MINUTE

    now = time.time()
    prune_rate_limiter(now)

    hits = rate_limiter.setdefault(client_ip, [])
    if len(hits) >= limit:
        return False
    hits.append(now)
    return True

def get_client_ip(request: Request) -> str:
    """Caller address; proxy headers count only with TRUST_PROXY_HEADERS"""
    if settings.TRUST_PROXY_HEADERS:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

    return request.client.host if request.client else "unknown"
