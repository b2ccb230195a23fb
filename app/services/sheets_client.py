"""
Google Sheets initialization and helpers
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any
import base64
import binascii
import logging
import os

from google.oauth2 import service_account
from googleapiclient.discovery import build

from app.core.config import settings
from app.core.errors import StoreError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def load_service_account_info() -> dict[str, Any]:
    """Resolve service account credentials from the environment or a key file.

    Checked in order: GOOGLE_SERVICE_ACCOUNT_BASE64, GOOGLE_SERVICE_ACCOUNT,
    GOOGLE_SERVICE_ACCOUNT_FILE. Escaped newlines in ``private_key`` are
    restored, since hosting dashboards often store the key on one line.
    """
    info: dict[str, Any] | None = None
    try:
        if settings.GOOGLE_SERVICE_ACCOUNT_BASE64:
            decoded = base64.b64decode(settings.GOOGLE_SERVICE_ACCOUNT_BASE64).decode("utf-8")
            info = json.loads(decoded)
        elif settings.GOOGLE_SERVICE_ACCOUNT:
            info = json.loads(settings.GOOGLE_SERVICE_ACCOUNT)
        elif settings.GOOGLE_SERVICE_ACCOUNT_FILE and os.path.exists(settings.GOOGLE_SERVICE_ACCOUNT_FILE):
            with open(settings.GOOGLE_SERVICE_ACCOUNT_FILE, "r", encoding="utf-8") as f:
                info = json.load(f)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise StoreError(f"Invalid service account credentials: {e}") from e

    if not info:
        raise StoreError(
            "Google credentials not provided. Set GOOGLE_SERVICE_ACCOUNT_BASE64, "
            "GOOGLE_SERVICE_ACCOUNT, or GOOGLE_SERVICE_ACCOUNT_FILE"
        )

    if info.get("private_key"):
        info["private_key"] = info["private_key"].replace("\\n", "\n")
    return info


@lru_cache(maxsize=1)
def get_sheets_service():
    """Build and cache the Sheets v4 service for the configured service account"""
    info = load_service_account_info()
    try:
        creds = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
    except ValueError as e:
        raise StoreError(f"Invalid service account credentials: {e}") from e
    logger.info("Sheets client ready for %s", info.get("client_email", "service account"))
    return build("sheets", "v4", credentials=creds, cache_discovery=False)
