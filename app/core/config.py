"""
Configuration settings for the application
"""

import os
from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Google service account (base64 wins over inline JSON, file is the fallback)
    GOOGLE_SERVICE_ACCOUNT: str | None = os.getenv("GOOGLE_SERVICE_ACCOUNT")
    GOOGLE_SERVICE_ACCOUNT_BASE64: str | None = os.getenv("GOOGLE_SERVICE_ACCOUNT_BASE64")
    GOOGLE_SERVICE_ACCOUNT_FILE: str = os.getenv("GOOGLE_SERVICE_ACCOUNT_FILE", "service-account.json")

    # Spreadsheet
    SPREADSHEET_ID: str = os.getenv("SPREADSHEET_ID", "1qYr-LJjqsRs6QZQKvVOtl3ua2V12BBZXZiMUoaJWOCs")
    # First row of the range is the header; its columns must hold name, phone, email, company, status
    SHEET_RANGE: str = os.getenv("SHEET_RANGE", "Sheet1!A:E")
    CHECKIN_MARKER: str = os.getenv("CHECKIN_MARKER", "✔ CHECKED IN")
    USE_MEMORY_STORE: bool = os.getenv("USE_MEMORY_STORE", "false").lower() in ("1", "true", "yes")

    # Security
    ADMIN_TOKEN: str = os.getenv("ADMIN_TOKEN", "admin_token_123")

    # Application
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "4000"))
    BASE_URL: str = os.getenv("BASE_URL", "http://localhost:4000")
    STATIC_DIR: str = os.getenv("STATIC_DIR", "public")

    # CORS
    ALLOW_ORIGINS: List[str] = ["*"]

    # Rate limiting
    RATE_LIMIT_PER_MINUTE: int = 60
    # Only honour X-Forwarded-For / X-Real-IP when a trusted proxy sets them
    TRUST_PROXY_HEADERS: bool = os.getenv("TRUST_PROXY_HEADERS", "false").lower() in ("1", "true", "yes")

    class Config:
        env_file = ".env"

settings = Settings()
