"""Centralised configuration for dev_events.

Environment variables are loaded once and all related constants are
grouped by service for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Core credentials (from environment)
# ---------------------------------------------------------------------------
MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
SECRET_KEY: str = os.getenv("SECRET_KEY", "dev")

# ---------------------------------------------------------------------------
# Document store
# ---------------------------------------------------------------------------
MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "dev_events")
EVENTS_COLLECTION: str = "events"

# Number of slug suffixes tried ("-2", "-3", ...) before giving up
MAX_SLUG_ATTEMPTS: int = 20
# Random-suffix tries ("-3fa9c1") once the numbered suffixes are used up
RANDOM_SLUG_ATTEMPTS: int = 5

# ---------------------------------------------------------------------------
# Asset store (event posters)
# ---------------------------------------------------------------------------
UPLOAD_FOLDER: str = os.getenv("UPLOAD_FOLDER", os.path.join("static", "uploads", "events"))
UPLOAD_URL_PREFIX: str = "/uploads"
MAX_CONTENT_LENGTH: int = 16 * 1024 * 1024  # 16MB

# ---------------------------------------------------------------------------
# Web surface
# ---------------------------------------------------------------------------
# The listing page is cached for "hours"; new events show up once it expires
LISTING_CACHE_SECONDS: int = int(os.getenv("LISTING_CACHE_SECONDS", "3600"))

# ---------------------------------------------------------------------------
# Submission client
# ---------------------------------------------------------------------------
EVENTS_API_URL: str = os.getenv("EVENTS_API_URL", "http://localhost:5000/api/events")
API_TIMEOUT_SECONDS: float = float(os.getenv("API_TIMEOUT_SECONDS", "30"))

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials
    "MONGODB_URI",
    "SECRET_KEY",
    # document store
    "MONGODB_DATABASE",
    "EVENTS_COLLECTION",
    "MAX_SLUG_ATTEMPTS",
    "RANDOM_SLUG_ATTEMPTS",
    # asset store
    "UPLOAD_FOLDER",
    "UPLOAD_URL_PREFIX",
    "MAX_CONTENT_LENGTH",
    # web
    "LISTING_CACHE_SECONDS",
    # client
    "EVENTS_API_URL",
    "API_TIMEOUT_SECONDS",
]
