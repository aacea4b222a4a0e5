"""Accessors for the collaborators registered on the current Flask app."""

from __future__ import annotations

from flask import current_app, request

from ..models.image import DEFAULT_CONTENT_TYPE, ImageFile
from ..services.assets import AssetStore
from ..services.storage import EventStore
from ..utils.cache import TTLCache


def _extension() -> dict:
    from . import EXTENSION_KEY

    return current_app.extensions[EXTENSION_KEY]


def get_event_store() -> EventStore:
    return _extension()["event_store"]


def get_asset_store() -> AssetStore:
    return _extension()["asset_store"]


def get_listing_cache() -> TTLCache:
    return _extension()["listing_cache"]


def read_uploaded_image(field: str = "image") -> ImageFile | None:
    """Return the file part *field* of the current request, if any."""
    upload = request.files.get(field)
    if upload is None:
        return None
    return ImageFile(
        filename=upload.filename or "",
        content=upload.read(),
        content_type=upload.mimetype or DEFAULT_CONTENT_TYPE,
    )

__all__ = ["get_event_store", "get_asset_store", "get_listing_cache", "read_uploaded_image"]
