"""Flask application factory for the dev_events web surface."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify
from werkzeug.exceptions import RequestEntityTooLarge

from .. import config
from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..services.assets import AssetStore, LocalAssetStore
from ..services.storage import EventStore, MongoEventStore
from ..utils.cache import TTLCache

logger = logging.getLogger(__name__)

EXTENSION_KEY = "dev_events"


def create_app(
    event_store: EventStore | None = None,
    asset_store: AssetStore | None = None,
    **overrides: Any,
) -> Flask:
    """Build the Flask app.

    Without an explicit *event_store* the app talks to MongoDB and makes sure
    the unique slug index exists. Keyword *overrides* are applied on top of
    the defaults from :mod:`dev_events.config`.
    """
    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=config.SECRET_KEY,
        MAX_CONTENT_LENGTH=config.MAX_CONTENT_LENGTH,
        LISTING_CACHE_SECONDS=config.LISTING_CACHE_SECONDS,
        UPLOAD_FOLDER=config.UPLOAD_FOLDER,
    )
    app.config.update(overrides)

    if event_store is None:
        from ..clients.mongodb_client import get_events_collection

        event_store = MongoEventStore(get_events_collection())
        event_store.ensure_indexes()
    if asset_store is None:
        asset_store = LocalAssetStore(app.config["UPLOAD_FOLDER"])

    app.extensions[EXTENSION_KEY] = {
        "event_store": event_store,
        "asset_store": asset_store,
        "listing_cache": TTLCache(app.config["LISTING_CACHE_SECONDS"]),
    }

    from .api import api_bp
    from .pages import pages_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    @app.errorhandler(RequestEntityTooLarge)
    def _too_large(_exc):
        limit_mb = app.config["MAX_CONTENT_LENGTH"] // (1024 * 1024)
        return jsonify({"status": "error", "message": f"Upload exceeds {limit_mb}MB limit"}), 413

    logger.info("dev_events app created with %s", type(event_store).__name__)
    return app

__all__ = ["create_app", "EXTENSION_KEY"]
