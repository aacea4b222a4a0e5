"""JSON API: event ingestion and read endpoints."""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import HTTPException

from ..errors import EventError, Unexpected
from ..services.ingestion import create_event
from ..services.queries import get_by_slug, get_similar_by_slug, list_all
from .context import get_asset_store, get_event_store, read_uploaded_image

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


# ---------------------------------------------------------------------------
# Routes - Ingestion
# ---------------------------------------------------------------------------
@api_bp.route("/events", methods=["POST"])
def create():
    """Create one event from a multipart body."""
    try:
        event = create_event(
            request.form,
            read_uploaded_image(),
            event_store=get_event_store(),
            asset_store=get_asset_store(),
        )
    except EventError as exc:
        logger.warning("Event creation rejected (%s): %s", exc.kind, exc.message)
        return jsonify(exc.to_response()), exc.status_code
    except HTTPException:
        raise
    except Exception:
        logger.exception("Unexpected error while creating event")
        error = Unexpected()
        return jsonify(error.to_response()), error.status_code

    return jsonify({"status": "created", "slug": event.slug}), 201


# ---------------------------------------------------------------------------
# Routes - Reads
# ---------------------------------------------------------------------------
@api_bp.route("/events", methods=["GET"])
def list_events():
    """All events, most recent first."""
    events = list_all(get_event_store())
    return jsonify({"events": [event.to_dict() for event in events]})


@api_bp.route("/events/<slug>", methods=["GET"])
def event_detail(slug):
    event = get_by_slug(get_event_store(), slug)
    if event is None:
        return jsonify({"status": "error", "message": "Event not found"}), 404
    return jsonify({"event": event.to_dict()})


@api_bp.route("/events/<slug>/similar", methods=["GET"])
def similar_events(slug):
    events = get_similar_by_slug(get_event_store(), slug)
    return jsonify({"events": [event.to_dict() for event in events]})
