"""Read-only event queries backing the listing, detail and similar-events views."""

from __future__ import annotations

import logging
from typing import List

from ..errors import PersistenceFailed
from ..models.event import Event
from .storage import EventStore

logger = logging.getLogger(__name__)


def list_all(store: EventStore) -> List[Event]:
    """Return every event, most recent first; empty list when none (or on store failure)."""
    try:
        return store.find_all_sorted()
    except PersistenceFailed as exc:
        logger.error("Error fetching all events: %s", exc)
        return []


def get_by_slug(store: EventStore, slug: str) -> Event | None:
    """Return the event for *slug*, or ``None`` when it does not exist."""
    try:
        return store.find_by_slug(slug)
    except PersistenceFailed as exc:
        logger.error("Error fetching event by slug %s: %s", slug, exc)
        return None


def get_similar_by_slug(store: EventStore, slug: str) -> List[Event]:
    """Return the other events sharing at least one tag with *slug*'s event.

    An unknown slug or a store failure yields an empty list.
    """
    try:
        event = store.find_by_slug(slug)
        if event is None:
            return []
        return store.find_sharing_tags(event.tags, exclude_slug=event.slug)
    except PersistenceFailed as exc:
        logger.warning("Similar events lookup failed for %s: %s", slug, exc)
        return []

__all__ = ["list_all", "get_by_slug", "get_similar_by_slug"]
