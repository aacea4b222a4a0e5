"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from dev_events.services import list_all` without having to
know which underlying module provides the symbol.
"""

from .storage import EventStore, MongoEventStore, InMemoryEventStore  # noqa: F401
from .assets import AssetStore, LocalAssetStore  # noqa: F401
from .ingestion import create_event  # noqa: F401
from .queries import list_all, get_by_slug, get_similar_by_slug  # noqa: F401

__all__ = [
    "EventStore",
    "MongoEventStore",
    "InMemoryEventStore",
    "AssetStore",
    "LocalAssetStore",
    "create_event",
    "list_all",
    "get_by_slug",
    "get_similar_by_slug",
]
