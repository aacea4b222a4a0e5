"""Convenience re-exports for singleton SDK accessors."""

from .mongodb_client import get_mongo_client, get_events_collection  # noqa: F401
from .api_client import get_session, EventsApiClient  # noqa: F401

__all__ = [
    "get_mongo_client",
    "get_events_collection",
    "get_session",
    "EventsApiClient",
]
