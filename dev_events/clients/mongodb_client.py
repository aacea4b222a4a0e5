"""Singleton accessor for the MongoDB client."""

from __future__ import annotations

from pymongo import MongoClient
from pymongo.collection import Collection

from ..config import EVENTS_COLLECTION, MONGODB_DATABASE, MONGODB_URI

_client: MongoClient | None = None


def get_mongo_client() -> MongoClient:
    """Return a singleton :class:`pymongo.MongoClient`.

    The client is timezone aware so ``createdAt`` round-trips as a UTC
    :class:`datetime.datetime`.
    """
    global _client
    if _client is None:
        _client = MongoClient(MONGODB_URI, tz_aware=True)
    return _client


def get_events_collection() -> Collection:
    """Return the collection holding event documents."""
    return get_mongo_client()[MONGODB_DATABASE][EVENTS_COLLECTION]

__all__ = ["get_mongo_client", "get_events_collection"]
