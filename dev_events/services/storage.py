"""Persistence layer: document-store capability with MongoDB and in-memory backends."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Tuple

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..errors import DuplicateSlug, PersistenceFailed
from ..models.event import Event

logger = logging.getLogger(__name__)


class EventStore(ABC):
    """Document store holding :class:`Event` records, unique by slug."""

    @abstractmethod
    def insert(self, event: Event) -> None:
        """Persist *event*; raise :class:`DuplicateSlug` if its slug is taken."""

    @abstractmethod
    def find_all_sorted(self) -> List[Event]:
        """Return every event, most recently created first."""

    @abstractmethod
    def find_by_slug(self, slug: str) -> Event | None:
        """Return the event with *slug*, or ``None``."""

    @abstractmethod
    def find_sharing_tags(self, tags: Iterable[str], exclude_slug: str) -> List[Event]:
        """Return events with at least one tag in *tags*, except *exclude_slug*."""

    def ensure_indexes(self) -> None:
        """Create the uniqueness constraint on ``slug`` if the backend needs one."""


class MongoEventStore(EventStore):
    """Event store backed by a pymongo collection."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    def ensure_indexes(self) -> None:
        self._collection.create_index([("slug", ASCENDING)], unique=True, name="slug_unique")
        self._collection.create_index([("createdAt", DESCENDING)], name="created_at_desc")
        logger.info("Ensured indexes on %s", self._collection.name)

    def insert(self, event: Event) -> None:
        try:
            result = self._collection.insert_one(event.to_document())
        except DuplicateKeyError as exc:
            raise DuplicateSlug(event.slug) from exc
        except PyMongoError as exc:
            logger.error("MongoDB insert failed for %s: %s", event.slug, exc)
            raise PersistenceFailed() from exc
        logger.info("Stored event to MongoDB with _id=%s", result.inserted_id)

    def find_all_sorted(self) -> List[Event]:
        return self._find({}, sort=[("createdAt", DESCENDING)])

    def find_by_slug(self, slug: str) -> Event | None:
        try:
            doc = self._collection.find_one({"slug": slug})
        except PyMongoError as exc:
            raise PersistenceFailed() from exc
        return self._to_event(doc) if doc else None

    def find_sharing_tags(self, tags: Iterable[str], exclude_slug: str) -> List[Event]:
        return self._find({"slug": {"$ne": exclude_slug}, "tags": {"$in": list(tags)}})

    def _find(self, query: Dict[str, Any], sort: List[Tuple[str, int]] | None = None) -> List[Event]:
        try:
            cursor = self._collection.find(query, sort=sort)
            return [self._to_event(doc) for doc in cursor]
        except PyMongoError as exc:
            raise PersistenceFailed() from exc

    @staticmethod
    def _to_event(doc: Dict[str, Any]) -> Event:
        try:
            return Event.from_document(doc)
        except (KeyError, TypeError) as exc:
            logger.error("Malformed event document %s: %r", doc.get("_id"), exc)
            raise PersistenceFailed("Stored event document is malformed") from exc


class InMemoryEventStore(EventStore):
    """Process-local event store with the same contract as :class:`MongoEventStore`."""

    def __init__(self) -> None:
        self._events: Dict[str, Event] = {}
        self._lock = threading.Lock()

    def insert(self, event: Event) -> None:
        with self._lock:
            if event.slug in self._events:
                raise DuplicateSlug(event.slug)
            self._events[event.slug] = event

    def find_all_sorted(self) -> List[Event]:
        with self._lock:
            events = list(self._events.values())
        return sorted(events, key=lambda event: event.created_at, reverse=True)

    def find_by_slug(self, slug: str) -> Event | None:
        with self._lock:
            return self._events.get(slug)

    def find_sharing_tags(self, tags: Iterable[str], exclude_slug: str) -> List[Event]:
        wanted = set(tags)
        with self._lock:
            events = list(self._events.values())
        return [
            event
            for event in events
            if event.slug != exclude_slug and wanted.intersection(event.tags)
        ]

__all__ = ["EventStore", "MongoEventStore", "InMemoryEventStore"]
