"""Definition of the `Event` dataclass used throughout the project."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, Tuple

from ..utils.datetime_utils import get_current_timestamp

EVENT_MODES: Tuple[str, ...] = ("online", "offline", "hybrid")

# Scalar fields submitted as plain text parts, in form order
SCALAR_FIELDS: Tuple[str, ...] = (
    "title",
    "organizer",
    "overview",
    "description",
    "date",
    "time",
    "mode",
    "venue",
    "location",
    "audience",
)


@dataclass(slots=True, frozen=True)
class Event:
    """A published developer event (conference, meetup, hackathon)."""

    title: str
    organizer: str
    overview: str
    description: str
    date: str
    time: str
    mode: str
    venue: str
    location: str
    audience: str
    tags: Tuple[str, ...]
    agenda: Tuple[str, ...]
    image: str
    slug: str
    created_at: datetime = field(default_factory=get_current_timestamp)

    def __post_init__(self) -> None:
        # Callers may pass lists; stored records must not be mutable through them
        object.__setattr__(self, "tags", tuple(self.tags))
        object.__setattr__(self, "agenda", tuple(self.agenda))

    def to_document(self) -> Dict[str, Any]:
        """Return the MongoDB document for this event."""
        doc: Dict[str, Any] = {name: getattr(self, name) for name in SCALAR_FIELDS}
        doc.update(
            tags=list(self.tags),
            agenda=list(self.agenda),
            image=self.image,
            slug=self.slug,
            createdAt=self.created_at,
        )
        return doc

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable representation."""
        data = self.to_document()
        data["createdAt"] = self.created_at.isoformat()
        return data

    def with_slug(self, slug: str) -> "Event":
        """Return a copy of this event carrying *slug*."""
        return replace(self, slug=slug)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Event":
        """Build an event from a stored document (``_id`` is ignored)."""
        return cls(
            **{name: doc[name] for name in SCALAR_FIELDS},
            tags=doc.get("tags", ()),
            agenda=doc.get("agenda", ()),
            image=doc["image"],
            slug=doc["slug"],
            created_at=doc["createdAt"],
        )

__all__ = ["Event", "EVENT_MODES", "SCALAR_FIELDS"]
