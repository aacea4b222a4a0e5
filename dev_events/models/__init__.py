"""Domain models: the event record, its validation schema and list fields."""

from .event import Event, EVENT_MODES, SCALAR_FIELDS  # noqa: F401
from .form import EventForm, validate_event_fields  # noqa: F401
from .lists import TagSet, AgendaList  # noqa: F401
from .image import ImageFile  # noqa: F401

__all__ = [
    "Event",
    "EVENT_MODES",
    "SCALAR_FIELDS",
    "EventForm",
    "validate_event_fields",
    "TagSet",
    "AgendaList",
    "ImageFile",
]
