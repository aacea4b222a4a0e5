"""Declarative validation schema for the scalar event fields.

Tags, agenda and the image are not part of this schema; they are handled by
the list value objects in :mod:`dev_events.models.lists` and by the
submission/ingestion code.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import ValidationFailed

logger = logging.getLogger(__name__)


class EventForm(BaseModel):
    """Accepted scalar fields of an event submission."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str = Field(min_length=5, max_length=100)
    organizer: str = Field(min_length=2)
    overview: str = Field(min_length=10, max_length=500)
    description: str = Field(min_length=20, max_length=1000)
    date: str = Field(min_length=1)
    time: str = Field(min_length=1)
    mode: Literal["online", "offline", "hybrid"]
    venue: str = Field(min_length=2)
    location: str = Field(min_length=2)
    audience: str = Field(min_length=2)


# Human-readable messages keyed by field, then by pydantic error type
_MESSAGES: Dict[str, Dict[str, str]] = {
    "title": {
        "string_too_short": "Title must be at least 5 characters",
        "string_too_long": "Title must be at most 100 characters",
    },
    "organizer": {"string_too_short": "Organizer name is too short"},
    "overview": {
        "string_too_short": "Overview should be at least 10 characters",
        "string_too_long": "Overview must be at most 500 characters",
    },
    "description": {
        "string_too_short": "Description should be more detailed",
        "string_too_long": "Description must be at most 1000 characters",
    },
    "date": {"string_too_short": "Date is required"},
    "time": {"string_too_short": "Time is required"},
    "mode": {"literal_error": "Mode must be one of online, offline or hybrid"},
    "venue": {"string_too_short": "Venue is required"},
    "location": {"string_too_short": "Location is required"},
    "audience": {"string_too_short": "Target audience is required"},
}


def _message_for(field: str, error: Mapping[str, Any]) -> str:
    if error["type"] == "missing":
        return f"{field.capitalize()} is required"
    return _MESSAGES.get(field, {}).get(error["type"], error["msg"])


def validate_event_fields(values: Mapping[str, Any]) -> EventForm:
    """Validate *values* and return the accepted :class:`EventForm`.

    Every field is checked independently; all violations are reported
    together in :attr:`ValidationFailed.errors` as ``{field: [messages]}``.
    """
    try:
        return EventForm.model_validate(dict(values))
    except ValidationError as exc:
        errors: Dict[str, List[str]] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            errors.setdefault(field, []).append(_message_for(field, error))
        logger.info("Rejected event fields: %s", ", ".join(sorted(errors)))
        raise ValidationFailed(errors) from exc

__all__ = ["EventForm", "validate_event_fields"]
