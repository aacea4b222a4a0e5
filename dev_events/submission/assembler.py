"""Client-side assembly of an event submission into one multipart payload."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Tuple

import requests

from ..clients.api_client import EventsApiClient
from ..errors import (
    EventError,
    MissingAgenda,
    MissingImage,
    MissingTags,
    ValidationFailed,
)
from ..models.event import SCALAR_FIELDS
from ..models.form import EventForm, validate_event_fields
from ..models.image import ImageFile
from ..models.lists import AgendaList, TagSet
from .state import State, SubmissionState

logger = logging.getLogger(__name__)

DEFAULT_VALUES: Dict[str, str] = {"mode": "online"}
FALLBACK_ERROR = "Failed to create event"
UNEXPECTED_ERROR = "An unexpected error occurred"
INVALID_FIELDS_ERROR = "Please fix the highlighted fields"

Payload = Tuple[Dict[str, str], Dict[str, Tuple[str, bytes, str]]]


class EventSubmission:
    """Mutable form state: scalar values, tags, agenda and the selected image.

    The list fields and the image live outside the scalar validation schema;
    everything is combined only when :meth:`submit` is called.
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self.values: Dict[str, Any] = dict(DEFAULT_VALUES)
        self.values.update(values or {})
        self.tags = TagSet()
        self.agenda = AgendaList()
        self.image: ImageFile | None = None
        self.state = SubmissionState()

    # ------------------------------------------------------------------
    # Field editing
    # ------------------------------------------------------------------
    def set_field(self, name: str, value: Any) -> None:
        if name not in SCALAR_FIELDS:
            raise KeyError(f"Unknown event field: {name}")
        self.values[name] = value

    def add_tag(self, text: str) -> bool:
        return self.tags.add(text)

    def remove_tag(self, tag: str) -> None:
        self.tags.remove(tag)

    def add_agenda_item(self, text: str) -> bool:
        return self.agenda.add(text)

    def remove_agenda_item(self, index: int) -> str:
        return self.agenda.remove(index)

    def select_image(self, image: ImageFile) -> str:
        """Hold *image* in memory and return its local preview URL."""
        self.image = image
        return image.preview

    def reset(self) -> None:
        self.values = dict(DEFAULT_VALUES)
        self.tags.clear()
        self.agenda.clear()
        self.image = None

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------
    def validate(self) -> EventForm:
        """Validate the scalar fields and the commit preconditions.

        Preconditions are checked in a fixed order (image, tags, agenda) and
        the first one that fails is raised.
        """
        form = validate_event_fields(self.values)
        if self.image is None or not self.image:
            raise MissingImage()
        if not self.tags:
            raise MissingTags()
        if not self.agenda:
            raise MissingAgenda()
        return form

    def build_payload(self, form: EventForm) -> Payload:
        """Return ``(fields, files)`` ready for a multipart POST."""
        if self.image is None:
            raise MissingImage()
        fields: Dict[str, str] = dict(form.model_dump())
        fields["tags"] = self.tags.to_json()
        fields["agenda"] = self.agenda.to_json()
        files = {
            "image": (self.image.filename, self.image.content, self.image.content_type)
        }
        return fields, files

    def submit(self, client: EventsApiClient) -> State:
        """Send the event through *client* and return the resulting state.

        While a request is outstanding further calls return immediately with
        the ``Submitting`` state and issue no request.
        """
        if self.state.is_busy:
            logger.warning("Submission already in flight; ignoring duplicate submit")
            return self.state.current

        try:
            form = self.validate()
        except ValidationFailed as exc:
            self.state.reject(INVALID_FIELDS_ERROR, exc.errors)
            return self.state.current
        except EventError as exc:
            self.state.reject(exc.message)
            return self.state.current

        fields, files = self.build_payload(form)
        self.state.start()
        try:
            status_code, body = client.create_event(fields, files)
        except requests.RequestException as exc:
            logger.error("Event submission failed: %s", exc)
            self.state.fail(UNEXPECTED_ERROR)
            return self.state.current
        except Exception:
            logger.exception("Unexpected error while submitting event")
            self.state.fail(UNEXPECTED_ERROR)
            return self.state.current

        if 200 <= status_code < 300 and body.get("status") == "created":
            self.state.succeed(str(body.get("slug", "")))
            self.reset()
        else:
            self.state.fail(body.get("message") or FALLBACK_ERROR, body.get("errors"))
        return self.state.current

__all__ = ["EventSubmission", "FALLBACK_ERROR", "UNEXPECTED_ERROR", "INVALID_FIELDS_ERROR"]
