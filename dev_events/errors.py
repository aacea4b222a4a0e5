"""Error kinds raised by the submission and ingestion pipeline.

Every error carries a human-readable ``message`` that is shown to the user
verbatim, and an HTTP ``status_code`` used by the web layer when the error
crosses the API boundary.
"""

from __future__ import annotations

from typing import Any, Dict, List


class EventError(Exception):
    """Base class for all expected pipeline failures."""

    kind: str = "Unexpected"
    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> Dict[str, Any]:
        """Return the JSON body sent back to the client."""
        return {"status": "error", "message": self.message}


class ValidationFailed(EventError):
    """One or more scalar fields violate their constraints."""

    kind = "ValidationFailed"
    status_code = 400
    default_message = "Invalid event details"

    def __init__(self, errors: Dict[str, List[str]], message: str | None = None) -> None:
        self.errors = errors
        super().__init__(message)

    def to_response(self) -> Dict[str, Any]:
        body = super().to_response()
        body["errors"] = self.errors
        return body


class MissingImage(EventError):
    kind = "MissingImage"
    status_code = 400
    default_message = "Please upload an event image"


class MissingTags(EventError):
    kind = "MissingTags"
    status_code = 400
    default_message = "Please add at least one tag"


class MissingAgenda(EventError):
    kind = "MissingAgenda"
    status_code = 400
    default_message = "Please add at least one agenda item"


class MalformedPayload(EventError):
    """``tags`` or ``agenda`` could not be decoded into a list of strings."""

    kind = "MalformedPayload"
    status_code = 400
    default_message = "Malformed event payload"


class PersistenceFailed(EventError):
    kind = "PersistenceFailed"
    status_code = 500
    default_message = "Failed to save event"


class DuplicateSlug(PersistenceFailed):
    """Raised by an event store when the slug is already taken."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"An event with slug '{slug}' already exists")


class Unexpected(EventError):
    pass


__all__ = [
    "EventError",
    "ValidationFailed",
    "MissingImage",
    "MissingTags",
    "MissingAgenda",
    "MalformedPayload",
    "PersistenceFailed",
    "DuplicateSlug",
    "Unexpected",
]
