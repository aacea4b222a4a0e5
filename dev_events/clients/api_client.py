"""Shared HTTP session and client for the events API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

import requests

from ..config import API_TIMEOUT_SECONDS, EVENTS_API_URL

logger = logging.getLogger(__name__)

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return a singleton :class:`requests.Session`."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


class EventsApiClient:
    """Posts multipart event payloads to the ingestion endpoint."""

    def __init__(
        self,
        url: str = EVENTS_API_URL,
        session: requests.Session | None = None,
        timeout: float = API_TIMEOUT_SECONDS,
    ) -> None:
        self.url = url
        self.session = session or get_session()
        self.timeout = timeout

    def create_event(
        self,
        fields: Dict[str, str],
        files: Dict[str, Tuple[str, bytes, str]],
    ) -> Tuple[int, Dict[str, Any]]:
        """POST *fields* and *files* and return ``(status_code, body)``.

        Transport failures propagate as :class:`requests.RequestException`.
        A response without a JSON body yields an empty dict.
        """
        logger.info("Submitting event '%s' to %s", fields.get("title"), self.url)
        response = self.session.post(self.url, data=fields, files=files, timeout=self.timeout)

        try:
            body = response.json()
        except ValueError:
            logger.error("Non-JSON response from events API: %s", response.status_code)
            body = {}
        if not isinstance(body, dict):
            body = {}
        return response.status_code, body

__all__ = ["get_session", "EventsApiClient"]
