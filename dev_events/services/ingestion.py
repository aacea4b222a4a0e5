"""Ingestion of submitted events: re-validate, store the poster, persist the record."""

from __future__ import annotations

import json
import logging
from typing import Any, Iterator, List, Mapping

from ..config import MAX_SLUG_ATTEMPTS, RANDOM_SLUG_ATTEMPTS
from ..errors import (
    DuplicateSlug,
    MalformedPayload,
    MissingImage,
    PersistenceFailed,
)
from ..models.event import Event, SCALAR_FIELDS
from ..models.form import validate_event_fields
from ..models.image import ImageFile
from ..models.lists import AgendaList, TagSet
from ..utils.datetime_utils import get_current_timestamp
from ..utils.slugs import slugify, with_random_suffix, with_suffix
from .assets import AssetStore
from .storage import EventStore

logger = logging.getLogger(__name__)


def decode_string_list(raw: Any, field: str) -> List[str]:
    """Decode the JSON-array text part *field* into a list of strings."""
    if not isinstance(raw, str) or not raw:
        raise MalformedPayload(f"Missing or empty '{field}' field")
    try:
        value = json.loads(raw)
    except ValueError as exc:
        raise MalformedPayload(f"'{field}' is not valid JSON") from exc
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise MalformedPayload(f"'{field}' must be a JSON array of strings")
    return value


def create_event(
    fields: Mapping[str, Any],
    image: ImageFile | None,
    *,
    event_store: EventStore,
    asset_store: AssetStore,
    max_slug_attempts: int = MAX_SLUG_ATTEMPTS,
    random_slug_attempts: int = RANDOM_SLUG_ATTEMPTS,
) -> Event:
    """Validate a submission and persist it as exactly one new :class:`Event`.

    *fields* holds the text parts of the multipart body (the scalar fields
    plus the JSON-encoded ``tags`` and ``agenda``). The poster is written to
    *asset_store* first and removed again if the record cannot be stored, so
    a failed call leaves nothing behind.

    Raises
    ------
    ValidationFailed
        A scalar field violates its constraints.
    MalformedPayload
        ``tags``/``agenda`` are not JSON string arrays, or are empty.
    MissingImage
        No image part, or an empty one.
    PersistenceFailed
        The store rejected the write, or no free slug was found.
    """
    form = validate_event_fields({name: fields[name] for name in SCALAR_FIELDS if name in fields})

    tags = TagSet(decode_string_list(fields.get("tags"), "tags"))
    agenda = AgendaList(decode_string_list(fields.get("agenda"), "agenda"))
    if not tags:
        raise MalformedPayload("At least one tag is required")
    if not agenda:
        raise MalformedPayload("At least one agenda item is required")

    if image is None or not image:
        raise MissingImage()

    image_ref = asset_store.save(image.filename, image.content, image.content_type)

    base_slug = slugify(form.title)
    event = Event(
        **form.model_dump(),
        tags=tags.to_list(),
        agenda=agenda.to_list(),
        image=image_ref,
        slug=base_slug,
        created_at=get_current_timestamp(),
    )

    try:
        return _insert_with_unique_slug(
            event_store, event, base_slug, max_slug_attempts, random_slug_attempts
        )
    except Exception:
        asset_store.delete(image_ref)
        raise


def _slug_candidates(base_slug: str, max_attempts: int, random_attempts: int) -> Iterator[str]:
    for attempt in range(1, max_attempts + 1):
        yield with_suffix(base_slug, attempt)
    for _ in range(random_attempts):
        yield with_random_suffix(base_slug)


def _insert_with_unique_slug(
    store: EventStore, event: Event, base_slug: str, max_attempts: int, random_attempts: int
) -> Event:
    # The store's unique index decides collisions; no read-before-write.
    for slug in _slug_candidates(base_slug, max_attempts, random_attempts):
        candidate = event.with_slug(slug)
        try:
            store.insert(candidate)
        except DuplicateSlug:
            logger.info("Slug '%s' taken, trying next suffix", candidate.slug)
            continue
        logger.info("Created event '%s'", candidate.slug)
        return candidate

    logger.error(
        "No free slug for '%s' after %d attempts", base_slug, max_attempts + random_attempts
    )
    raise PersistenceFailed(f"Could not allocate a unique slug for '{base_slug}'")

__all__ = ["create_event", "decode_string_list"]
