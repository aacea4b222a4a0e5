"""Shared test data for the dev_events test-suite."""

import json
import os
import sys
from datetime import datetime, timedelta, timezone

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dev_events.models.event import Event
from dev_events.models.image import ImageFile

VALID_FIELDS = {
    "title": "Next.js Conf 2026",
    "organizer": "Vercel",
    "overview": "The annual conference for Next.js developers",
    "description": "A full day of talks, workshops and networking with the Next.js team.",
    "date": "2026-05-20",
    "time": "09:00",
    "mode": "hybrid",
    "venue": "Moscone Center",
    "location": "San Francisco, CA",
    "audience": "Web Developers",
}

VALID_TAGS = ["nextjs", "react"]
VALID_AGENDA = [
    "09:00 - Check-in and Coffee",
    "10:00 - Keynote",
    "12:00 - Lunch",
]

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-data"

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def payload_fields(**overrides):
    """Text parts of a valid multipart submission."""
    fields = dict(VALID_FIELDS)
    fields["tags"] = json.dumps(VALID_TAGS)
    fields["agenda"] = json.dumps(VALID_AGENDA)
    fields.update(overrides)
    return fields


def poster():
    return ImageFile("poster.png", PNG_BYTES, "image/png")


def make_event(slug, tags=("nextjs",), minutes=0, title=None):
    """Build a stored event whose createdAt is BASE_TIME + *minutes*."""
    fields = dict(VALID_FIELDS)
    if title:
        fields["title"] = title
    return Event(
        **fields,
        tags=list(tags),
        agenda=list(VALID_AGENDA),
        image=f"/uploads/{slug}.png",
        slug=slug,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
