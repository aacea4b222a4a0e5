"""Command line interface: run the web app, prepare MongoDB, publish an event."""

from __future__ import annotations

import logging
import sys

import click

from . import config
from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .models.event import EVENT_MODES
from .submission.state import Failed, Succeeded

logger = logging.getLogger(__name__)


@click.group()
def cli():
    """dev-events - publish and browse developer events."""


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=5000, show_default=True, type=int)
@click.option("--debug", is_flag=True, help="Enable the Flask debugger and reloader")
def serve(host, port, debug):
    """Run the web application against MongoDB."""
    from .web import create_app

    app = create_app()
    logger.info("Serving dev_events on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=debug)


@cli.command("init-db")
def init_db():
    """Create the MongoDB indexes (unique slug, createdAt)."""
    from .clients.mongodb_client import get_events_collection
    from .services.storage import MongoEventStore

    MongoEventStore(get_events_collection()).ensure_indexes()
    click.echo("✓ Event indexes ready")


@cli.command()
@click.option("--title", required=True)
@click.option("--organizer", required=True)
@click.option("--overview", required=True)
@click.option("--description", required=True)
@click.option("--date", "date_", required=True, help="Calendar date, e.g. 2026-05-20")
@click.option("--time", "time_", required=True, help="Time of day, e.g. 09:00")
@click.option("--mode", type=click.Choice(EVENT_MODES), default="online", show_default=True)
@click.option("--venue", required=True)
@click.option("--location", required=True)
@click.option("--audience", required=True)
@click.option("--tag", "tags", multiple=True, help="Repeat for several tags")
@click.option("--agenda", "agenda", multiple=True, help="Repeat for each agenda entry, in order")
@click.option("--image", "image_path", type=click.Path(exists=True, dir_okay=False), help="Poster image file")
@click.option("--api-url", default=config.EVENTS_API_URL, show_default=True)
def publish(title, organizer, overview, description, date_, time_, mode, venue,
            location, audience, tags, agenda, image_path, api_url):
    """Submit a new event to a running server."""
    from .clients.api_client import EventsApiClient
    from .models.image import ImageFile
    from .submission.assembler import EventSubmission

    submission = EventSubmission({
        "title": title,
        "organizer": organizer,
        "overview": overview,
        "description": description,
        "date": date_,
        "time": time_,
        "mode": mode,
        "venue": venue,
        "location": location,
        "audience": audience,
    })
    for tag in tags:
        if not submission.add_tag(tag):
            click.echo(f"Skipping empty or duplicate tag: {tag!r}", err=True)
    for item in agenda:
        if not submission.add_agenda_item(item):
            click.echo(f"Skipping empty agenda item: {item!r}", err=True)
    if image_path:
        submission.select_image(ImageFile.from_path(image_path))

    state = submission.submit(EventsApiClient(url=api_url))

    if isinstance(state, Succeeded):
        click.echo(f"✓ Event created: {state.slug}")
        return
    if isinstance(state, Failed):
        click.echo(f"✗ {state.reason}", err=True)
        for field, messages in state.errors.items():
            for message in messages:
                click.echo(f"  {field}: {message}", err=True)
    sys.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
