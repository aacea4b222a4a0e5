"""Server-rendered pages: event listing, event detail and the create-event form."""

from __future__ import annotations

import logging
from typing import Dict, List

from flask import Blueprint, abort, redirect, render_template, request, send_from_directory, url_for
from werkzeug.exceptions import HTTPException

from ..errors import EventError, ValidationFailed
from ..models.event import EVENT_MODES, SCALAR_FIELDS
from ..models.image import ImageFile
from ..services.assets import LocalAssetStore
from ..services.ingestion import create_event
from ..services.queries import get_by_slug, get_similar_by_slug, list_all
from ..submission.assembler import INVALID_FIELDS_ERROR, UNEXPECTED_ERROR, EventSubmission
from .context import get_asset_store, get_event_store, get_listing_cache, read_uploaded_image

logger = logging.getLogger(__name__)

pages_bp = Blueprint("pages", __name__, template_folder="templates")


@pages_bp.route("/")
def index():
    return redirect(url_for("pages.view_events"))


@pages_bp.route("/events")
def view_events():
    """List all events. The rendered page is cached for a fixed window."""
    def _render() -> str:
        events = list_all(get_event_store())
        logger.info("Rendering listing with %d events", len(events))
        return render_template("events.html", events=events)

    return get_listing_cache().get_or_set("events", _render)


# ---------------------------------------------------------------------------
# Create-event form
# ---------------------------------------------------------------------------
def _submission_from_form() -> EventSubmission:
    """Rebuild the form state posted back by ``create_event.html``."""
    submission = EventSubmission({name: request.form[name] for name in SCALAR_FIELDS if name in request.form})
    for tag in request.form.getlist("tags"):
        submission.add_tag(tag)
    for item in request.form.getlist("agenda"):
        submission.add_agenda_item(item)

    # A re-rendered form carries the earlier upload as its preview URL
    image = read_uploaded_image() or ImageFile.from_data_url(
        request.form.get("image_data", ""), request.form.get("image_name", "")
    )
    if image:
        submission.select_image(image)
    return submission


def _apply_edit(submission: EventSubmission) -> bool:
    """Apply a tag/agenda edit button, if one was pressed."""
    form = request.form
    if "remove_tag" in form:
        submission.remove_tag(form["remove_tag"])
    elif "remove_agenda" in form:
        try:
            submission.remove_agenda_item(int(form["remove_agenda"]))
        except (ValueError, IndexError):
            logger.warning("Ignoring bad agenda index %r", form["remove_agenda"])
    elif form.get("action") == "add_tag":
        submission.add_tag(form.get("new_tag", ""))
    elif form.get("action") == "add_agenda":
        submission.add_agenda_item(form.get("new_agenda_item", ""))
    else:
        return False
    return True


def _render_form(
    submission: EventSubmission,
    error: str = "",
    field_errors: Dict[str, List[str]] | None = None,
    status: int = 200,
):
    return render_template(
        "create_event.html",
        values=submission.values,
        tags=list(submission.tags),
        agenda=list(submission.agenda),
        image=submission.image,
        modes=EVENT_MODES,
        error=error,
        field_errors=field_errors or {},
    ), status


@pages_bp.route("/events/new", methods=["GET", "POST"])
def new_event():
    """Create-event form; a successful publish redirects to the listing."""
    if request.method == "GET":
        return _render_form(EventSubmission())

    submission = _submission_from_form()
    if _apply_edit(submission):
        return _render_form(submission)

    try:
        fields, _files = submission.build_payload(submission.validate())
        event = create_event(
            fields,
            submission.image,
            event_store=get_event_store(),
            asset_store=get_asset_store(),
        )
    except ValidationFailed as exc:
        return _render_form(submission, INVALID_FIELDS_ERROR, exc.errors, exc.status_code)
    except EventError as exc:
        logger.warning("Event form rejected (%s): %s", exc.kind, exc.message)
        return _render_form(submission, exc.message, status=exc.status_code)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Unexpected error while creating event from form")
        return _render_form(submission, UNEXPECTED_ERROR, status=500)

    logger.info("Event '%s' published from the web form", event.slug)
    return redirect(url_for("pages.view_events"))


@pages_bp.route("/events/<slug>")
def event_detail(slug):
    store = get_event_store()
    event = get_by_slug(store, slug)
    if event is None:
        return render_template("not_found.html", slug=slug), 404
    similar = get_similar_by_slug(store, slug)
    return render_template("event_detail.html", event=event, similar_events=similar)


@pages_bp.route("/uploads/<path:filename>")
def uploaded_file(filename):
    """Serve posters written by the local asset store."""
    store = get_asset_store()
    if not isinstance(store, LocalAssetStore):
        abort(404)
    return send_from_directory(store.folder, filename)
