"""Calendar event endpoints."""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_workspace_client, require_credentials
from api.models.requests import EventCreateRequest, EventUpdateRequest
from api.models.responses import EventListResponse, EventResponse, MessageResponse
from core.config import DEFAULT_MAX_EVENTS
from core.google_client import GoogleWorkspaceClient
from core.tokens import CredentialBundle
from services import calendar
from services.enrichment import enrich_event_update, enrich_new_event

router = APIRouter(prefix="/events")


@router.get("", response_model=EventListResponse)
async def list_events(
    max_results: int = Query(DEFAULT_MAX_EVENTS, alias="maxResults", ge=1, le=2500),
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    """List upcoming events from the primary calendar."""
    events = await calendar.list_upcoming_events(client, credentials, max_results)
    return EventListResponse(events=events)


@router.post("", response_model=EventResponse)
async def create_event(
    body: EventCreateRequest,
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    """
    Create an event.

    The event type is taken from `type` or inferred from the summary and
    decides the event color. Reminder overrides are added on top of the
    calendar's default reminder.
    """
    event = enrich_new_event(
        summary=body.summary,
        start=body.start,
        end=body.end,
        description=body.description,
        event_type=body.type,
        reminders=[r.model_dump() for r in body.reminders] if body.reminders else None,
    )
    created = await calendar.create_event(client, credentials, event)
    return EventResponse(event=created)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    body: EventUpdateRequest,
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    """
    Partially update an event.

    Fields missing from the body are left unchanged. `type: null` clears the
    event color and `reminders: null` or `[]` resets to the default reminder.
    """
    patch = enrich_event_update(
        summary=body.patch_value("summary"),
        start=body.patch_value("start"),
        end=body.patch_value("end"),
        description=body.patch_value("description"),
        event_type=body.patch_value("type"),
        reminders=body.patch_value("reminders"),
    )
    updated = await calendar.update_event(client, credentials, event_id, patch)
    return EventResponse(event=updated)


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: str,
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    await calendar.delete_event(client, credentials, event_id)
    return MessageResponse(message="Event deleted successfully")
