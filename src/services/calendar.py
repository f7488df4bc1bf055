"""
Calendar event listing and mutation through the Google Calendar API.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from core.config import DEFAULT_MAX_EVENTS
from core.google_client import GoogleWorkspaceClient
from core.tokens import CredentialBundle
from models.events import EnrichedEvent

logger = logging.getLogger(__name__)


async def list_upcoming_events(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    max_results: int = DEFAULT_MAX_EVENTS,
) -> list[dict[str, Any]]:
    """
    Fetch upcoming events from the primary calendar.

    Recurring events are expanded into single occurrences and returned in
    start time order.
    """
    time_min = datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    response = await client.list_events(
        credentials, time_min=time_min, max_results=max_results
    )
    return response.get("items", [])


async def create_event(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    event: EnrichedEvent,
) -> dict[str, Any]:
    """Insert an enriched event into the primary calendar."""
    created = await client.insert_event(credentials, dict(event))
    logger.info(
        "Created event %s (colorId=%s)", created.get("id"), event.get("colorId")
    )
    return created


async def update_event(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    event_id: str,
    patch: dict[str, Any],
) -> dict[str, Any]:
    """Apply a partial update; fields absent from the patch are left unchanged."""
    updated = await client.patch_event(credentials, event_id, patch)
    logger.info("Updated event %s (fields: %s)", event_id, ", ".join(sorted(patch)))
    return updated


async def delete_event(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    event_id: str,
) -> None:
    await client.delete_event(credentials, event_id)
    logger.info("Deleted event %s", event_id)
