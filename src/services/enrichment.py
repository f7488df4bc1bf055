"""
Event enrichment: inferred type, color and reminder settings.

Update payloads distinguish three states per field: UNSET (the caller did not
mention it, leave it alone), None (explicitly cleared) and a value.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from core.classification import EventType, color_for, infer_event_type
from core.config import DEFAULT_REMINDER_METHOD, DEFAULT_TIMEZONE
from core.errors import ValidationError
from models.events import EnrichedEvent, EventTime, ReminderOverride, RemindersBlock


class _Unset:
    """Marker for a patch field the caller did not provide."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def _event_time(value: str) -> EventTime:
    return {"dateTime": value, "timeZone": DEFAULT_TIMEZONE}


def _normalize_override(override: Mapping[str, Any]) -> ReminderOverride:
    return {
        "method": override.get("method") or DEFAULT_REMINDER_METHOD,
        "minutes": override["minutes"],
    }


def merge_reminders(
    overrides: Iterable[Mapping[str, Any]] | None,
) -> RemindersBlock | None:
    """
    Build the reminders block for a new event.

    No overrides means no block at all, so the calendar default applies.
    Overrides are added on top of the default reminder, never instead of it.
    """
    if not overrides:
        return None
    return {
        "useDefault": True,
        "overrides": [_normalize_override(o) for o in overrides],
    }


def merge_reminders_for_update(overrides: Any) -> RemindersBlock | Any:
    """
    Build the reminders block for a partial update.

    UNSET is passed through; None or an empty list resets to the default
    reminder only.
    """
    if overrides is UNSET:
        return UNSET
    if not overrides:
        return {"useDefault": True}
    return merge_reminders(overrides)


def enrich_new_event(
    summary: str | None,
    start: str | None,
    end: str | None,
    description: str | None = None,
    event_type: EventType | str | None = None,
    reminders: Iterable[Mapping[str, Any]] | None = None,
) -> EnrichedEvent:
    """
    Assemble the Google event body for a create request.

    When no type is declared it is inferred from the summary.

    Raises:
        ValidationError: if summary, start or end is missing
    """
    if not summary or not start or not end:
        raise ValidationError("Missing required fields: summary, start, end")

    if event_type is None:
        event_type = infer_event_type(summary)

    event: EnrichedEvent = {
        "summary": summary,
        "start": _event_time(start),
        "end": _event_time(end),
    }
    if description is not None:
        event["description"] = description

    color_id = color_for(event_type)
    if color_id is not None:
        event["colorId"] = color_id

    reminders_block = merge_reminders(reminders)
    if reminders_block is not None:
        event["reminders"] = reminders_block

    return event


def enrich_event_update(
    summary: Any = UNSET,
    start: Any = UNSET,
    end: Any = UNSET,
    description: Any = UNSET,
    event_type: Any = UNSET,
    reminders: Any = UNSET,
) -> dict[str, Any]:
    """Assemble a partial Google event body containing only provided fields."""
    patch: dict[str, Any] = {}

    if summary is not UNSET:
        patch["summary"] = summary
    if description is not UNSET:
        patch["description"] = description
    # An absent or empty boundary leaves that side of the event unchanged
    if start is not UNSET and start:
        patch["start"] = _event_time(start)
    if end is not UNSET and end:
        patch["end"] = _event_time(end)

    if event_type is None:
        patch["colorId"] = None
    elif event_type is not UNSET:
        color_id = color_for(event_type)
        if color_id is not None:
            patch["colorId"] = color_id

    reminders_block = merge_reminders_for_update(reminders)
    if reminders_block is not UNSET:
        patch["reminders"] = reminders_block

    return patch
