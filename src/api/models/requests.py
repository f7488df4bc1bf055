"""Pydantic request models for API endpoints."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from services.enrichment import UNSET


class ReminderOverrideInput(BaseModel):
    """Caller-supplied reminder; method defaults to popup."""

    method: Literal["popup", "email"] | None = None
    minutes: int


class EventCreateRequest(BaseModel):
    """
    Body of POST /events.

    summary, start and end are required but declared optional here so that
    their absence is reported as a missing-field error rather than a schema
    error.
    """

    model_config = ConfigDict(extra="ignore")

    summary: str | None = None
    start: str | None = None
    end: str | None = None
    description: str | None = None
    type: str | None = None
    reminders: list[ReminderOverrideInput] | None = None


class EventUpdateRequest(BaseModel):
    """Body of PUT /events/{eventId}; every field is optional."""

    model_config = ConfigDict(extra="ignore")

    summary: str | None = None
    start: str | None = None
    end: str | None = None
    description: str | None = None
    type: str | None = None
    reminders: list[ReminderOverrideInput] | None = None

    def patch_value(self, name: str) -> Any:
        """Return the field value, or UNSET if the body did not mention it."""
        if name not in self.model_fields_set:
            return UNSET
        value = getattr(self, name)
        if name == "reminders" and value is not None:
            return [reminder.model_dump() for reminder in value]
        return value
