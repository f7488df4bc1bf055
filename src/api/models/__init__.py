"""API Pydantic models."""

from .requests import EventCreateRequest, EventUpdateRequest, ReminderOverrideInput
from .responses import (
    CallbackResponse,
    ErrorCodes,
    ErrorResponse,
    EventListResponse,
    EventResponse,
    HealthResponse,
    MessageResponse,
    StatusResponse,
)

__all__ = [
    "CallbackResponse",
    "ErrorCodes",
    "ErrorResponse",
    "EventCreateRequest",
    "EventListResponse",
    "EventResponse",
    "EventUpdateRequest",
    "HealthResponse",
    "MessageResponse",
    "ReminderOverrideInput",
    "StatusResponse",
]
