"""Pydantic response models for API endpoints."""

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Service root response."""

    status: str  # "OK"
    service: str
    version: str
    authenticated: bool


class StatusResponse(BaseModel):
    """Authentication status."""

    authenticated: bool
    tokenExpiry: int | None = None  # epoch millis


class CallbackResponse(BaseModel):
    """Successful OAuth callback."""

    success: bool = True
    message: str
    expiresAt: int | None = None


class EventResponse(BaseModel):
    success: bool = True
    event: dict[str, Any]


class EventListResponse(BaseModel):
    success: bool = True
    events: list[dict[str, Any]]


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: str
    details: list[str] = []


class ErrorCodes:
    """Error code constants."""

    INVALID_REQUEST = "INVALID_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    AUTH_FAILED = "AUTH_FAILED"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
