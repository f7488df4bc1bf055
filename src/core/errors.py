"""
Service error hierarchy.

Each error carries the HTTP status and error code it is reported with; the
API layer converts them into the standard error response.
"""


class ServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or []


class ValidationError(ServiceError):
    """A required request field is missing."""

    status_code = 400
    code = "INVALID_REQUEST"


class AuthenticationRequiredError(ServiceError):
    """No credential bundle has been stored yet."""

    status_code = 401
    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Not authenticated. Call /auth first."):
        super().__init__(message)


class AuthExchangeError(ServiceError):
    """The authorization code could not be exchanged for tokens."""

    status_code = 500
    code = "AUTH_FAILED"


class UpstreamApiError(ServiceError):
    """A Google Workspace API call failed."""

    status_code = 500
    code = "UPSTREAM_ERROR"

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status
