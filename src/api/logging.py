"""Per-request logging for the API."""

import logging
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from fastapi import Request

logger = logging.getLogger("api.requests")


@dataclass
class RequestLog:
    """Captured request/response data for logging."""

    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    endpoint: str = ""
    method: str = ""
    client_ip: str | None = None
    status_code: int = 0
    error_code: str | None = None
    error_message: str | None = None
    processing_time_ms: int = 0


def get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxies."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def log_request(log: RequestLog) -> None:
    """Emit one log line per handled request."""
    level = logging.INFO
    if log.status_code >= 500:
        level = logging.ERROR
    elif log.status_code >= 400:
        level = logging.WARNING

    message = "%s %s -> %s in %dms [%s]"
    args = [
        log.method,
        log.endpoint,
        log.status_code,
        log.processing_time_ms,
        log.request_id,
    ]
    if log.error_code:
        message += " %s: %s"
        args.extend([log.error_code, log.error_message])
    logger.log(level, message, *args)


async def request_logging_middleware(request: Request, call_next):
    """Time each request and log its outcome."""
    start_time = time.time()
    request_log = RequestLog(
        endpoint=request.url.path,
        method=request.method,
        client_ip=get_client_ip(request),
    )
    request.state.request_log = request_log

    try:
        response = await call_next(request)
    except Exception as e:
        request_log.status_code = 500
        request_log.error_code = "INTERNAL_ERROR"
        request_log.error_message = str(e)
        raise
    else:
        request_log.status_code = response.status_code
        response.headers["X-Request-ID"] = request_log.request_id
        return response
    finally:
        request_log.processing_time_ms = int((time.time() - start_time) * 1000)
        log_request(request_log)
