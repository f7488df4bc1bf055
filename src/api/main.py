"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.logging import request_logging_middleware
from api.models.responses import ErrorCodes, ErrorResponse
from api.routes import (
    auth_router,
    drive_router,
    events_router,
    health_router,
    mail_router,
)
from core.config import (
    API_VERSION,
    GOOGLE_CLIENT_ID,
    GOOGLE_CLIENT_SECRET,
    LOG_LEVEL,
    REDIRECT_URI,
    SERVICE_NAME,
)
from core.errors import ServiceError
from core.google_client import GoogleWorkspaceClient, create_http_client
from core.oauth import OAuthFlow
from core.tokens import TokenStore

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the token store and upstream clients for the process lifetime."""
    http_client = create_http_client()
    app.state.token_store = TokenStore()
    app.state.oauth_flow = OAuthFlow(app.state.token_store, http_client)
    app.state.workspace_client = GoogleWorkspaceClient(http_client)

    # Credentials are not validated here; requests fail later if missing
    logger.info("%s %s starting", SERVICE_NAME, API_VERSION)
    logger.info("Client ID: %s", "Set" if GOOGLE_CLIENT_ID else "Not set")
    logger.info("Client Secret: %s", "Set" if GOOGLE_CLIENT_SECRET else "Not set")
    logger.info("Redirect URI: %s", REDIRECT_URI or "Not set")

    yield

    await http_client.aclose()


app = FastAPI(
    title=SERVICE_NAME,
    description="OAuth token exchange and Google Workspace API proxy",
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(request_logging_middleware)


def _error_response(
    request: Request, status_code: int, error: ErrorResponse
) -> JSONResponse:
    request_log = getattr(request.state, "request_log", None)
    if request_log is not None:
        request_log.error_code = error.code
        request_log.error_message = error.error
    return JSONResponse(status_code=status_code, content=error.model_dump())


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    """Convert service errors to the standard error format."""
    return _error_response(
        request,
        exc.status_code,
        ErrorResponse(error=exc.message, code=exc.code, details=exc.details),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        details.append(f"{location}: {err.get('msg')}")
    return _error_response(
        request,
        400,
        ErrorResponse(
            error="Invalid request",
            code=ErrorCodes.INVALID_REQUEST,
            details=details,
        ),
    )


# Global exception handler for unexpected errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with standard error format."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        request,
        500,
        ErrorResponse(
            error="Internal server error",
            code=ErrorCodes.INTERNAL_ERROR,
            details=[],
        ),
    )


# Include routers
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(events_router)
app.include_router(mail_router)
app.include_router(drive_router)


# Entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    from core.config import API_DEBUG, API_HOST, API_PORT

    uvicorn.run(
        "api.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_DEBUG,
    )
