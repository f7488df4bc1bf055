"""Service health and authentication status endpoints."""

from fastapi import APIRouter, Depends

from api.dependencies import get_token_store
from api.models.responses import HealthResponse, StatusResponse
from core.config import API_VERSION, SERVICE_NAME
from core.tokens import TokenStore

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health_check(token_store: TokenStore = Depends(get_token_store)):
    """Report service identity and whether credentials are stored."""
    return HealthResponse(
        status="OK",
        service=SERVICE_NAME,
        version=API_VERSION,
        authenticated=token_store.is_authenticated(),
    )


@router.get("/status", response_model=StatusResponse)
async def auth_status(token_store: TokenStore = Depends(get_token_store)):
    """
    Report authentication state and token expiry (epoch millis).

    An expired token is still reported as authenticated.
    """
    credentials = token_store.get()
    return StatusResponse(
        authenticated=credentials is not None,
        tokenExpiry=credentials.expiry_date if credentials else None,
    )
