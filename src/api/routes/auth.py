"""OAuth consent redirect and callback endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse

from api.dependencies import get_oauth_flow
from api.models.responses import CallbackResponse
from core.errors import ValidationError
from core.oauth import OAuthFlow

router = APIRouter()


@router.get("/auth")
async def start_auth(oauth_flow: OAuthFlow = Depends(get_oauth_flow)):
    """Redirect to the Google consent page."""
    return RedirectResponse(oauth_flow.build_authorization_url())


@router.get("/callback", response_model=CallbackResponse)
async def oauth_callback(
    code: str | None = None,
    error: str | None = None,
    oauth_flow: OAuthFlow = Depends(get_oauth_flow),
):
    """
    Exchange the authorization code and store the resulting tokens.

    A repeated callback replaces any previously stored tokens.
    """
    if not code:
        details = [f"Provider error: {error}"] if error else []
        raise ValidationError("No authorization code received", details=details)

    credentials = await oauth_flow.exchange(code)
    return CallbackResponse(
        success=True,
        message="Successfully authenticated with Google Workspace!",
        expiresAt=credentials.expiry_date,
    )
