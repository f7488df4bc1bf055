"""
Google OAuth 2.0 authorization code flow.
"""

import logging
from urllib.parse import urlencode

import httpx

from core.config import (
    GOOGLE_AUTH_URL,
    GOOGLE_CLIENT_ID,
    GOOGLE_CLIENT_SECRET,
    GOOGLE_TOKEN_URL,
    REDIRECT_URI,
    SCOPES,
)
from core.errors import AuthExchangeError
from core.google_client import safe_error_message
from core.tokens import CredentialBundle, TokenStore

logger = logging.getLogger(__name__)


class OAuthFlow:
    """Builds consent URLs and exchanges authorization codes for tokens."""

    def __init__(
        self,
        token_store: TokenStore,
        http_client: httpx.AsyncClient,
        client_id: str = GOOGLE_CLIENT_ID,
        client_secret: str = GOOGLE_CLIENT_SECRET,
        redirect_uri: str = REDIRECT_URI,
    ):
        self.token_store = token_store
        self._http = http_client
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

    def build_authorization_url(self, scopes: list[str] | None = None) -> str:
        """
        Build the Google consent page URL.

        Always asks for offline access and forces the consent prompt so a
        refresh token is issued on every authorization.
        """
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": " ".join(scopes if scopes is not None else SCOPES),
            "access_type": "offline",
            "prompt": "consent",
        }
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def exchange(self, code: str) -> CredentialBundle:
        """
        Exchange an authorization code and store the resulting bundle.

        The stored bundle is always replaced, even when the new one carries
        no refresh token.

        Raises:
            AuthExchangeError: if the request fails or Google rejects the code
        """
        try:
            response = await self._http.post(
                GOOGLE_TOKEN_URL,
                data={
                    "code": code,
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                    "redirect_uri": self.redirect_uri,
                    "grant_type": "authorization_code",
                },
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as exc:
            logger.error("Token exchange request failed: %s", exc)
            raise AuthExchangeError("Failed to authenticate") from exc

        if response.status_code < 200 or response.status_code >= 300:
            logger.error(
                "Token exchange rejected (%s): %s",
                response.status_code,
                safe_error_message(response),
            )
            raise AuthExchangeError("Failed to authenticate")

        try:
            payload = response.json()
        except ValueError as exc:
            raise AuthExchangeError("Failed to authenticate") from exc

        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(access_token, str) or not access_token.strip():
            logger.error("Token response is missing an access_token")
            raise AuthExchangeError("Failed to authenticate")

        bundle = CredentialBundle.from_token_response(payload)
        self.token_store.set(bundle)
        logger.info(
            "Stored new credentials (refresh token %s)",
            "present" if bundle.refresh_token else "absent",
        )
        return bundle
