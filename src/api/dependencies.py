"""FastAPI dependencies for authentication and shared resources."""

from fastapi import Depends, Request

from core.errors import AuthenticationRequiredError
from core.google_client import GoogleWorkspaceClient
from core.oauth import OAuthFlow
from core.tokens import CredentialBundle, TokenStore


def get_token_store(request: Request) -> TokenStore:
    """Process-wide token store created at startup."""
    return request.app.state.token_store


def get_oauth_flow(request: Request) -> OAuthFlow:
    return request.app.state.oauth_flow


def get_workspace_client(request: Request) -> GoogleWorkspaceClient:
    return request.app.state.workspace_client


def require_credentials(
    token_store: TokenStore = Depends(get_token_store),
) -> CredentialBundle:
    """
    Return the stored credential bundle.

    Raises:
        AuthenticationRequiredError: 401 if no bundle has been stored
    """
    credentials = token_store.get()
    if credentials is None:
        raise AuthenticationRequiredError()
    return credentials
