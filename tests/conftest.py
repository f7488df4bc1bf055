"""
Pytest configuration and shared fixtures.
"""

import json
import sys
from pathlib import Path
from urllib.parse import unquote

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api.dependencies import get_oauth_flow, get_token_store, get_workspace_client  # noqa: E402
from core.google_client import GoogleWorkspaceClient  # noqa: E402
from core.oauth import OAuthFlow  # noqa: E402
from core.tokens import CredentialBundle, TokenStore  # noqa: E402


class FakeGoogle:
    """httpx transport handler that records requests and serves canned responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], tuple[int, object]] = {}

    def respond(self, method: str, path: str, status_code: int = 200, json_body=None):
        self.routes[(method, path)] = (status_code, json_body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = unquote(request.url.raw_path.decode().split("?")[0])
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"error": {"message": "Not Found"}})
        status_code, json_body = route
        if json_body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=json_body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def fake_google():
    return FakeGoogle()


@pytest.fixture
def http_client(fake_google):
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_google))


@pytest.fixture
def token_store():
    return TokenStore()


@pytest.fixture
def credentials():
    return CredentialBundle(
        access_token="ya29.test-access",
        refresh_token="1//test-refresh",
        expiry_date=1_900_000_000_000,
        scope="https://www.googleapis.com/auth/calendar",
        token_type="Bearer",
    )


@pytest.fixture
def oauth_flow(token_store, http_client):
    return OAuthFlow(
        token_store,
        http_client,
        client_id="client-id.apps.googleusercontent.com",
        client_secret="client-secret",
        redirect_uri="https://bridge.example.com/callback",
    )


@pytest.fixture
def workspace_client(http_client):
    return GoogleWorkspaceClient(http_client)


@pytest.fixture
def api_client(token_store, oauth_flow, workspace_client):
    """TestClient with the token store and upstream clients swapped for fakes."""
    from fastapi.testclient import TestClient

    from api.main import app

    app.dependency_overrides[get_token_store] = lambda: token_store
    app.dependency_overrides[get_oauth_flow] = lambda: oauth_flow
    app.dependency_overrides[get_workspace_client] = lambda: workspace_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def authed_client(api_client, token_store, credentials):
    token_store.set(credentials)
    return api_client
