"""
Google Workspace REST client with a shared httpx connection pool.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from core.config import (
    CALENDAR_API_BASE_URL,
    CALENDAR_ID,
    DOCS_API_BASE_URL,
    DRIVE_API_BASE_URL,
    GMAIL_API_BASE_URL,
    SHEETS_API_BASE_URL,
    UPSTREAM_TIMEOUT_SECONDS,
)
from core.errors import UpstreamApiError
from core.tokens import CredentialBundle

logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    """Create the shared HTTP client used for all Google calls."""
    return httpx.AsyncClient(timeout=httpx.Timeout(UPSTREAM_TIMEOUT_SECONDS))


def safe_error_message(response: httpx.Response) -> str:
    """Extract a short, single-line error message from a Google error response."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        error_payload = payload.get("error")
        if isinstance(error_payload, dict):
            message = error_payload.get("message")
            if isinstance(message, str) and message.strip():
                return " ".join(message.split())[:200]
        if isinstance(error_payload, str) and error_payload.strip():
            description = payload.get("error_description")
            if isinstance(description, str) and description.strip():
                return " ".join(f"{error_payload}: {description}".split())[:200]
            return " ".join(error_payload.split())[:200]

    raw_text = response.text.strip()
    if raw_text:
        return " ".join(raw_text.split())[:200]
    return "Request failed without an error payload"


def _drop_none(params: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in params.items() if value is not None}


class GoogleWorkspaceClient:
    """
    Forwards calls to the Calendar, Gmail, Drive, Docs and Sheets APIs.

    Every call is authorized with the access token of the bundle passed in.
    Network failures and non-2xx responses raise UpstreamApiError.
    """

    def __init__(self, http_client: httpx.AsyncClient):
        self._http = http_client

    async def _request(
        self,
        method: str,
        url: str,
        credentials: CredentialBundle,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {credentials.access_token}",
            "Accept": "application/json",
        }
        try:
            response = await self._http.request(
                method,
                url,
                params=_drop_none(params or {}),
                json=json_body,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            logger.error("Google API request %s %s failed: %s", method, url, exc)
            raise UpstreamApiError(f"Google API request failed: {exc}") from exc

        if response.status_code < 200 or response.status_code >= 300:
            message = safe_error_message(response)
            logger.error(
                "Google API %s %s returned %s: %s",
                method,
                url,
                response.status_code,
                message,
            )
            raise UpstreamApiError(
                f"Google API request failed ({response.status_code}): {message}",
                upstream_status=response.status_code,
            )

        # DELETE answers 204 with an empty body
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamApiError("Google API returned invalid JSON") from exc

    # -------------------------------------------------------------------------
    # Calendar
    # -------------------------------------------------------------------------

    def _events_url(self, event_id: str | None = None) -> str:
        url = f"{CALENDAR_API_BASE_URL}/calendars/{quote(CALENDAR_ID, safe='')}/events"
        if event_id is not None:
            url += f"/{quote(event_id, safe='')}"
        return url

    async def list_events(
        self,
        credentials: CredentialBundle,
        *,
        time_min: str,
        max_results: int,
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            self._events_url(),
            credentials,
            params={
                "timeMin": time_min,
                "maxResults": max_results,
                "singleEvents": "true",
                "orderBy": "startTime",
            },
        )

    async def insert_event(
        self, credentials: CredentialBundle, event: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._request("POST", self._events_url(), credentials, json_body=event)

    async def patch_event(
        self, credentials: CredentialBundle, event_id: str, patch: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._request(
            "PATCH", self._events_url(event_id), credentials, json_body=patch
        )

    async def delete_event(self, credentials: CredentialBundle, event_id: str) -> None:
        await self._request("DELETE", self._events_url(event_id), credentials)

    # -------------------------------------------------------------------------
    # Gmail
    # -------------------------------------------------------------------------

    async def list_messages(
        self,
        credentials: CredentialBundle,
        *,
        query: str | None = None,
        max_results: int | None = None,
        label_ids: list[str] | None = None,
        page_token: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"{GMAIL_API_BASE_URL}/users/me/messages",
            credentials,
            params={
                "q": query,
                "maxResults": max_results,
                "labelIds": label_ids or None,
                "pageToken": page_token,
            },
        )

    async def get_message(
        self, credentials: CredentialBundle, message_id: str, *, format: str | None = None
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"{GMAIL_API_BASE_URL}/users/me/messages/{quote(message_id, safe='')}",
            credentials,
            params={"format": format},
        )

    async def get_thread(
        self, credentials: CredentialBundle, thread_id: str, *, format: str | None = None
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"{GMAIL_API_BASE_URL}/users/me/threads/{quote(thread_id, safe='')}",
            credentials,
            params={"format": format},
        )

    # -------------------------------------------------------------------------
    # Drive
    # -------------------------------------------------------------------------

    async def list_files(
        self,
        credentials: CredentialBundle,
        *,
        query: str | None = None,
        page_size: int | None = None,
        order_by: str | None = None,
        page_token: str | None = None,
        fields: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"{DRIVE_API_BASE_URL}/files",
            credentials,
            params={
                "q": query,
                "pageSize": page_size,
                "orderBy": order_by,
                "pageToken": page_token,
                "fields": fields,
            },
        )

    async def get_file(
        self, credentials: CredentialBundle, file_id: str, *, fields: str | None = None
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"{DRIVE_API_BASE_URL}/files/{quote(file_id, safe='')}",
            credentials,
            params={"fields": fields},
        )

    # -------------------------------------------------------------------------
    # Docs / Sheets
    # -------------------------------------------------------------------------

    async def get_document(
        self, credentials: CredentialBundle, document_id: str
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"{DOCS_API_BASE_URL}/documents/{quote(document_id, safe='')}",
            credentials,
        )

    async def get_spreadsheet(
        self, credentials: CredentialBundle, spreadsheet_id: str
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"{SHEETS_API_BASE_URL}/spreadsheets/{quote(spreadsheet_id, safe='')}",
            credentials,
        )

    async def get_sheet_values(
        self, credentials: CredentialBundle, spreadsheet_id: str, a1_range: str
    ) -> dict[str, Any]:
        return await self._request(
            "GET",
            f"{SHEETS_API_BASE_URL}/spreadsheets/{quote(spreadsheet_id, safe='')}"
            f"/values/{quote(a1_range, safe='')}",
            credentials,
        )
