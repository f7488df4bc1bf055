"""
Read-only Gmail access.
"""

from typing import Any

from core.google_client import GoogleWorkspaceClient
from core.tokens import CredentialBundle

SUMMARY_HEADERS = {"subject", "from", "to", "date"}


def extract_headers(message: dict[str, Any]) -> dict[str, str]:
    """Pull Subject/From/To/Date out of a Gmail message payload."""
    headers = {}
    payload = message.get("payload") or {}
    for header in payload.get("headers") or []:
        name = (header.get("name") or "").lower()
        if name in SUMMARY_HEADERS and name not in headers:
            headers[name] = header.get("value", "")
    return headers


async def list_messages(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    query: str | None = None,
    max_results: int | None = None,
    label_ids: list[str] | None = None,
    page_token: str | None = None,
) -> dict[str, Any]:
    response = await client.list_messages(
        credentials,
        query=query,
        max_results=max_results,
        label_ids=label_ids,
        page_token=page_token,
    )
    return {
        "messages": response.get("messages", []),
        "nextPageToken": response.get("nextPageToken"),
        "resultSizeEstimate": response.get("resultSizeEstimate", 0),
    }


async def get_message(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    message_id: str,
    format: str | None = None,
) -> dict[str, Any]:
    """Fetch a message and surface its summary headers at the top level."""
    message = await client.get_message(credentials, message_id, format=format)
    return {**message, **extract_headers(message)}


async def get_thread(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    thread_id: str,
    format: str | None = None,
) -> dict[str, Any]:
    return await client.get_thread(credentials, thread_id, format=format)
