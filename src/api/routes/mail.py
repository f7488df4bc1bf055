"""Gmail pass-through endpoints."""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_workspace_client, require_credentials
from core.google_client import GoogleWorkspaceClient
from core.tokens import CredentialBundle
from services import mail

router = APIRouter(prefix="/mail")


@router.get("")
async def list_messages(
    q: str | None = None,
    max_results: int | None = Query(None, alias="maxResults", ge=1, le=500),
    label_ids: list[str] | None = Query(None, alias="labelIds"),
    page_token: str | None = Query(None, alias="pageToken"),
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    result = await mail.list_messages(
        client,
        credentials,
        query=q,
        max_results=max_results,
        label_ids=label_ids,
        page_token=page_token,
    )
    return {"success": True, **result}


@router.get("/threads/{thread_id}")
async def get_thread(
    thread_id: str,
    format: str | None = None,
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    thread = await mail.get_thread(client, credentials, thread_id, format=format)
    return {"success": True, "thread": thread}


@router.get("/{message_id}")
async def get_message(
    message_id: str,
    format: str | None = None,
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    message = await mail.get_message(client, credentials, message_id, format=format)
    return {"success": True, "message": message}
