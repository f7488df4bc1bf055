"""Drive, Docs and Sheets pass-through endpoints."""

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_workspace_client, require_credentials
from core.google_client import GoogleWorkspaceClient
from core.tokens import CredentialBundle
from services import drive

router = APIRouter()


@router.get("/drive/files")
async def list_files(
    q: str | None = None,
    page_size: int | None = Query(None, alias="pageSize", ge=1, le=1000),
    order_by: str | None = Query(None, alias="orderBy"),
    page_token: str | None = Query(None, alias="pageToken"),
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    result = await drive.list_files(
        client,
        credentials,
        query=q,
        page_size=page_size,
        order_by=order_by,
        page_token=page_token,
    )
    return {"success": True, **result}


@router.get("/drive/files/{file_id}")
async def get_file(
    file_id: str,
    fields: str | None = None,
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    file = await drive.get_file(client, credentials, file_id, fields=fields)
    return {"success": True, "file": file}


@router.get("/docs/{document_id}")
async def get_document(
    document_id: str,
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    """Return a document's title and plain text."""
    document = await drive.get_document(client, credentials, document_id)
    return {"success": True, "document": document}


@router.get("/sheets/{spreadsheet_id}")
async def get_spreadsheet(
    spreadsheet_id: str,
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    """Return spreadsheet metadata and its sheet list."""
    spreadsheet = await drive.get_spreadsheet(client, credentials, spreadsheet_id)
    return {"success": True, "spreadsheet": spreadsheet}


@router.get("/sheets/{spreadsheet_id}/{sheet_id}")
async def get_sheet_values(
    spreadsheet_id: str,
    sheet_id: str,
    cell_range: str | None = Query(None, alias="range"),
    credentials: CredentialBundle = Depends(require_credentials),
    client: GoogleWorkspaceClient = Depends(get_workspace_client),
):
    """Return cell values of a sheet, e.g. /sheets/<id>/Sheet1?range=A1:D10."""
    result = await drive.get_sheet_values(
        client, credentials, spreadsheet_id, sheet_id, cell_range
    )
    return {"success": True, **result}
