"""
Read-only Drive, Docs and Sheets access.
"""

from typing import Any

from core.google_client import GoogleWorkspaceClient
from core.tokens import CredentialBundle

FILE_LIST_FIELDS = "nextPageToken, files(id, name, mimeType, modifiedTime, webViewLink)"


async def list_files(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    query: str | None = None,
    page_size: int | None = None,
    order_by: str | None = None,
    page_token: str | None = None,
) -> dict[str, Any]:
    response = await client.list_files(
        credentials,
        query=query,
        page_size=page_size,
        order_by=order_by,
        page_token=page_token,
        fields=FILE_LIST_FIELDS,
    )
    return {
        "files": response.get("files", []),
        "nextPageToken": response.get("nextPageToken"),
    }


async def get_file(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    file_id: str,
    fields: str | None = None,
) -> dict[str, Any]:
    return await client.get_file(credentials, file_id, fields=fields)


def document_text(document: dict[str, Any]) -> str:
    """Concatenate the text runs of a Docs document body."""
    chunks = []
    body = document.get("body") or {}
    for element in body.get("content") or []:
        paragraph = element.get("paragraph")
        if not paragraph:
            continue
        for part in paragraph.get("elements") or []:
            text_run = part.get("textRun")
            if text_run and text_run.get("content"):
                chunks.append(text_run["content"])
    return "".join(chunks)


async def get_document(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    document_id: str,
) -> dict[str, Any]:
    document = await client.get_document(credentials, document_id)
    return {
        "documentId": document.get("documentId", document_id),
        "title": document.get("title"),
        "text": document_text(document),
    }


async def get_spreadsheet(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    spreadsheet_id: str,
) -> dict[str, Any]:
    spreadsheet = await client.get_spreadsheet(credentials, spreadsheet_id)
    sheets = []
    for sheet in spreadsheet.get("sheets") or []:
        properties = sheet.get("properties") or {}
        sheets.append(
            {
                "sheetId": properties.get("sheetId"),
                "title": properties.get("title"),
                "index": properties.get("index"),
            }
        )
    return {
        "spreadsheetId": spreadsheet.get("spreadsheetId", spreadsheet_id),
        "title": (spreadsheet.get("properties") or {}).get("title"),
        "sheets": sheets,
    }


async def get_sheet_values(
    client: GoogleWorkspaceClient,
    credentials: CredentialBundle,
    spreadsheet_id: str,
    sheet_id: str,
    cell_range: str | None = None,
) -> dict[str, Any]:
    """Read values from a sheet, optionally narrowed to an A1 cell range."""
    a1_range = f"{sheet_id}!{cell_range}" if cell_range else sheet_id
    response = await client.get_sheet_values(credentials, spreadsheet_id, a1_range)
    return {
        "range": response.get("range", a1_range),
        "values": response.get("values", []),
    }
