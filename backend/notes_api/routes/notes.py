"""
Notes API Backend — Notes Route Handlers
==========================================

What:  HTTP surface for notes: create, list, search, get, update, delete.
Why:   Maps verbs and paths onto NoteHandler methods.
How:   Resolves the authenticated user id and a NoteHandler through dependencies,
       then passes the user id to the handler explicitly.

Route Table (prefix from settings.api_prefix, default /api):
    POST    /notes              → create_note   (201)
    GET     /notes              → get_notes     (?page=&limit=)
    GET     /notes/search       → search_notes  (?q=&page=&limit=)
    GET     /notes/{note_id}    → get_note
    PUT     /notes/{note_id}    → update_note
    PATCH   /notes/{note_id}    → update_note
    DELETE  /notes/{note_id}    → delete_note

Why page/limit/q are plain optional strings:
    The handler parses them leniently (bad values fall back to defaults) and
    owns the "Search query is required" check, so FastAPI must not reject
    them with 422 first.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from notes_api.auth import get_current_user_id
from notes_api.config import settings
from notes_api.dependencies import get_note_handler
from notes_api.handlers.notes import NoteHandler
from notes_api.schemas.note import (
    ApiResponse,
    ErrorResponse,
    NoteCreate,
    NoteUpdate,
    PaginatedResponse,
)

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(
    prefix=f"{settings.api_prefix}/notes",
    tags=["Notes"],
    responses={
        401: {"description": "Not authenticated", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
)

_note_responses = {
    400: {"description": "Missing note id or invalid body", "model": ErrorResponse},
    403: {"description": "Note belongs to another user", "model": ErrorResponse},
    404: {"description": "Note not found", "model": ErrorResponse},
}

PageParam = Annotated[Optional[str], Query(description="Page number (≥ 1, default 1)")]
LimitParam = Annotated[Optional[str], Query(description="Items per page (≥ 1, default 10)")]


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Invalid body", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    user_id: str = Depends(get_current_user_id),
    handler: NoteHandler = Depends(get_note_handler),
) -> ApiResponse:
    return await handler.create_note(user_id, payload)


@router.get(
    "",
    response_model=PaginatedResponse,
    summary="List the current user's notes",
)
async def get_notes(
    page: PageParam = None,
    limit: LimitParam = None,
    user_id: str = Depends(get_current_user_id),
    handler: NoteHandler = Depends(get_note_handler),
) -> PaginatedResponse:
    return await handler.get_notes(user_id, page, limit)


# Registered before /notes/{note_id} so "search" is not captured as an id
@router.get(
    "/search",
    response_model=PaginatedResponse,
    responses={400: {"description": "Missing search query", "model": ErrorResponse}},
    summary="Search the current user's notes",
)
async def search_notes(
    q: Optional[str] = Query(default=None, description="Text to search for in title or content"),
    page: PageParam = None,
    limit: LimitParam = None,
    user_id: str = Depends(get_current_user_id),
    handler: NoteHandler = Depends(get_note_handler),
) -> PaginatedResponse:
    return await handler.search_notes(user_id, q, page, limit)


@router.get(
    "/{note_id}",
    response_model=ApiResponse,
    responses=_note_responses,
    summary="Get a single note",
)
async def get_note(
    note_id: str,
    user_id: str = Depends(get_current_user_id),
    handler: NoteHandler = Depends(get_note_handler),
) -> ApiResponse:
    return await handler.get_note(user_id, note_id)


@router.put(
    "/{note_id}",
    response_model=ApiResponse,
    responses=_note_responses,
    summary="Update a note",
)
@router.patch(
    "/{note_id}",
    response_model=ApiResponse,
    responses=_note_responses,
    summary="Update a note",
)
async def update_note(
    note_id: str,
    payload: NoteUpdate,
    user_id: str = Depends(get_current_user_id),
    handler: NoteHandler = Depends(get_note_handler),
) -> ApiResponse:
    return await handler.update_note(user_id, note_id, payload)


@router.delete(
    "/{note_id}",
    response_model=ApiResponse,
    responses=_note_responses,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    user_id: str = Depends(get_current_user_id),
    handler: NoteHandler = Depends(get_note_handler),
) -> ApiResponse:
    return await handler.delete_note(user_id, note_id)
