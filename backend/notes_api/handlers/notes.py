"""
Notes API Backend — Note Request Handler
==========================================

What:  The six note operations behind the HTTP routes.
Why:   Keeps identity checks, presence checks and envelope shaping out of the
       routes and out of the persistence service.
How:   Each method:
         1. requires an authenticated user id (passed in explicitly)
         2. checks required path/query parameters
         3. delegates to the NotePersistenceService
         4. wraps the result in a success envelope

Failure Semantics:
    Nothing is caught here. AuthenticationError and ValidationError are raised
    before the service is called; errors raised by the service (not found,
    forbidden, database failure) propagate unchanged to the global exception
    handler, which keeps their message and status.
"""

import logging
from typing import Optional

from fastapi import status

from notes_api.exceptions import AuthenticationError, ValidationError
from notes_api.handlers.pagination import RawParam, parse_pagination
from notes_api.handlers.responses import build_paginated_response, build_response
from notes_api.schemas.note import (
    ApiResponse,
    NoteCreate,
    NoteUpdate,
    PaginatedResponse,
)
from notes_api.services.note_persistence import NotePersistenceService

logger = logging.getLogger(__name__)


class NoteHandler:
    """
    Request handling for notes.

    Stateless apart from the injected service; a new instance per request is
    cheap and is what the route dependencies create.
    """

    def __init__(self, note_service: NotePersistenceService):
        self.note_service = note_service

    async def create_note(self, user_id: Optional[str], payload: NoteCreate) -> ApiResponse:
        """Create a note for the user. 201 with the stored note."""
        user_id = self._require_user(user_id)

        note = await self.note_service.create_note(user_id, payload)

        logger.info("Note created for user %s", user_id)
        return build_response(status.HTTP_201_CREATED, "Note created successfully", note)

    async def get_notes(
        self,
        user_id: Optional[str],
        page: RawParam = None,
        limit: RawParam = None,
    ) -> PaginatedResponse:
        """List the user's notes, one page at a time, in service order."""
        user_id = self._require_user(user_id)
        pagination = parse_pagination(page, limit)

        result = await self.note_service.get_user_notes(user_id, pagination)

        logger.info(
            "Listed notes for user %s (page=%d, limit=%d, total=%d)",
            user_id, pagination.page, pagination.limit, result.total,
        )
        return build_paginated_response(
            status.HTTP_200_OK, "Notes retrieved successfully", result
        )

    async def search_notes(
        self,
        user_id: Optional[str],
        query: Optional[str],
        page: RawParam = None,
        limit: RawParam = None,
    ) -> PaginatedResponse:
        """Search the user's notes. An empty query is rejected with 400."""
        user_id = self._require_user(user_id)
        if not query or not query.strip():
            raise ValidationError(message="Search query is required", field="q")
        pagination = parse_pagination(page, limit)

        result = await self.note_service.search_user_notes(user_id, query, pagination)

        logger.info(
            "Searched notes for user %s (page=%d, limit=%d, matches=%d)",
            user_id, pagination.page, pagination.limit, result.total,
        )
        return build_paginated_response(
            status.HTTP_200_OK, "Notes search completed successfully", result
        )

    async def get_note(self, user_id: Optional[str], note_id: Optional[str]) -> ApiResponse:
        user_id = self._require_user(user_id)
        note_id = self._require_note_id(note_id)

        note = await self.note_service.get_note_by_id(user_id, note_id)

        return build_response(status.HTTP_200_OK, "Note retrieved successfully", note)

    async def update_note(
        self,
        user_id: Optional[str],
        note_id: Optional[str],
        payload: NoteUpdate,
    ) -> ApiResponse:
        user_id = self._require_user(user_id)
        note_id = self._require_note_id(note_id)

        note = await self.note_service.update_note(user_id, note_id, payload)

        logger.info("Note %s updated by user %s", note_id, user_id)
        return build_response(status.HTTP_200_OK, "Note updated successfully", note)

    async def delete_note(self, user_id: Optional[str], note_id: Optional[str]) -> ApiResponse:
        user_id = self._require_user(user_id)
        note_id = self._require_note_id(note_id)

        note = await self.note_service.delete_note(user_id, note_id)

        logger.info("Note %s deleted by user %s", note_id, user_id)
        return build_response(status.HTTP_200_OK, "Note deleted successfully", note)

    # ── Checks ────────────────────────────────────────────────────────────

    @staticmethod
    def _require_user(user_id: Optional[str]) -> str:
        if not user_id:
            raise AuthenticationError()
        return user_id

    @staticmethod
    def _require_note_id(note_id: Optional[str]) -> str:
        if not note_id or not isinstance(note_id, str) or not note_id.strip():
            raise ValidationError(message="Note ID is required", field="id")
        return note_id
