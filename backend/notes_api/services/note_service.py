"""
Notes API Backend — SQLAlchemy Note Persistence Service
=========================================================

What:  Default NotePersistenceService backed by the `notes` table.
Why:   Lets the API run end to end; handlers only see the interface.
How:   One instance per request, bound to that request's AsyncSession.
       The session dependency commits or rolls back after the response.
Who:   Built by notes_api.dependencies.get_note_service.

Ownership:
    Lookups by id fetch the row first, then compare its owner:
    - no row (or a malformed id)   → NotFoundError (404)
    - row owned by another user    → ForbiddenError (403)

Pagination:
    OFFSET/LIMIT windows plus a COUNT(*) with the same filter. The page
    number reported back is derived from skip/take:
        page        = skip // take + 1
        total_pages = ceil(total / take)
"""

import logging
import math
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import desc, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.exceptions import DatabaseError, ForbiddenError, NotFoundError
from notes_api.models.note import Note
from notes_api.schemas.note import (
    NoteCreate,
    NoteRead,
    NoteUpdate,
    PaginatedResult,
    PaginationQuery,
)
from notes_api.services.note_persistence import NotePersistenceService

logger = logging.getLogger(__name__)


class SqlAlchemyNoteService(NotePersistenceService):
    """
    Note storage on top of async SQLAlchemy.

    Error Handling Strategy:
        NotFoundError and ForbiddenError are raised directly. Any SQLAlchemyError
        is logged with its type and wrapped in DatabaseError, so no SQL or
        schema detail reaches the client.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_note(self, user_id: str, data: NoteCreate) -> NoteRead:
        try:
            note = Note(user_id=user_id, title=data.title, content=data.content)
            self.db.add(note)
            await self.db.flush()  # Assigns defaults without committing
            logger.info("Note record created: %s (user=%s)", note.id, user_id)
            return NoteRead.model_validate(note)
        except SQLAlchemyError as e:
            logger.error("Database error creating note for %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Could not create the note. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def get_user_notes(
        self, user_id: str, pagination: PaginationQuery
    ) -> PaginatedResult[NoteRead]:
        return await self._paginate(user_id, pagination)

    async def search_user_notes(
        self, user_id: str, query: str, pagination: PaginationQuery
    ) -> PaginatedResult[NoteRead]:
        return await self._paginate(user_id, pagination, search=query)

    async def get_note_by_id(self, user_id: str, note_id: str) -> NoteRead:
        note = await self._get_owned_note(user_id, note_id)
        return NoteRead.model_validate(note)

    async def update_note(self, user_id: str, note_id: str, data: NoteUpdate) -> NoteRead:
        note = await self._get_owned_note(user_id, note_id)
        try:
            note.title = data.title
            note.content = data.content
            note.updated_at = datetime.now(timezone.utc)
            await self.db.flush()
            logger.info("Note %s updated (user=%s)", note.id, user_id)
            return NoteRead.model_validate(note)
        except SQLAlchemyError as e:
            logger.error("Database error updating note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not update the note. Please try again.",
                context={"note_id": note_id},
            )

    async def delete_note(self, user_id: str, note_id: str) -> NoteRead:
        note = await self._get_owned_note(user_id, note_id)
        # Snapshot before the row (and the instance state) goes away
        snapshot = NoteRead.model_validate(note)
        try:
            await self.db.delete(note)
            await self.db.flush()
            logger.info("Note %s deleted (user=%s)", note_id, user_id)
            return snapshot
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not delete the note. Please try again.",
                context={"note_id": note_id},
            )

    # ── Internals ─────────────────────────────────────────────────────────

    async def _get_owned_note(self, user_id: str, note_id: str) -> Note:
        """
        Fetch a note by id and check it belongs to `user_id`.

        Query plan:
            SELECT * FROM notes WHERE id = :uuid  → primary key lookup
        """
        try:
            note_uuid = UUID(str(note_id))
        except ValueError:
            # A malformed id can never match a row
            raise NotFoundError(resource="note", resource_id=str(note_id))

        try:
            result = await self.db.execute(select(Note).where(Note.id == note_uuid))
            note = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note. Please try again.",
                context={"note_id": str(note_id)},
            )

        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))

        if note.user_id != user_id:
            logger.warning(
                "User %s attempted to access note %s owned by another user",
                user_id,
                note_id,
            )
            raise ForbiddenError(message="You do not have permission to access this note")

        return note

    async def _paginate(
        self,
        user_id: str,
        pagination: PaginationQuery,
        search: Optional[str] = None,
    ) -> PaginatedResult[NoteRead]:
        """
        Run the window query and the matching COUNT(*) query.

        Search is a case-insensitive substring match on title or content;
        results are ordered by last edit, newest first, in both cases.
        """
        filters = [Note.user_id == user_id]
        if search:
            # autoescape: % and _ in the query match themselves
            filters.append(
                or_(
                    Note.title.icontains(search, autoescape=True),
                    Note.content.icontains(search, autoescape=True),
                )
            )

        try:
            items_query = (
                select(Note)
                .where(*filters)
                .order_by(desc(Note.updated_at), desc(Note.created_at))
                .offset(pagination.skip)
                .limit(pagination.take)
            )
            result = await self.db.execute(items_query)
            notes = list(result.scalars().all())

            count_result = await self.db.execute(
                select(func.count(Note.id)).where(*filters)
            )
            total = count_result.scalar() or 0
        except SQLAlchemyError as e:
            logger.error("Database error listing notes for %s: %s", user_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes. Please try again.",
                context={"error_type": type(e).__name__},
            )

        return PaginatedResult[NoteRead](
            data=[NoteRead.model_validate(note) for note in notes],
            page=pagination.skip // pagination.take + 1,
            total_pages=math.ceil(total / pagination.take),
            total=total,
            limit=pagination.take,
        )
