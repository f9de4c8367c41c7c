"""
Notes API Backend — Route Dependencies
========================================

What:  FastAPI dependency providers that assemble a NoteHandler per request.
Why:   Routes declare what they need; tests swap the persistence service with
       `app.dependency_overrides[get_note_service]`.

Dependency graph:
    get_db_session → get_note_service → get_note_handler → route
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.database import get_db_session
from notes_api.handlers.notes import NoteHandler
from notes_api.services.note_persistence import NotePersistenceService
from notes_api.services.note_service import SqlAlchemyNoteService


async def get_note_service(
    db: AsyncSession = Depends(get_db_session),
) -> NotePersistenceService:
    return SqlAlchemyNoteService(db)


async def get_note_handler(
    note_service: NotePersistenceService = Depends(get_note_service),
) -> NoteHandler:
    return NoteHandler(note_service)
