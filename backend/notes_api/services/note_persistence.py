"""
Notes API Backend — Note Persistence Service Interface
========================================================

What:  Abstract base class defining the contract handlers use to store and query notes.
Why:   Handlers depend on this interface only, so storage can be swapped
       (SQLAlchemy today, a remote service or an in-memory fake in tests)
       without touching request handling.
How:   Concrete implementations inherit from NotePersistenceService and
       implement all six coroutines.
Who:   Called by NoteHandler; implemented by SqlAlchemyNoteService.

Error contract:
    Implementations signal failures by raising NotesAPIError subclasses
    (NotFoundError, ForbiddenError, DatabaseError). Handlers
    never catch them; the global exception handler turns each into an error
    envelope with the status the exception carries.
"""

from abc import ABC, abstractmethod
from typing import Any

from notes_api.schemas.note import (
    NoteCreate,
    NoteUpdate,
    PaginatedResult,
    PaginationQuery,
)


class NotePersistenceService(ABC):
    """
    Storage and query operations for user-owned notes.

    Every method is scoped to `user_id`: implementations must never return or
    modify a note owned by someone else.
    """

    @abstractmethod
    async def create_note(self, user_id: str, data: NoteCreate) -> Any:
        """
        Store a new note for `user_id` and return its representation.
        """
        ...

    @abstractmethod
    async def get_user_notes(
        self, user_id: str, pagination: PaginationQuery
    ) -> PaginatedResult:
        """
        Return one window (`pagination.skip`, `pagination.take`) of the user's notes.

        The order is chosen by the implementation.
        """
        ...

    @abstractmethod
    async def search_user_notes(
        self, user_id: str, query: str, pagination: PaginationQuery
    ) -> PaginatedResult:
        """
        Return one window of the user's notes matching `query`.
        """
        ...

    @abstractmethod
    async def get_note_by_id(self, user_id: str, note_id: str) -> Any:
        """
        Return a single note.

        Raises:
            NotFoundError: No note with this id.
            ForbiddenError: The note belongs to another user.
        """
        ...

    @abstractmethod
    async def update_note(self, user_id: str, note_id: str, data: NoteUpdate) -> Any:
        """
        Replace title and content of a note and return the updated representation.
        """
        ...

    @abstractmethod
    async def delete_note(self, user_id: str, note_id: str) -> Any:
        """
        Delete a note and return the representation it had before deletion.
        """
        ...
