"""
Notes API Backend — Note SQLAlchemy Model
===========================================

What:  ORM model representing the `notes` table in PostgreSQL.
Why:   Maps Python objects to database rows for the default persistence adapter.
Who:   Used by SqlAlchemyNoteService for CRUD operations and by Alembic.

Table Design:
    - UUID primary key: Non-sequential, cannot be enumerated
    - user_id: Owner of the note; every query filters on it
    - title / content: The user-editable payload
    - created_at / updated_at: UTC with timezone

    Index on (user_id, updated_at DESC):
        Matches the listing query "this user's notes, most recently edited first".
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID, TIMESTAMP

from notes_api.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A user-owned title/content record.

    Timestamps are set on the Python side so they are populated on the
    instance right after flush (no expired attributes to reload).
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        server_default=text("gen_random_uuid()"),
    )

    # Opaque identity issued by the authentication layer (JWT `sub` claim)
    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Owner of the note (authenticated user id)",
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, user_id='{self.user_id}', "
            f"title='{self.title}')>"
        )


Index("idx_notes_user_updated_at", Note.user_id, Note.updated_at.desc())
