"""
Notes API Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (mocked persistence service,
       mocked DB session, authenticated API client).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Overview:
    ├── mock_note_service: AsyncMock implementing NotePersistenceService
    ├── note_handler: NoteHandler wired to mock_note_service
    ├── mock_db_session: Mock AsyncSession (no real DB needed)
    ├── sample_note: A NoteRead owned by TEST_USER_ID
    ├── auth_headers: Bearer token for TEST_USER_ID
    └── test_client: HTTPX AsyncClient with the service dependency overridden
"""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

# Override settings for testing BEFORE any application imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["JWT_SECRET"] = "test-secret-not-real"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from notes_api.auth import create_access_token
from notes_api.handlers.notes import NoteHandler
from notes_api.schemas.note import NoteRead
from notes_api.services.note_persistence import NotePersistenceService

TEST_USER_ID = "user-123"


@pytest.fixture
def mock_note_service():
    """
    A NotePersistenceService whose six coroutines are AsyncMocks.

    Usage:
        mock_note_service.get_note_by_id.return_value = sample_note
        mock_note_service.get_note_by_id.side_effect = NotFoundError(...)
    """
    return AsyncMock(spec=NotePersistenceService)


@pytest.fixture
def note_handler(mock_note_service):
    return NoteHandler(mock_note_service)


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = note
        result = await SqlAlchemyNoteService(mock_db_session).get_note_by_id(...)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.delete = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_note():
    now = datetime.now(timezone.utc)
    return NoteRead(
        id=uuid4(),
        user_id=TEST_USER_ID,
        title="Groceries",
        content="Milk, eggs, bread",
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {create_access_token(TEST_USER_ID)}"}


@pytest_asyncio.fixture
async def test_client(mock_note_service):
    """
    Provides an async HTTP test client for endpoint testing.

    The persistence service dependency is replaced by mock_note_service, so
    no database is touched. raise_app_exceptions=False lets tests observe the
    500 envelope produced for unexpected errors.
    """
    from notes_api.dependencies import get_note_service
    from notes_api.main import app

    app.dependency_overrides[get_note_service] = lambda: mock_note_service
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
