"""
Notes API Backend — Application Package Initializer
====================================================

What: Marks the `notes_api` directory as a Python package.
Why:  Enables module imports like `from notes_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Handlers (Request Handling)    │  ← Presence checks, envelopes
    ├─────────────────────────────────────┤
    │   Services (Note Persistence API)   │  ← Storage, queries, pagination
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    - Routes resolve the authenticated user and wire dependencies
    - Handlers receive the user id explicitly and never touch the database
    - Services hide storage behind the NotePersistenceService interface
    - Errors are raised as exceptions and translated once, in main.py
"""

__version__ = "1.0.0"
