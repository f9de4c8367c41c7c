"""
Notes API Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between clients and backend.
Why:   Strict input validation, automatic serialization, and OpenAPI doc generation.
How:   FastAPI validates request bodies against NoteCreate/NoteUpdate; handlers
       build ApiResponse/PaginatedResponse envelopes; the persistence service
       speaks PaginationQuery/PaginatedResult.

Naming:
    Python attributes are snake_case. JSON keys are camelCase through an alias
    generator (currentPage, totalPages, hasNext, ...), and FastAPI serializes
    response models by alias.
"""

import uuid
from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for models serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends in the body
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """
    What:  Body of POST /api/notes.
    Why:   Both fields are required; FastAPI rejects the request with 400
           (via the validation handler in main.py) before any handler runs.
    """
    title: str = Field(min_length=1, max_length=255, description="Note title")
    content: str = Field(min_length=1, description="Note body")

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Rejects whitespace-only values."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class NoteUpdate(NoteCreate):
    """Body of PUT/PATCH /api/notes/{id}; same shape as NoteCreate."""


# ══════════════════════════════════════════════════════════════════════════
# Note Representation — What the default persistence adapter returns
# ══════════════════════════════════════════════════════════════════════════


class NoteRead(CamelModel):
    """
    What:  Full representation of a stored note.
    Who:   Returned by SqlAlchemyNoteService; handlers treat it as opaque payload.
    """
    id: uuid.UUID = Field(description="Unique note identifier (UUID)")
    user_id: str = Field(description="Owner of the note")
    title: str
    content: str
    created_at: datetime = Field(description="When the note was created (UTC)")
    updated_at: datetime = Field(description="When the note was last edited (UTC)")

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# ══════════════════════════════════════════════════════════════════════════
# Pagination — Contract between handlers and the persistence service
# ══════════════════════════════════════════════════════════════════════════


class PaginationQuery(BaseModel):
    """
    What:  Normalized page/limit pair plus the skip/take window derived from it.

    Example:
        page=2, limit=5 → skip=5, take=5
    """
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def take(self) -> int:
        return self.limit


class PaginatedResult(BaseModel, Generic[T]):
    """
    What:  One window of results as reported by the persistence service.

    `page` and `total_pages` are optional: a service may not compute them,
    in which case hasNext/hasPrev are reported as false.
    """
    data: List[T] = Field(default_factory=list)
    page: Optional[int] = None
    total_pages: Optional[int] = None
    total: int = 0
    limit: Optional[int] = None


# ══════════════════════════════════════════════════════════════════════════
# Response Envelopes — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class PaginationMeta(CamelModel):
    """Pagination block attached to list and search responses."""
    current_page: Optional[int] = None
    total_pages: Optional[int] = None
    total_items: int = 0
    items_per_page: Optional[int] = None
    has_next: bool = False
    has_prev: bool = False


class ApiResponse(CamelModel):
    """
    What:  Success envelope: {status, message, data}.

    `data` is whatever the persistence service returned, untouched.
    """
    status: int = Field(description="HTTP status code of the response")
    message: str = Field(description="Human-readable success message")
    data: Any = None


class PaginatedResponse(ApiResponse):
    """Success envelope for list endpoints: {status, message, data, pagination}."""
    pagination: PaginationMeta


# ══════════════════════════════════════════════════════════════════════════
# Error Response Models — Consistent error format across all endpoints
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(CamelModel):
    """
    What:  Standardized error envelope produced by the global exception handlers.

    Example:
        {
            "status": 400,
            "error": "validation_error",
            "message": "Search query is required",
            "details": {"field": "q"},
            "requestId": "550e8400"
        }
    """
    status: int = Field(description="HTTP status code")
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
