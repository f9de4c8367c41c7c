"""
Notes API Backend — Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Each exception carries its own HTTP status and machine-readable code, so
       errors raised anywhere (handlers, persistence service, auth) reach the
       client with the status chosen where they were raised.
How:   Each exception class carries a message and optional context dict.
       The global exception handler (registered in main.py) catches the base
       class and returns a structured JSON error envelope.
Who:   Raised by handlers, services and the auth dependency; caught by main.py.

Exception Hierarchy:
    NotesAPIError (base)     → 500 server_error
    ├── ValidationError      → 400 Bad Request (client can fix)
    ├── AuthenticationError  → 401 Unauthorized (no or bad identity)
    ├── ForbiddenError       → 403 Forbidden (note owned by another user)
    ├── NotFoundError        → 404 Not Found
    └── DatabaseError        → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info
        status_code:  HTTP status used by the error translator
        error_code:   Machine-readable code placed in the error envelope
    """

    status_code: int = 500
    error_code: str = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.context = context or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(NotesAPIError):
    """
    Raised when client input fails a presence or format check.

    When:    Missing note id, empty search query, invalid request body.
    HTTP:    400 Bad Request

    Example response:
        {
            "status": 400,
            "error": "validation_error",
            "message": "Note ID is required",
            "details": {"field": "id"}
        }
    """

    status_code = 400
    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthenticationError(NotesAPIError):
    """
    Raised when no authenticated user can be resolved for the request.

    When:    Missing Authorization header, bad/expired token, token without `sub`,
             or a handler called without a user id.
    HTTP:    401 Unauthorized
    """

    status_code = 401
    error_code = "unauthorized"

    def __init__(
        self,
        message: str = "User not authenticated",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(NotesAPIError):
    """
    Raised when the authenticated user may not touch the requested resource.

    HTTP:    403 Forbidden
    """

    status_code = 403
    error_code = "forbidden"

    def __init__(
        self,
        message: str = "You do not have permission to access this resource",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(NotesAPIError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/notes/{id} with an unknown or malformed id.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records (not an exception).
    The persistence service converts None → NotFoundError.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(NotesAPIError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, deadlock, etc.
    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic.
        Detailed error info (SQL query, constraint name, etc.) is logged
        server-side only, never exposed to the API consumer.
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
