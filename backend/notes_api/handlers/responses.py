"""
Notes API Backend — Response Envelope Builders
================================================

What:  Stateless helpers that wrap handler results in the API's success envelopes.
Why:   Every endpoint answers with the same shape; handlers call these
       functions instead of inheriting formatting behavior from a base class.

Envelopes:
    {status, message, data}
    {status, message, data, pagination: {currentPage, totalPages, totalItems,
                                         itemsPerPage, hasNext, hasPrev}}
"""

from typing import Any

from notes_api.schemas.note import (
    ApiResponse,
    PaginatedResponse,
    PaginatedResult,
    PaginationMeta,
)


def build_response(status: int, message: str, data: Any = None) -> ApiResponse:
    """Wrap a single payload; `data` is passed through untouched."""
    return ApiResponse(status=status, message=message, data=data)


def build_pagination_meta(result: PaginatedResult) -> PaginationMeta:
    """
    Derive the pagination block from a service result.

    hasNext / hasPrev are only meaningful when the service reported a page;
    without one (or with page 0) both are false.
    """
    page = result.page
    if page:
        has_next = result.total_pages is not None and page < result.total_pages
        has_prev = page > 1
    else:
        has_next = has_prev = False

    return PaginationMeta(
        current_page=page,
        total_pages=result.total_pages,
        total_items=result.total,
        items_per_page=result.limit,
        has_next=has_next,
        has_prev=has_prev,
    )


def build_paginated_response(
    status: int, message: str, result: PaginatedResult
) -> PaginatedResponse:
    """Wrap one page of results together with its pagination block."""
    return PaginatedResponse(
        status=status,
        message=message,
        data=result.data,
        pagination=build_pagination_meta(result),
    )
