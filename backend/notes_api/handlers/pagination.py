"""
Notes API Backend — Pagination Parameter Parsing
==================================================

What:  Turns raw `page` / `limit` query strings into a PaginationQuery.
Why:   Clients send anything: "2", "", "abc", "-1". Bad values fall back to
       the defaults instead of failing the request.

Rules:
    page:  integer ≥ 1, otherwise 1; capped at MAX_PAGE so OFFSET stays
           inside a 64-bit integer for any limit
    limit: integer ≥ 1, otherwise settings.default_page_size (10);
           capped at settings.max_page_size (100)

Example:
    parse_pagination("2", "5")     → page=2, limit=5  (skip=5, take=5)
    parse_pagination(None, None)   → page=1, limit=10 (skip=0, take=10)
    parse_pagination("abc", "0")   → page=1, limit=10
"""

from typing import Optional, Union

from notes_api.config import settings
from notes_api.schemas.note import PaginationQuery

RawParam = Optional[Union[str, int]]

MAX_PAGE = 2**31 - 1


def _positive_int(value: RawParam, default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed >= 1 else default


def parse_pagination(page: RawParam = None, limit: RawParam = None) -> PaginationQuery:
    """Build a PaginationQuery from raw query values."""
    parsed_page = min(_positive_int(page, 1), MAX_PAGE)
    parsed_limit = min(
        _positive_int(limit, settings.default_page_size),
        settings.max_page_size,
    )
    return PaginationQuery(page=parsed_page, limit=parsed_limit)
