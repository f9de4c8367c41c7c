"""
Notes API Backend — Pagination Unit Tests
===========================================

What:  Tests for parse_pagination and the pagination block builder.

What we test:
    ✅ Defaults (page=1, limit=10 → skip=0, take=10)
    ✅ Garbage, zero and negative values fall back to defaults
    ✅ limit is capped at settings.max_page_size, page at MAX_PAGE
    ✅ hasNext / hasPrev boundaries
"""

import pytest

from notes_api.config import settings
from notes_api.handlers.pagination import MAX_PAGE, parse_pagination
from notes_api.handlers.responses import build_pagination_meta, build_paginated_response
from notes_api.schemas.note import PaginatedResult


class TestParsePagination:

    def test_defaults(self):
        query = parse_pagination()
        assert (query.page, query.limit) == (1, 10)
        assert (query.skip, query.take) == (0, 10)

    def test_explicit_values(self):
        query = parse_pagination("2", "5")
        assert (query.skip, query.take) == (5, 5)

    def test_accepts_integers(self):
        query = parse_pagination(3, 20)
        assert (query.skip, query.take) == (40, 20)

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-3", "1.5"])
    def test_invalid_values_fall_back_to_defaults(self, raw):
        query = parse_pagination(raw, raw)
        assert (query.page, query.limit) == (1, 10)

    def test_limit_is_capped(self):
        query = parse_pagination("1", str(settings.max_page_size + 1))
        assert query.limit == settings.max_page_size

    def test_huge_page_is_capped(self):
        query = parse_pagination(str(10**20), "100")
        assert query.page == MAX_PAGE
        assert query.skip < 2**63


class TestPaginationMeta:

    def test_example_second_of_three_pages(self):
        meta = build_pagination_meta(
            PaginatedResult(data=[], page=2, total_pages=3, total=12, limit=5)
        )
        assert meta.has_next is True
        assert meta.has_prev is True

    def test_first_page(self):
        meta = build_pagination_meta(
            PaginatedResult(data=[], page=1, total_pages=3, total=12, limit=5)
        )
        assert (meta.has_next, meta.has_prev) == (True, False)

    def test_last_page(self):
        meta = build_pagination_meta(
            PaginatedResult(data=[], page=3, total_pages=3, total=12, limit=5)
        )
        assert (meta.has_next, meta.has_prev) == (False, True)

    @pytest.mark.parametrize("page", [None, 0])
    def test_absent_page_disables_both_flags(self, page):
        meta = build_pagination_meta(
            PaginatedResult(data=[], page=page, total_pages=3, total=12, limit=5)
        )
        assert (meta.has_next, meta.has_prev) == (False, False)

    def test_missing_total_pages_has_no_next(self):
        meta = build_pagination_meta(PaginatedResult(data=[], page=2, total=12, limit=5))
        assert (meta.has_next, meta.has_prev) == (False, True)

    def test_serializes_with_camel_case_keys(self):
        response = build_paginated_response(
            200, "ok", PaginatedResult(data=[], page=1, total_pages=1, total=1, limit=10)
        )
        body = response.model_dump(by_alias=True)
        assert body["pagination"] == {
            "currentPage": 1,
            "totalPages": 1,
            "totalItems": 1,
            "itemsPerPage": 10,
            "hasNext": False,
            "hasPrev": False,
        }
