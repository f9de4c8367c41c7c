"""
Notes API Backend — Notes Endpoint Tests
==========================================

What:  HTTP-level tests for /api/notes through the full FastAPI stack.
How:   HTTPX AsyncClient + ASGITransport; the persistence service is an
       AsyncMock injected with dependency_overrides (see conftest.py).

What we test:
    ✅ Status codes, messages and camelCase envelopes for all six operations
    ✅ Authentication failures never reach the service
    ✅ Presence checks and body validation produce 400 envelopes
    ✅ Service errors keep their status and message
    ✅ Unexpected errors become a generic 500 and still get an access log line
    ✅ X-Request-ID on every response
"""

import logging
from unittest.mock import patch

import pytest
from jose import jwt

from notes_api.exceptions import ForbiddenError, NotesAPIError, NotFoundError
from notes_api.schemas.note import NoteCreate, NoteUpdate, PaginatedResult

USER_ID = "user-123"


class TestCreateEndpoint:

    @pytest.mark.asyncio
    async def test_create_returns_201_envelope(self, test_client, mock_note_service, sample_note, auth_headers):
        mock_note_service.create_note.return_value = sample_note

        response = await test_client.post(
            "/api/notes",
            json={"title": "Groceries", "content": "Milk, eggs, bread"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == 201
        assert body["message"] == "Note created successfully"
        assert body["data"]["id"] == str(sample_note.id)
        assert body["data"]["userId"] == USER_ID
        assert body["data"]["title"] == "Groceries"
        mock_note_service.create_note.assert_awaited_once_with(
            USER_ID, NoteCreate(title="Groceries", content="Milk, eggs, bread")
        )

    @pytest.mark.asyncio
    async def test_create_without_token_is_401(self, test_client, mock_note_service):
        response = await test_client.post("/api/notes", json={"title": "t", "content": "c"})

        assert response.status_code == 401
        body = response.json()
        assert body["status"] == 401
        assert body["error"] == "unauthorized"
        assert body["message"] == "User not authenticated"
        mock_note_service.create_note.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_with_bad_token_is_401(self, test_client, mock_note_service):
        forged = jwt.encode({"sub": USER_ID}, "wrong-secret", algorithm="HS256")

        response = await test_client.post(
            "/api/notes",
            json={"title": "t", "content": "c"},
            headers={"Authorization": f"Bearer {forged}"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"
        mock_note_service.create_note.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_missing_content_is_400(self, test_client, mock_note_service, auth_headers):
        response = await test_client.post("/api/notes", json={"title": "t"}, headers=auth_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == "Validation failed"
        assert [e["field"] for e in body["details"]["errors"]] == ["content"]
        mock_note_service.create_note.assert_not_awaited()


class TestListEndpoints:

    @pytest.mark.asyncio
    async def test_list_with_page_and_limit(self, test_client, mock_note_service, sample_note, auth_headers):
        mock_note_service.get_user_notes.return_value = PaginatedResult(
            data=[sample_note], page=2, total_pages=3, total=12, limit=5
        )

        response = await test_client.get("/api/notes?page=2&limit=5", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Notes retrieved successfully"
        assert [n["id"] for n in body["data"]] == [str(sample_note.id)]
        assert body["pagination"] == {
            "currentPage": 2,
            "totalPages": 3,
            "totalItems": 12,
            "itemsPerPage": 5,
            "hasNext": True,
            "hasPrev": True,
        }
        pagination = mock_note_service.get_user_notes.await_args.args[1]
        assert (pagination.skip, pagination.take) == (5, 5)

    @pytest.mark.asyncio
    async def test_list_defaults(self, test_client, mock_note_service, auth_headers):
        mock_note_service.get_user_notes.return_value = PaginatedResult(
            data=[], page=1, total_pages=0, total=0, limit=10
        )

        response = await test_client.get("/api/notes?page=abc", headers=auth_headers)

        assert response.status_code == 200
        pagination = mock_note_service.get_user_notes.await_args.args[1]
        assert (pagination.skip, pagination.take) == (0, 10)

    @pytest.mark.asyncio
    async def test_search_requires_query(self, test_client, mock_note_service, auth_headers):
        for url in ("/api/notes/search", "/api/notes/search?q="):
            response = await test_client.get(url, headers=auth_headers)

            assert response.status_code == 400
            body = response.json()
            assert body["status"] == 400
            assert body["message"] == "Search query is required"
        mock_note_service.search_user_notes.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_search(self, test_client, mock_note_service, sample_note, auth_headers):
        mock_note_service.search_user_notes.return_value = PaginatedResult(
            data=[sample_note], page=1, total_pages=1, total=1, limit=10
        )

        response = await test_client.get("/api/notes/search?q=milk", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Notes search completed successfully"
        assert body["pagination"]["hasNext"] is False
        assert body["pagination"]["hasPrev"] is False
        user_id, query, _ = mock_note_service.search_user_notes.await_args.args
        assert (user_id, query) == (USER_ID, "milk")


class TestSingleNoteEndpoints:

    @pytest.mark.asyncio
    async def test_get_note(self, test_client, mock_note_service, sample_note, auth_headers):
        mock_note_service.get_note_by_id.return_value = sample_note

        response = await test_client.get(f"/api/notes/{sample_note.id}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "Note retrieved successfully"
        mock_note_service.get_note_by_id.assert_awaited_once_with(USER_ID, str(sample_note.id))

    @pytest.mark.asyncio
    async def test_get_note_not_found_keeps_service_message(self, test_client, mock_note_service, auth_headers):
        mock_note_service.get_note_by_id.side_effect = NotFoundError(resource="note", resource_id="abc")

        response = await test_client.get("/api/notes/abc", headers=auth_headers)

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["message"] == "note with ID 'abc' was not found"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["put", "patch"])
    async def test_update_note(self, test_client, mock_note_service, sample_note, auth_headers, method):
        mock_note_service.update_note.return_value = sample_note

        response = await getattr(test_client, method)(
            f"/api/notes/{sample_note.id}",
            json={"title": "Groceries", "content": "Milk only"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Note updated successfully"
        mock_note_service.update_note.assert_awaited_once_with(
            USER_ID, str(sample_note.id), NoteUpdate(title="Groceries", content="Milk only")
        )

    @pytest.mark.asyncio
    async def test_update_foreign_note_is_403(self, test_client, mock_note_service, auth_headers):
        mock_note_service.update_note.side_effect = ForbiddenError(
            message="You do not have permission to access this note"
        )

        response = await test_client.put(
            "/api/notes/abc", json={"title": "t", "content": "c"}, headers=auth_headers
        )

        assert response.status_code == 403
        assert response.json()["message"] == "You do not have permission to access this note"

    @pytest.mark.asyncio
    async def test_delete_note(self, test_client, mock_note_service, sample_note, auth_headers):
        mock_note_service.delete_note.return_value = sample_note

        response = await test_client.delete(f"/api/notes/{sample_note.id}", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Note deleted successfully"
        assert body["data"]["id"] == str(sample_note.id)

    @pytest.mark.asyncio
    async def test_blank_note_id_is_400(self, test_client, mock_note_service, auth_headers):
        response = await test_client.get("/api/notes/%20", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Note ID is required"
        mock_note_service.get_note_by_id.assert_not_awaited()


ROUTES = [
    ("create_note", "POST", "/api/notes", {"title": "t", "content": "c"}),
    ("get_user_notes", "GET", "/api/notes", None),
    ("search_user_notes", "GET", "/api/notes/search?q=milk", None),
    ("get_note_by_id", "GET", "/api/notes/abc", None),
    ("update_note", "PUT", "/api/notes/abc", {"title": "t", "content": "c"}),
    ("delete_note", "DELETE", "/api/notes/abc", None),
]


class TestErrorTranslation:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("service_method, method, url, body", ROUTES, ids=[r[0] for r in ROUTES])
    async def test_service_error_keeps_status_and_message(
        self, test_client, mock_note_service, auth_headers, service_method, method, url, body
    ):
        getattr(mock_note_service, service_method).side_effect = NotesAPIError("teapot", status_code=418)

        response = await test_client.request(method, url, json=body, headers=auth_headers)

        assert response.status_code == 418
        payload = response.json()
        assert payload["status"] == 418
        assert payload["message"] == "teapot"

    @pytest.mark.asyncio
    async def test_unexpected_error_is_generic_500(self, test_client, mock_note_service, auth_headers):
        mock_note_service.delete_note.side_effect = RuntimeError("disk on fire")

        response = await test_client.delete("/api/notes/abc", headers=auth_headers)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert "disk on fire" not in body["message"]

    @pytest.mark.asyncio
    async def test_unexpected_error_still_gets_an_access_line(
        self, test_client, mock_note_service, auth_headers, caplog
    ):
        mock_note_service.delete_note.side_effect = RuntimeError("boom")

        with caplog.at_level(logging.INFO, logger="notes_api.access"):
            response = await test_client.delete("/api/notes/abc", headers=auth_headers)

        assert response.status_code == 500
        access = [r for r in caplog.records if r.name == "notes_api.access"]
        assert len(access) == 1
        assert access[0].levelno == logging.ERROR
        assert access[0].getMessage().startswith("DELETE /api/notes/abc 500 ")

    @pytest.mark.asyncio
    async def test_client_error_access_line_is_a_warning(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="notes_api.access"):
            await test_client.get("/api/notes")

        access = [r for r in caplog.records if r.name == "notes_api.access"]
        assert [r.levelno for r in access] == [logging.WARNING]
        assert " 401 " in access[0].getMessage()

    @pytest.mark.asyncio
    async def test_unknown_route_uses_error_envelope(self, test_client, auth_headers):
        response = await test_client.get("/api/nowhere", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["error"] == "http_error"

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client, mock_note_service, sample_note, auth_headers):
        mock_note_service.get_note_by_id.return_value = sample_note

        response = await test_client.get(
            f"/api/notes/{sample_note.id}",
            headers={**auth_headers, "X-Request-ID": "trace-42"},
        )

        assert response.headers["X-Request-ID"] == "trace-42"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, test_client):
        response = await test_client.get("/api/notes")

        assert response.status_code == 401
        assert response.headers["X-Request-ID"]
        assert response.json()["requestId"] == response.headers["X-Request-ID"]


class TestHealth:

    @pytest.mark.asyncio
    async def test_unreachable_database_reports_unhealthy(self, test_client):
        with patch("notes_api.routes.health.engine") as mock_engine:
            mock_engine.connect.side_effect = OSError("connection refused")
            response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["database"] == "disconnected"
