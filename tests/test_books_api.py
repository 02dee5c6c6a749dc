"""HTTP tests for /api/v1/books and the error response format."""

import logging
import sqlite3

import pytest
from fastapi.testclient import TestClient

from bookstore_api.app.repositories.book_repository import Book, BookRepository
from bookstore_api.app.services.book_service import BookService

BOOKS = "/api/v1/books/"


def assert_error(response, status: int, error: str, path: str) -> dict:
    assert response.status_code == status
    body = response.json()
    assert body["status"] == status
    assert body["error"] == error
    assert body["path"] == path
    assert body["timestamp"]
    return body


class TestCrud:
    def test_health(self, client: TestClient) -> None:
        assert client.get("/api/v1/health").json() == {"status": "ok"}

    def test_list_books(self, client: TestClient, sample_books: list[Book]) -> None:
        response = client.get(BOOKS)
        assert response.status_code == 200
        assert [book["id"] for book in response.json()] == [1, 2, 3]

    def test_list_empty(self, client: TestClient) -> None:
        assert client.get(BOOKS).json() == []

    def test_create_trims_and_returns_201(self, client: TestClient) -> None:
        response = client.post(BOOKS, json={"title": "  Dune  ", "author": "  Frank Herbert  "})
        assert response.status_code == 201
        body = response.json()
        assert body["title"] == "Dune"
        assert body["author"] == "Frank Herbert"
        assert client.get(f"{BOOKS}{body['id']}").json() == body

    def test_get_book(self, client: TestClient, sample_books: list[Book]) -> None:
        response = client.get(f"{BOOKS}1")
        assert response.json() == {"id": 1, "title": "The Great Gatsby", "author": "F. Scott Fitzgerald"}

    def test_update_is_partial(self, client: TestClient, sample_books: list[Book]) -> None:
        response = client.put(f"{BOOKS}2", json={"title": "Spring in Action"})
        assert response.status_code == 200
        assert response.json() == {"id": 2, "title": "Spring in Action", "author": "Craig Walls"}

    def test_update_ignores_id_in_body(self, client: TestClient, sample_books: list[Book]) -> None:
        response = client.put(f"{BOOKS}2", json={"id": 99, "author": "C. Walls"})
        assert response.json()["id"] == 2
        assert not BookRepository.exists_by_id(99)

    def test_delete_book(self, client: TestClient, sample_books: list[Book]) -> None:
        response = client.delete(f"{BOOKS}1")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BOOKS}1").status_code == 404

    def test_delete_all_is_repeatable(self, client: TestClient, sample_books: list[Book]) -> None:
        assert client.delete(BOOKS).status_code == 204
        assert client.get(BOOKS).json() == []
        assert client.delete(BOOKS).status_code == 204

    def test_delete_all_logs_once(
        self, client: TestClient, sample_books: list[Book], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="bookstore_api"):
            client.delete(BOOKS)
        removal_lines = [
            record.getMessage()
            for record in caplog.records
            if record.name.startswith("bookstore_api") and "books" in record.getMessage()
        ]
        assert removal_lines == ["Deleted 3 books"]

    def test_search_by_title(self, client: TestClient, sample_books: list[Book]) -> None:
        response = client.get(f"{BOOKS}search", params={"title": "gatsby"})
        assert [book["id"] for book in response.json()] == [1]

    def test_search_by_author(self, client: TestClient, sample_books: list[Book]) -> None:
        response = client.get(f"{BOOKS}search", params={"author": "ROBERT"})
        assert [book["id"] for book in response.json()] == [3]


class TestErrors:
    def test_get_missing_book(self, client: TestClient) -> None:
        body = assert_error(client.get(f"{BOOKS}999"), 404, "Not Found", "/api/v1/books/999")
        assert body["message"] == "Book not found with ID: 999"
        assert body["validation_errors"] is None

    def test_update_missing_book(self, client: TestClient) -> None:
        assert_error(client.put(f"{BOOKS}999", json={"title": "X"}), 404, "Not Found", "/api/v1/books/999")

    def test_delete_missing_book(self, client: TestClient) -> None:
        assert_error(client.delete(f"{BOOKS}999"), 404, "Not Found", "/api/v1/books/999")

    def test_create_duplicate_id(self, client: TestClient, sample_books: list[Book]) -> None:
        response = client.post(BOOKS, json={"id": 1, "title": "Other", "author": "Someone"})
        body = assert_error(response, 409, "Conflict", BOOKS)
        assert body["message"] == "Book already exists with ID: 1"
        assert BookRepository.find_by_id(1).title == "The Great Gatsby"

    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({"title": "   ", "author": "Frank Herbert"}, ["title: Title is mandatory"]),
            ({"title": "Dune"}, ["author: Author is mandatory"]),
            ({}, ["title: Title is mandatory", "author: Author is mandatory"]),
        ],
    )
    def test_create_with_blank_fields(self, client: TestClient, payload: dict, expected: list[str]) -> None:
        body = assert_error(client.post(BOOKS, json=payload), 400, "Bad Request", BOOKS)
        assert body["validation_errors"] == expected

    def test_update_with_blank_field(self, client: TestClient, sample_books: list[Book]) -> None:
        body = assert_error(client.put(f"{BOOKS}1", json={"title": ""}), 400, "Bad Request", "/api/v1/books/1")
        assert body["validation_errors"] == ["title: Title is mandatory"]

    def test_search_without_parameters(self, client: TestClient) -> None:
        response = client.get(f"{BOOKS}search", params={"title": "", "author": " "})
        assert_error(response, 400, "Bad Request", "/api/v1/books/search")

    def test_non_integer_id(self, client: TestClient) -> None:
        body = assert_error(client.get(f"{BOOKS}abc"), 400, "Bad Request", "/api/v1/books/abc")
        assert body["message"] == "Validation failed"
        assert body["validation_errors"][0].startswith("book_id: ")

    def test_malformed_body(self, client: TestClient) -> None:
        body = assert_error(client.post(BOOKS, json={"title": ["x"], "author": "A"}), 400, "Bad Request", BOOKS)
        assert body["validation_errors"][0].startswith("title: ")

    @pytest.mark.parametrize("method", ["get", "put", "delete"])
    def test_id_outside_storable_range(self, client: TestClient, method: str) -> None:
        path = f"/api/v1/books/{2**70}"
        kwargs = {"json": {"title": "X"}} if method == "put" else {}
        body = assert_error(getattr(client, method)(path, **kwargs), 400, "Bad Request", path)
        assert body["validation_errors"][0].startswith("book_id: ")

    def test_id_below_one(self, client: TestClient) -> None:
        assert_error(client.get(f"{BOOKS}0"), 400, "Bad Request", "/api/v1/books/0")

    @pytest.mark.parametrize("book_id", [0, 2**70])
    def test_create_with_unstorable_id(self, client: TestClient, book_id: int) -> None:
        response = client.post(BOOKS, json={"id": book_id, "title": "Dune", "author": "Frank Herbert"})
        body = assert_error(response, 400, "Bad Request", BOOKS)
        assert body["validation_errors"][0].startswith("id: ")
        assert BookRepository.count() == 0

    def test_unknown_route(self, client: TestClient) -> None:
        assert_error(client.get("/api/v1/nothing"), 404, "Not Found", "/api/v1/nothing")

    def test_unexpected_error_hides_details(
        self, client: TestClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        class BrokenRepository(BookRepository):
            @classmethod
            def find_all(cls):
                raise sqlite3.OperationalError("no such table: secret_internal_table")

        monkeypatch.setattr(BookService, "repository", BrokenRepository)
        body = assert_error(client.get(BOOKS), 500, "Internal Server Error", BOOKS)
        assert body["message"] == "An unexpected error occurred"
        assert "secret_internal_table" not in str(body)
