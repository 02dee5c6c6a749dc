"""Shared fixtures: a fresh SQLite database per test and an HTTP client."""

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from bookstore_api.app.core.config import settings
from bookstore_api.app.core.db import init_db
from bookstore_api.app.main import app
from bookstore_api.app.repositories.book_repository import Book, BookRepository


@pytest.fixture()
def database(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the application at an empty, migrated database under ``tmp_path``."""
    db_path = tmp_path / "books.db"
    monkeypatch.setattr(settings, "database_url", str(db_path))
    init_db()
    return db_path


@pytest.fixture()
def client(database: Path) -> Iterator[TestClient]:
    """HTTP client that returns 500 responses instead of raising."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture()
def sample_books(database: Path) -> list[Book]:
    """Three stored books, inserted out of id order."""
    return [
        BookRepository.insert(Book(id=3, title="Clean Code", author="Robert C. Martin")),
        BookRepository.insert(Book(id=1, title="The Great Gatsby", author="F. Scott Fitzgerald")),
        BookRepository.insert(Book(id=2, title="Spring Boot in Action", author="Craig Walls")),
    ]
