"""
Service layer for books.

``BookService`` owns every rule about book records: titles and
authors are trimmed before they are checked or stored, neither may be
blank, ids supplied on creation must be unused, and updates, deletes
and lookups must target an existing book.  Violations are reported by
raising the exceptions in ``core.exceptions``; the API layer turns
them into HTTP responses.

Existence checks and the writes that follow them are separate
repository calls.  Two concurrent requests may both pass a check
before either writes; for a duplicate id on creation the primary key
constraint then fails the second insert with a storage error.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bookstore_api.app.core.exceptions import (
    BookAlreadyExistsError,
    BookNotFoundError,
    InvalidInputError,
)
from bookstore_api.app.repositories.book_repository import Book, BookRepository
from bookstore_api.app.schemas.book import BookCreate, BookUpdate


logger = logging.getLogger(__name__)

TITLE_REQUIRED = "title: Title is mandatory"
AUTHOR_REQUIRED = "author: Author is mandatory"


def _trim(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


class BookService:
    """Service class for managing books."""

    repository = BookRepository

    @classmethod
    async def list_all(cls) -> List[Book]:
        """Return all books ordered by id."""
        logger.debug("Retrieving all books")
        books = cls.repository.find_all()
        logger.info("Retrieved %s books", len(books))
        return books

    @classmethod
    async def get_by_id(cls, book_id: int) -> Book:
        logger.debug("Retrieving book with ID: %s", book_id)
        book = cls.repository.find_by_id(book_id)
        if book is None:
            logger.warning("Book not found with ID: %s", book_id)
            raise BookNotFoundError(book_id)
        return book

    @classmethod
    async def exists_by_id(cls, book_id: int) -> bool:
        return cls.repository.exists_by_id(book_id)

    @classmethod
    async def create(cls, data: BookCreate) -> Book:
        """Store a new book and return it with its id.

        Title and author are trimmed and must not be blank.  If the
        caller supplies an id it must not belong to an existing book;
        otherwise the database assigns one.
        """
        title = _trim(data.title)
        author = _trim(data.author)
        logger.debug("Creating new book: %s", title)

        errors = []
        if not title:
            errors.append(TITLE_REQUIRED)
        if not author:
            errors.append(AUTHOR_REQUIRED)
        if errors:
            logger.warning("Rejected book creation: %s", errors)
            raise InvalidInputError("Validation failed", errors)

        if data.id is not None and cls.repository.exists_by_id(data.id):
            logger.warning("Book with ID %s already exists", data.id)
            raise BookAlreadyExistsError(data.id)

        book = cls.repository.insert(Book(id=data.id, title=title, author=author))
        logger.info("Book created successfully: %s (ID %s)", book.title, book.id)
        return book

    @classmethod
    async def update(cls, book_id: int, data: BookUpdate) -> Book:
        """Update an existing book.

        Only fields provided in ``data`` are changed; provided fields
        are trimmed and must not be blank.  The id never changes.
        """
        logger.debug("Updating book with ID: %s", book_id)
        title = _trim(data.title)
        author = _trim(data.author)

        errors = []
        if title is not None and not title:
            errors.append(TITLE_REQUIRED)
        if author is not None and not author:
            errors.append(AUTHOR_REQUIRED)
        if errors:
            logger.warning("Rejected update of book %s: %s", book_id, errors)
            raise InvalidInputError("Validation failed", errors)

        existing = cls.repository.find_by_id(book_id)
        if existing is None:
            logger.warning("Book not found with ID: %s", book_id)
            raise BookNotFoundError(book_id)

        merged = Book(
            id=existing.id,
            title=title if title is not None else existing.title,
            author=author if author is not None else existing.author,
        )
        book = cls.repository.update(merged)
        logger.info("Book updated successfully: %s (ID %s)", book.title, book.id)
        return book

    @classmethod
    async def delete(cls, book_id: int) -> None:
        logger.debug("Deleting book with ID: %s", book_id)
        if not cls.repository.exists_by_id(book_id):
            logger.warning("Book not found with ID: %s", book_id)
            raise BookNotFoundError(book_id)
        cls.repository.delete_by_id(book_id)
        logger.info("Book deleted successfully with ID: %s", book_id)

    @classmethod
    async def delete_all(cls) -> int:
        """Delete every book and return how many were removed."""
        logger.debug("Deleting all books")
        removed = cls.repository.delete_all()
        logger.info("Deleted %s books", removed)
        return removed

    @classmethod
    async def search_by_title(cls, text: Optional[str]) -> List[Book]:
        """Case-insensitive substring search on titles."""
        term = _trim(text)
        if not term:
            raise InvalidInputError("Search text is required", ["title: Search text is mandatory"])
        books = cls.repository.find_by_title_contains(term)
        logger.info("Found %s books with title containing: %s", len(books), term)
        return books

    @classmethod
    async def search_by_author(cls, text: Optional[str]) -> List[Book]:
        """Case-insensitive substring search on authors."""
        term = _trim(text)
        if not term:
            raise InvalidInputError("Search text is required", ["author: Search text is mandatory"])
        books = cls.repository.find_by_author_contains(term)
        logger.info("Found %s books with author containing: %s", len(books), term)
        return books

    @classmethod
    async def search(cls, title: Optional[str] = None, author: Optional[str] = None) -> List[Book]:
        """Search by title, or by author when no title is given.

        At least one of ``title`` and ``author`` must be non-blank; a
        non-blank title wins when both are supplied.
        """
        logger.debug("Searching books with title: %r and author: %r", title, author)
        if _trim(title):
            return await cls.search_by_title(title)
        if _trim(author):
            return await cls.search_by_author(author)
        logger.warning("Search called without valid parameters")
        raise InvalidInputError(
            "Either title or author must be provided",
            ["title: Search text is mandatory", "author: Search text is mandatory"],
        )
