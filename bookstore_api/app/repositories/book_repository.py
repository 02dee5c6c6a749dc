"""
Repository for the ``book`` table.

All queries use parameterized statements.  Each method opens its own
connection, so every call is atomic on its own but no transaction
spans several calls.  Results of list queries are always ordered by
ascending id.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import List, Optional

from bookstore_api.app.core.db import get_connection


@dataclass
class Book:
    """A row of the ``book`` table.  ``id`` is ``None`` until stored."""

    id: Optional[int]
    title: str
    author: str


def _like_pattern(text: str) -> str:
    """Build a ``LIKE`` pattern matching ``text`` literally anywhere."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class BookRepository:
    """Data access methods for books."""

    @classmethod
    def find_all(cls) -> List[Book]:
        conn = get_connection()
        try:
            rows = conn.execute("SELECT id, title, author FROM book ORDER BY id ASC").fetchall()
            return [cls._row_to_book(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    def find_by_id(cls, book_id: int) -> Optional[Book]:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT id, title, author FROM book WHERE id = ?",
                (book_id,),
            ).fetchone()
            if not row:
                return None
            return cls._row_to_book(row)
        finally:
            conn.close()

    @classmethod
    def exists_by_id(cls, book_id: int) -> bool:
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT COUNT(*) AS cnt FROM book WHERE id = ?",
                (book_id,),
            ).fetchone()
            return row["cnt"] > 0
        finally:
            conn.close()

    @classmethod
    def count(cls) -> int:
        conn = get_connection()
        try:
            row = conn.execute("SELECT COUNT(*) AS cnt FROM book").fetchone()
            return row["cnt"]
        finally:
            conn.close()

    @classmethod
    def insert(cls, book: Book) -> Book:
        """Insert ``book`` and return it with its id.

        When ``book.id`` is ``None`` the database assigns the id.  An
        explicit id that is already taken raises ``sqlite3.IntegrityError``.
        """
        conn = get_connection()
        try:
            cursor = conn.cursor()
            if book.id is None:
                cursor.execute(
                    "INSERT INTO book (title, author) VALUES (?, ?)",
                    (book.title, book.author),
                )
            else:
                cursor.execute(
                    "INSERT INTO book (id, title, author) VALUES (?, ?, ?)",
                    (book.id, book.title, book.author),
                )
            book_id = cursor.lastrowid if book.id is None else book.id
            conn.commit()
            return Book(id=book_id, title=book.title, author=book.author)
        finally:
            conn.close()

    @classmethod
    def update(cls, book: Book) -> Book:
        """Overwrite title and author of the row with ``book.id``."""
        conn = get_connection()
        try:
            conn.execute(
                "UPDATE book SET title = ?, author = ? WHERE id = ?",
                (book.title, book.author, book.id),
            )
            conn.commit()
            return Book(id=book.id, title=book.title, author=book.author)
        finally:
            conn.close()

    @classmethod
    def delete_by_id(cls, book_id: int) -> int:
        """Delete a book by id and return the number of rows removed."""
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM book WHERE id = ?", (book_id,))
            affected = cursor.rowcount
            conn.commit()
            return affected
        finally:
            conn.close()

    @classmethod
    def delete_all(cls) -> int:
        conn = get_connection()
        try:
            cursor = conn.execute("DELETE FROM book")
            affected = cursor.rowcount
            conn.commit()
            return affected
        finally:
            conn.close()

    @classmethod
    def find_by_title_contains(cls, text: str) -> List[Book]:
        return cls._find_by_column_contains("title", text)

    @classmethod
    def find_by_author_contains(cls, text: str) -> List[Book]:
        return cls._find_by_column_contains("author", text)

    @classmethod
    def _find_by_column_contains(cls, column: str, text: str) -> List[Book]:
        # ``column`` is one of the fixed names above, never user input.
        query = (
            f"SELECT id, title, author FROM book "
            f"WHERE casefold({column}) LIKE casefold(?) ESCAPE '\\' ORDER BY id ASC"
        )
        conn = get_connection()
        try:
            rows = conn.execute(query, (_like_pattern(text),)).fetchall()
            return [cls._row_to_book(row) for row in rows]
        finally:
            conn.close()

    @staticmethod
    def _row_to_book(row: sqlite3.Row) -> Book:
        """Convert a database row to a ``Book``."""
        return Book(id=row["id"], title=row["title"], author=row["author"])
