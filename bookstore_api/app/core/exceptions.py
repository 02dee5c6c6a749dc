"""
Error taxonomy of the book service.

The service raises one of these exceptions whenever a request cannot
be fulfilled because of the caller: malformed input, a missing book or
an id collision.  Anything else that escapes the service (for example
``sqlite3.Error``) is treated as an unexpected failure by the handlers
in ``core.error_handlers``.
"""

from typing import List, Optional


class BookServiceError(Exception):
    """Base class for errors the caller can act on."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(BookServiceError):
    """Caller supplied data that fails a validation rule.

    ``errors`` lists one ``"<field>: <reason>"`` entry per violation.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class BookNotFoundError(BookServiceError):
    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book not found with ID: {book_id}")
        self.book_id = book_id


class BookAlreadyExistsError(BookServiceError):
    def __init__(self, book_id: int) -> None:
        super().__init__(f"Book already exists with ID: {book_id}")
        self.book_id = book_id
