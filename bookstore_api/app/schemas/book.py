"""
Pydantic schemas for books.

Request schemas only check types.  Whether ``title`` and ``author``
are present and non-blank is decided by ``BookService`` so that a
missing field and a whitespace-only field produce the same response.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# SQLite stores ids as signed 64-bit integers.
MAX_BOOK_ID = 2**63 - 1


class BookCreate(BaseModel):
    """Schema for creating a new book.

    ``id`` is optional; when omitted the database assigns one.
    """

    id: Optional[int] = Field(None, ge=1, le=MAX_BOOK_ID, description="Book ID", examples=[1])
    title: Optional[str] = Field(None, description="Book title", examples=["The Great Gatsby"])
    author: Optional[str] = Field(None, description="Book author", examples=["F. Scott Fitzgerald"])


class BookUpdate(BaseModel):
    """Schema for updating an existing book.

    All fields are optional; only provided values will be updated.
    The id of a book cannot be changed.
    """

    title: Optional[str] = None
    author: Optional[str] = None


class BookRead(BaseModel):
    """Schema for reading a book."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
