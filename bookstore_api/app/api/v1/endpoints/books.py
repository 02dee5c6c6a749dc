"""
Book endpoints for API v1.

These routes expose CRUD and search operations on books.  Handlers
only translate between HTTP and ``BookService``; errors raised by the
service are rendered by the handlers in ``core.error_handlers``.
"""

from typing import List, Optional

from fastapi import APIRouter, Path, Query, Response, status

from bookstore_api.app.schemas.book import MAX_BOOK_ID, BookCreate, BookRead, BookUpdate
from bookstore_api.app.schemas.error import ErrorResponse
from bookstore_api.app.services.book_service import BookService

router = APIRouter()

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}


@router.get("/", response_model=List[BookRead])
async def list_books() -> List[BookRead]:
    """Return all books ordered by id."""
    books = await BookService.list_all()
    return [BookRead.model_validate(book) for book in books]


# Declared before ``/{book_id}`` so that "search" is not parsed as an id.
@router.get("/search", response_model=List[BookRead], responses=BAD_REQUEST)
async def search_books(
    title: Optional[str] = Query(None, description="Search by book title"),
    author: Optional[str] = Query(None, description="Search by book author"),
) -> List[BookRead]:
    """Search books by title or author.

    Matching is a case-insensitive substring match.  When both
    parameters are given the title is used.
    """
    books = await BookService.search(title=title, author=author)
    return [BookRead.model_validate(book) for book in books]


@router.get("/{book_id}", response_model=BookRead, responses={**NOT_FOUND, **BAD_REQUEST})
async def get_book(book_id: int = Path(..., ge=1, le=MAX_BOOK_ID)) -> BookRead:
    book = await BookService.get_by_id(book_id)
    return BookRead.model_validate(book)


@router.post(
    "/",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **CONFLICT},
)
async def create_book(book_in: BookCreate) -> BookRead:
    """Create a new book.

    The id may be supplied by the caller; otherwise one is assigned.
    """
    book = await BookService.create(book_in)
    return BookRead.model_validate(book)


@router.put("/{book_id}", response_model=BookRead, responses={**NOT_FOUND, **BAD_REQUEST})
async def update_book(
    book_in: BookUpdate,
    book_id: int = Path(..., ge=1, le=MAX_BOOK_ID),
) -> BookRead:
    """Update title and/or author of an existing book."""
    book = await BookService.update(book_id, book_in)
    return BookRead.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def delete_book(book_id: int = Path(..., ge=1, le=MAX_BOOK_ID)) -> Response:
    await BookService.delete(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_all_books() -> Response:
    """Delete every book."""
    await BookService.delete_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
