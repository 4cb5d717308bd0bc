"""Book Routes — catalog CRUD and search.

Invariants:
    - Missing books surface as 404 via ResourceNotFoundError
    - Duplicate isbn and deleting a loaned book surface as 400 via BusinessRuleError
    - Routes map schemas to models and delegate every rule to BookService
    - Oversized ids and isbns are rejected as 400 validation errors
"""

import logging

from fastapi import APIRouter, Depends, Path, Query, Response, status

from library_api.api.dependencies import get_book_service
from library_api.core.domain_types import MAX_ID, MAX_ISBN
from library_api.core.errors import ResourceNotFoundError
from library_api.core.filters import BookFilter
from library_api.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from library_api.models.book import Book
from library_api.schemas.book import BookCreate, BookResponse, BookUpdate
from library_api.schemas.page import PageResponse
from library_api.services.book_service import BookService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/books", tags=["books"])


async def get_book_or_404(book_id: int, service: BookService) -> Book:
    book = await service.get_by_id(book_id)
    if book is None:
        raise ResourceNotFoundError("Book", str(book_id))
    return book


@router.post(
    "", response_model=BookResponse, status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookCreate, service: BookService = Depends(get_book_service),
):
    """Register a new book in the catalog."""
    logger.info(f"Request to save book: {body}", extra={"isbn": body.isbn})
    book = await service.save(Book(**body.model_dump()))
    return BookResponse.model_validate(book)


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: int = Path(le=MAX_ID),
    service: BookService = Depends(get_book_service),
):
    """Fetch one book by id; 404 when it does not exist."""
    logger.info("Request to get book", extra={"book_id": book_id})
    book = await get_book_or_404(book_id, service)
    return BookResponse.model_validate(book)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    body: BookUpdate,
    book_id: int = Path(le=MAX_ID),
    service: BookService = Depends(get_book_service),
):
    """Replace title, author and isbn of an existing book."""
    logger.info(f"Request to update book: {body}", extra={"book_id": book_id})
    book = await get_book_or_404(book_id, service)
    book = await service.update(book, body.model_dump())
    return BookResponse.model_validate(book)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: int = Path(le=MAX_ID),
    service: BookService = Depends(get_book_service),
):
    """Remove a book that has never been loaned."""
    logger.info("Request to delete book", extra={"book_id": book_id})
    book = await get_book_or_404(book_id, service)
    await service.delete(book)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=PageResponse[BookResponse])
async def find_books(
    title: str | None = Query(None),
    author: str | None = Query(None),
    isbn: int | None = Query(None, le=MAX_ISBN),
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    service: BookService = Depends(get_book_service),
):
    """Search the catalog by example; absent filters are ignored."""
    logger.info(
        f"Request to find books: title={title!r} author={author!r} isbn={isbn!r}",
    )
    result = await service.find(
        BookFilter(title=title, author=author, isbn=isbn), page, size,
    )
    return PageResponse[BookResponse].from_page(
        result, BookResponse.model_validate,
    )
