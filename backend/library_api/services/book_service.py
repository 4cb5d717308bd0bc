"""Book Service — catalog validation on top of the book repository.

Invariants:
    - isbn is unique: save() and update() reject an isbn already held by another book
    - update()/delete() require a persisted book (non-null id)
    - A book with loan history cannot be deleted

Design Decisions:
    - Returns None for missing lookups; routes decide between 404 and 400
    - update() checks the isbn before mutating so autoflush never hits the unique index
"""

import logging

from library_api.core.domain_types import BookId, Isbn
from library_api.core.errors import BusinessRuleError, InvalidIdentifierError
from library_api.core.filters import BookFilter
from library_api.core.pagination import Page, PageRequest
from library_api.core.repository_protocols import BookLike, BookRepository

logger = logging.getLogger(__name__)

DUPLICATE_ISBN_MESSAGE = "Isbn already registered"
BOOK_HAS_LOANS_MESSAGE = "Book has loans and cannot be deleted"

_UPDATABLE_FIELDS = ("title", "author", "isbn")


class BookService:
    """Catalog operations: create, read, update, delete, search."""

    def __init__(self, books: BookRepository):
        self.books = books

    async def save(self, book: BookLike) -> BookLike:
        if await self.books.exists_by_isbn(book.isbn):
            logger.info(
                "Rejected duplicate isbn", extra={"isbn": book.isbn},
            )
            raise BusinessRuleError(DUPLICATE_ISBN_MESSAGE)
        saved = await self.books.save(book)
        logger.info("Book saved", extra={"book_id": saved.id, "isbn": saved.isbn})
        return saved

    async def get_by_id(self, book_id: BookId) -> BookLike | None:
        return await self.books.get_by_id(book_id)

    async def get_by_isbn(self, isbn: Isbn) -> BookLike | None:
        return await self.books.get_by_isbn(isbn)

    async def update(self, book: BookLike | None, changes: dict) -> BookLike:
        _require_id(book)
        new_isbn = changes.get("isbn")
        if new_isbn is not None and new_isbn != book.isbn:
            holder = await self.books.get_by_isbn(new_isbn)
            if holder is not None and holder.id != book.id:
                raise BusinessRuleError(DUPLICATE_ISBN_MESSAGE)
        for name in _UPDATABLE_FIELDS:
            if changes.get(name) is not None:
                setattr(book, name, changes[name])
        return await self.books.save(book)

    async def delete(self, book: BookLike | None) -> None:
        _require_id(book)
        if await self.books.has_loans(book):
            raise BusinessRuleError(BOOK_HAS_LOANS_MESSAGE)
        await self.books.delete(book)
        logger.info("Book deleted", extra={"book_id": book.id})

    async def find(
        self, book_filter: BookFilter, page: int, size: int,
    ) -> Page:
        return await self.books.find(book_filter, PageRequest(page=page, size=size))


def _require_id(book: BookLike | None) -> None:
    if book is None or book.id is None:
        raise InvalidIdentifierError("Book")
