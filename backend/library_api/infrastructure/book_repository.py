"""Book Repository — SQLAlchemy implementation of the catalog persistence contract.

Invariants:
    - Every write commits before returning (one operation per request)
    - find() ignores None filter fields; title/author match case-insensitive substrings
    - Results ordered by id so pages are stable
"""

from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from library_api.core.domain_types import BookId, Isbn
from library_api.core.filters import BookFilter
from library_api.core.pagination import Page, PageRequest
from library_api.models.book import Book
from library_api.models.loan import Loan


class SqlBookRepository:
    """Catalog persistence backed by the books table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists_by_isbn(self, isbn: Isbn) -> bool:
        result = await self.db.execute(
            select(exists().where(Book.isbn == isbn)),
        )
        return bool(result.scalar())

    async def get_by_id(self, book_id: BookId) -> Book | None:
        return await self.db.get(Book, book_id)

    async def get_by_isbn(self, isbn: Isbn) -> Book | None:
        result = await self.db.execute(select(Book).where(Book.isbn == isbn))
        return result.scalar_one_or_none()

    async def save(self, book: Book) -> Book:
        self.db.add(book)
        await self.db.commit()
        await self.db.refresh(book)
        return book

    async def delete(self, book: Book) -> None:
        await self.db.delete(book)
        await self.db.commit()

    async def has_loans(self, book: Book) -> bool:
        result = await self.db.execute(
            select(exists().where(Loan.book_id == book.id)),
        )
        return bool(result.scalar())

    async def find(
        self, book_filter: BookFilter, page_request: PageRequest,
    ) -> Page[Book]:
        conditions = []
        if book_filter.title is not None:
            conditions.append(
                Book.title.icontains(book_filter.title, autoescape=True),
            )
        if book_filter.author is not None:
            conditions.append(
                Book.author.icontains(book_filter.author, autoescape=True),
            )
        if book_filter.isbn is not None:
            conditions.append(Book.isbn == book_filter.isbn)

        total = await self.db.scalar(
            select(func.count()).select_from(Book).where(*conditions),
        )
        result = await self.db.execute(
            select(Book)
            .where(*conditions)
            .order_by(Book.id)
            .offset(page_request.offset)
            .limit(page_request.size),
        )
        return Page(
            content=list(result.scalars().all()),
            total_elements=total or 0,
            request=page_request,
        )
