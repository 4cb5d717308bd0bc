"""Loan Repository — SQLAlchemy implementation of the loan persistence contract.

Invariants:
    - Outstanding means returned IS NULL OR returned IS FALSE, scoped to one book
    - find() matches book isbn OR customer; an empty filter returns every loan
    - Loans are never deleted here
"""

from sqlalchemy import exists, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from library_api.core.domain_types import LoanId
from library_api.core.filters import LoanFilter
from library_api.core.pagination import Page, PageRequest
from library_api.models.book import Book
from library_api.models.loan import Loan


def _outstanding_clause():
    return or_(Loan.returned.is_(None), Loan.returned.is_(False))


class SqlLoanRepository:
    """Loan persistence backed by the loans table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def exists_outstanding_for_book(self, book: Book) -> bool:
        result = await self.db.execute(
            select(
                exists().where(Loan.book_id == book.id, _outstanding_clause()),
            ),
        )
        return bool(result.scalar())

    async def get_by_id(self, loan_id: LoanId) -> Loan | None:
        return await self.db.get(Loan, loan_id)

    async def save(self, loan: Loan) -> Loan:
        self.db.add(loan)
        await self.db.commit()
        return loan

    async def find(
        self, loan_filter: LoanFilter, page_request: PageRequest,
    ) -> Page[Loan]:
        matchers = []
        if loan_filter.isbn is not None:
            matchers.append(Book.isbn == loan_filter.isbn)
        if loan_filter.customer is not None:
            matchers.append(Loan.customer == loan_filter.customer)
        where = [or_(*matchers)] if matchers else []

        total = await self.db.scalar(
            select(func.count(Loan.id))
            .select_from(Loan)
            .join(Book, Loan.book_id == Book.id)
            .where(*where),
        )
        result = await self.db.execute(
            select(Loan)
            .join(Book, Loan.book_id == Book.id)
            .where(*where)
            .order_by(Loan.id)
            .offset(page_request.offset)
            .limit(page_request.size),
        )
        return Page(
            content=list(result.scalars().all()),
            total_elements=total or 0,
            request=page_request,
        )
