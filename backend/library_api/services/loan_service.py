"""Loan Service — checkout and return rules on top of the loan repository.

Invariants:
    - A book with an outstanding loan cannot be loaned again
    - checkout() fails when no book matches the isbn
    - Only the returned flag changes after a loan is created
    - A returned loan can be reopened only while its book has no other
      outstanding loan

Design Decisions:
    - Existence check then insert, no locking: a concurrent checkout of the
      same book can slip through between the two statements
"""

import logging
from datetime import date

from library_api.core.domain_types import Isbn, LoanId
from library_api.core.errors import BusinessRuleError
from library_api.core.filters import LoanFilter
from library_api.core.loan_rules import is_outstanding
from library_api.core.pagination import Page, PageRequest
from library_api.core.repository_protocols import (
    BookRepository, LoanLike, LoanRepository,
)
from library_api.models.loan import Loan

logger = logging.getLogger(__name__)

BOOK_NOT_FOUND_MESSAGE = "Book not found for passed isbn"
BOOK_ALREADY_LOANED_MESSAGE = "Book already loaned"


class LoanService:
    """Loan lifecycle: checkout, lookup, return, search."""

    def __init__(self, loans: LoanRepository, books: BookRepository):
        self.loans = loans
        self.books = books

    async def save(self, loan: LoanLike) -> LoanLike:
        if await self.loans.exists_outstanding_for_book(loan.book):
            logger.info(
                "Rejected loan of an already loaned book",
                extra={"book_id": loan.book.id},
            )
            raise BusinessRuleError(BOOK_ALREADY_LOANED_MESSAGE)
        return await self.loans.save(loan)

    async def checkout(self, isbn: Isbn, customer: str) -> LoanLike:
        book = await self.books.get_by_isbn(isbn)
        if book is None:
            raise BusinessRuleError(BOOK_NOT_FOUND_MESSAGE)
        loan = await self.save(
            Loan(customer=customer, book=book, loan_date=date.today()),
        )
        logger.info(
            "Book loaned",
            extra={"loan_id": loan.id, "book_id": book.id},
        )
        return loan

    async def get_by_id(self, loan_id: LoanId) -> LoanLike | None:
        return await self.loans.get_by_id(loan_id)

    async def update(self, loan: LoanLike) -> LoanLike:
        return await self.loans.save(loan)

    async def mark_returned(self, loan: LoanLike, returned: bool) -> LoanLike:
        reopening = not returned and not is_outstanding(loan.returned)
        if reopening and await self.loans.exists_outstanding_for_book(loan.book):
            logger.info(
                "Rejected reopening a loan of an already loaned book",
                extra={"loan_id": loan.id, "book_id": loan.book.id},
            )
            raise BusinessRuleError(BOOK_ALREADY_LOANED_MESSAGE)
        loan.returned = returned
        updated = await self.update(loan)
        logger.info(
            "Loan returned flag updated",
            extra={"loan_id": loan.id, "book_id": loan.book.id},
        )
        return updated

    async def find(
        self, loan_filter: LoanFilter, page: int, size: int,
    ) -> Page:
        return await self.loans.find(loan_filter, PageRequest(page=page, size=size))
