"""Boundary Protocols — contracts between services and persistence.

Invariants:
    - Services depend on these Protocols, never on concrete SQL repositories
    - Implementations live in infrastructure/ and are injected per request

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Entities described structurally (BookLike/LoanLike) so core never imports ORM models
"""

from datetime import date
from typing import Protocol

from library_api.core.domain_types import BookId, LoanId, Isbn
from library_api.core.filters import BookFilter, LoanFilter
from library_api.core.pagination import Page, PageRequest


class BookLike(Protocol):
    """Structural contract for Book objects passed between layers."""
    id: int | None
    title: str
    author: str
    isbn: int


class LoanLike(Protocol):
    """Structural contract for Loan objects passed between layers."""
    id: int | None
    customer: str
    book: BookLike
    loan_date: date
    returned: bool | None


class BookRepository(Protocol):
    """Contract for catalog persistence — implemented by infrastructure."""
    async def exists_by_isbn(self, isbn: Isbn) -> bool: ...
    async def get_by_id(self, book_id: BookId) -> BookLike | None: ...
    async def get_by_isbn(self, isbn: Isbn) -> BookLike | None: ...
    async def save(self, book: BookLike) -> BookLike: ...
    async def delete(self, book: BookLike) -> None: ...
    async def has_loans(self, book: BookLike) -> bool: ...
    async def find(
        self, book_filter: BookFilter, page_request: PageRequest,
    ) -> Page: ...


class LoanRepository(Protocol):
    """Contract for loan persistence — implemented by infrastructure."""
    async def exists_outstanding_for_book(self, book: BookLike) -> bool: ...
    async def get_by_id(self, loan_id: LoanId) -> LoanLike | None: ...
    async def save(self, loan: LoanLike) -> LoanLike: ...
    async def find(
        self, loan_filter: LoanFilter, page_request: PageRequest,
    ) -> Page: ...
