"""Service Dependencies — FastAPI providers wiring repositories into services.

Invariants:
    - One AsyncSession per request, shared by every repository in that request
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from library_api.infrastructure.book_repository import SqlBookRepository
from library_api.infrastructure.database import get_db
from library_api.infrastructure.loan_repository import SqlLoanRepository
from library_api.services.book_service import BookService
from library_api.services.loan_service import LoanService


def get_book_service(db: AsyncSession = Depends(get_db)) -> BookService:
    return BookService(SqlBookRepository(db))


def get_loan_service(db: AsyncSession = Depends(get_db)) -> LoanService:
    return LoanService(SqlLoanRepository(db), SqlBookRepository(db))
