"""Loan ORM — a customer's checkout of one Book.

Invariants:
    - Always references a Book (book_id FK)
    - returned is tri-state: NULL/False = outstanding, True = returned
    - Only returned is mutated after creation; loans are never deleted

Design Decisions:
    - book relationship eager-loaded (selectin): responses always embed the book
      and async sessions cannot lazy-load
"""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.core.domain_types import LoanStatus
from library_api.core.loan_rules import is_outstanding, loan_status
from library_api.db.base import Base


class Loan(Base):
    """Checkout record linking a customer to a Book."""
    __tablename__ = "loans"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    customer: Mapped[str] = mapped_column(String(255), nullable=False)
    book_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("books.id"), nullable=False, index=True,
    )
    loan_date: Mapped[date] = mapped_column(
        Date, nullable=False, default=date.today,
    )
    returned: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    book: Mapped["Book"] = relationship("Book", lazy="selectin")

    @property
    def outstanding(self) -> bool:
        return is_outstanding(self.returned)

    @property
    def status(self) -> LoanStatus:
        return loan_status(self.returned)

    def __repr__(self) -> str:
        return (
            f"Loan(id={self.id!r}, customer={self.customer!r}, "
            f"book_id={self.book_id!r}, returned={self.returned!r})"
        )
