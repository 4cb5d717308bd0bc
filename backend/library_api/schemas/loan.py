"""Loan Schemas — checkout, return and loan views.

Invariants:
    - LoanCreate: isbn required (1..MAX_ISBN), customer required and not blank
    - LoanReturn: returned must be an explicit boolean
    - LoanResponse embeds the loaned book, the derived outstanding flag and status
"""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from library_api.core.domain_types import MAX_ISBN, LoanStatus
from library_api.schemas.book import BookResponse


class LoanCreate(BaseModel):
    """Checkout request: which book (by isbn) goes to which customer."""
    isbn: int = Field(gt=0, le=MAX_ISBN)
    customer: str = Field(max_length=255)

    @field_validator("customer")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class LoanReturn(BaseModel):
    returned: bool


class LoanResponse(BaseModel):
    id: int
    customer: str
    isbn: int
    loan_date: date
    returned: bool | None = None
    outstanding: bool
    status: LoanStatus
    book: BookResponse

    @classmethod
    def from_loan(cls, loan) -> "LoanResponse":
        return cls(
            id=loan.id,
            customer=loan.customer,
            isbn=loan.book.isbn,
            loan_date=loan.loan_date,
            returned=loan.returned,
            outstanding=loan.outstanding,
            status=loan.status,
            book=BookResponse.model_validate(loan.book),
        )
