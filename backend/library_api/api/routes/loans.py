"""Loan Routes — checkout, return and search.

Invariants:
    - Unknown isbn and already-loaned books surface as 400 (BusinessRuleError)
    - Unknown loan id on return surfaces as 404 "Loan not found"
    - Reopening a returned loan of a book loaned again surfaces as 400
    - Customer names stay out of the logs
"""

import logging

from fastapi import APIRouter, Depends, Path, Query, status

from library_api.api.dependencies import get_loan_service
from library_api.core.domain_types import MAX_ID, MAX_ISBN
from library_api.core.errors import ResourceNotFoundError
from library_api.core.filters import LoanFilter
from library_api.core.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from library_api.schemas.loan import LoanCreate, LoanResponse, LoanReturn
from library_api.schemas.page import PageResponse
from library_api.services.loan_service import LoanService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/loans", tags=["loans"])


@router.post(
    "", response_model=LoanResponse, status_code=status.HTTP_201_CREATED,
)
async def create_loan(
    body: LoanCreate, service: LoanService = Depends(get_loan_service),
):
    """Check a book out to a customer."""
    logger.info("Request to create loan", extra={"isbn": body.isbn})
    loan = await service.checkout(body.isbn, body.customer)
    return LoanResponse.from_loan(loan)


@router.patch("/{loan_id}", response_model=LoanResponse)
async def return_book(
    body: LoanReturn,
    loan_id: int = Path(le=MAX_ID),
    service: LoanService = Depends(get_loan_service),
):
    """Set the returned flag of a loan."""
    logger.info(
        f"Request to mark loan returned={body.returned}",
        extra={"loan_id": loan_id},
    )
    loan = await service.get_by_id(loan_id)
    if loan is None:
        raise ResourceNotFoundError("Loan", str(loan_id))
    loan = await service.mark_returned(loan, body.returned)
    return LoanResponse.from_loan(loan)


@router.get("", response_model=PageResponse[LoanResponse])
async def find_loans(
    isbn: int | None = Query(None, le=MAX_ISBN),
    customer: str | None = Query(None),
    page: int = Query(0, ge=0),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    service: LoanService = Depends(get_loan_service),
):
    """Loans whose book isbn OR customer matches; all loans when unfiltered."""
    logger.info(
        f"Request to find loans: isbn={isbn!r} by_customer={customer is not None}",
    )
    result = await service.find(
        LoanFilter(isbn=isbn, customer=customer), page, size,
    )
    return PageResponse[LoanResponse].from_page(result, LoanResponse.from_loan)
