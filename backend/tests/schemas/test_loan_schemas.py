"""Loan Schemas — checkout/return payloads and loan view."""

from datetime import date

import pytest
from pydantic import ValidationError

from library_api.core.domain_types import MAX_ISBN, LoanStatus
from library_api.core.pagination import Page, PageRequest
from library_api.models.book import Book
from library_api.models.loan import Loan
from library_api.schemas.loan import LoanCreate, LoanResponse, LoanReturn
from library_api.schemas.page import PageResponse


def _loan(returned=None) -> Loan:
    book = Book(id=1, title="desgraca", author="vitu", isbn=123231)
    return Loan(
        id=5, customer="vitor", book=book, loan_date=date(2024, 1, 2),
        returned=returned,
    )


def test_loan_create_requires_customer():
    with pytest.raises(ValidationError):
        LoanCreate(isbn=1, customer="  ")


def test_loan_create_rejects_isbn_beyond_bigint():
    with pytest.raises(ValidationError):
        LoanCreate(isbn=MAX_ISBN + 1, customer="vitor")


def test_loan_return_requires_flag():
    with pytest.raises(ValidationError):
        LoanReturn.model_validate({})
    assert LoanReturn(returned=False).returned is False


def test_loan_response_from_loan():
    response = LoanResponse.from_loan(_loan())
    assert response.id == 5
    assert response.isbn == 123231
    assert response.outstanding is True
    assert response.status is LoanStatus.OUTSTANDING
    assert response.book.title == "desgraca"
    assert response.loan_date == date(2024, 1, 2)


def test_loan_response_returned_loan_is_not_outstanding():
    response = LoanResponse.from_loan(_loan(returned=True))
    assert response.outstanding is False
    assert response.status is LoanStatus.RETURNED
    assert response.model_dump(mode="json")["status"] == "returned"


def test_page_response_echoes_paging():
    page = Page(content=[_loan()], total_elements=11, request=PageRequest(1, 10))
    response = PageResponse[LoanResponse].from_page(page, LoanResponse.from_loan)
    assert response.total_elements == 11
    assert response.total_pages == 2
    assert response.last is True
    assert response.pageable.page_number == 1
    assert response.pageable.page_size == 10
    assert response.content[0].customer == "vitor"
