"""Domain Types — verifies identity wrappers and loan status enum."""

from library_api.core.domain_types import (
    MAX_ID, MAX_ISBN, BookId, LoanId, Isbn, LoanStatus,
)


def test_identity_types_wrap_int():
    assert BookId(1) == 1
    assert LoanId(2) == 2
    assert Isbn(9788535902778) == 9788535902778


def test_loan_status_has_two_states():
    assert set(LoanStatus) == {LoanStatus.OUTSTANDING, LoanStatus.RETURNED}


def test_loan_status_values_serialize_as_strings():
    assert LoanStatus.OUTSTANDING.value == "outstanding"
    assert LoanStatus.RETURNED == "returned"


def test_column_limits():
    assert MAX_ID == 2**31 - 1
    assert MAX_ISBN == 2**63 - 1
