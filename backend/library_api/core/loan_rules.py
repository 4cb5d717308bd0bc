"""Loan Rules — pure predicates over the loan returned flag.

Invariants:
    - returned is tri-state: None and False both mean the book is still out
    - At most one outstanding loan per book (checked by LoanService, not locked)
"""

from library_api.core.domain_types import LoanStatus


def is_outstanding(returned: bool | None) -> bool:
    """True when the book has not been given back yet."""
    return not returned


def loan_status(returned: bool | None) -> LoanStatus:
    if is_outstanding(returned):
        return LoanStatus.OUTSTANDING
    return LoanStatus.RETURNED
