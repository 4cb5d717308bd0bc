"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BookId, LoanId wrap the integer primary keys
    - Isbn is a numeric key, unique per Book, within 1..MAX_ISBN
    - Ids fit a 32-bit column (MAX_ID), isbns a 64-bit one (MAX_ISBN)
    - LoanStatus is derived from the tri-state returned flag, never stored

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BookId = NewType("BookId", int)
LoanId = NewType("LoanId", int)
Isbn = NewType("Isbn", int)

# Column limits: ids are Integer, isbn is BigInteger
MAX_ID = 2**31 - 1
MAX_ISBN = 2**63 - 1


# ─── Enums ───────────────────────────────────────────────────────

class LoanStatus(str, Enum):
    """Loan lifecycle: a loan is outstanding until flagged returned."""
    OUTSTANDING = "outstanding"
    RETURNED = "returned"
