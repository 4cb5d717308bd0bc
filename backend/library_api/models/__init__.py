"""ORM Models — SQLAlchemy declarative models for catalog and loans.

Invariants:
    - All models inherit from Base (db/base.py)
    - Loan references Book by integer FK; Book owns no collection of loans

Design Decisions:
    - One file per entity
    - All models imported here so string-based relationship() references
      resolve before any query runs
"""

from library_api.models.book import Book  # noqa: F401
from library_api.models.loan import Loan  # noqa: F401
