"""Search Filters — query-by-example criteria for books and loans.

Invariants:
    - None fields are ignored (never matched against NULL)
    - Blank strings are normalized to None
    - BookFilter: title/author match as case-insensitive substrings, isbn exactly
    - LoanFilter: isbn OR customer; an empty filter matches every loan
"""

from dataclasses import dataclass


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class BookFilter:
    title: str | None = None
    author: str | None = None
    isbn: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "title", _blank_to_none(self.title))
        object.__setattr__(self, "author", _blank_to_none(self.author))


@dataclass(frozen=True)
class LoanFilter:
    isbn: int | None = None
    customer: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "customer", _blank_to_none(self.customer))
