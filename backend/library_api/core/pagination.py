"""Pagination — zero-based offset paging shared by book and loan searches.

Invariants:
    - page is zero-based and never negative
    - size is between 1 and MAX_PAGE_SIZE
    - Page echoes the PageRequest it was built from
    - total_pages is 0 when there are no elements
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """Requested slice of a result set."""
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page < 0:
            raise ValueError(f"page must be >= 0, got {self.page}")
        if not 1 <= self.size <= MAX_PAGE_SIZE:
            raise ValueError(
                f"size must be between 1 and {MAX_PAGE_SIZE}, got {self.size}",
            )

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """One page of results plus the total count across all pages."""
    content: list[T] = field(default_factory=list)
    total_elements: int = 0
    request: PageRequest = field(default_factory=PageRequest)

    @property
    def total_pages(self) -> int:
        # ceil division without floats
        return -(-self.total_elements // self.request.size)

    @property
    def is_last(self) -> bool:
        return self.request.page + 1 >= self.total_pages

    def map(self, fn) -> "Page":
        """Same page metadata, content transformed by fn."""
        return Page(
            content=[fn(item) for item in self.content],
            total_elements=self.total_elements,
            request=self.request,
        )
