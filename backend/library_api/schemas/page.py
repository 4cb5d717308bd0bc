"""Page Schemas — paginated result envelope shared by search endpoints."""

from typing import Callable, Generic, TypeVar

from pydantic import BaseModel

from library_api.core.pagination import Page

T = TypeVar("T")


class Pageable(BaseModel):
    page_number: int
    page_size: int


class PageResponse(BaseModel, Generic[T]):
    """One page of results; pageable echoes the requested page and size."""
    content: list[T]
    total_elements: int
    total_pages: int
    last: bool
    pageable: Pageable

    @classmethod
    def from_page(cls, page: Page, convert: Callable) -> "PageResponse[T]":
        converted = page.map(convert)
        return cls(
            content=converted.content,
            total_elements=converted.total_elements,
            total_pages=converted.total_pages,
            last=converted.is_last,
            pageable=Pageable(
                page_number=page.request.page,
                page_size=page.request.size,
            ),
        )
