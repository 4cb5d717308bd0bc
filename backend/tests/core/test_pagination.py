"""Pagination — PageRequest bounds and Page metadata."""

import pytest

from library_api.core.pagination import (
    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, Page, PageRequest,
)


def test_page_request_defaults():
    request = PageRequest()
    assert request.page == 0
    assert request.size == DEFAULT_PAGE_SIZE
    assert request.offset == 0


def test_offset_is_page_times_size():
    assert PageRequest(page=3, size=20).offset == 60


@pytest.mark.parametrize("page, size", [
    (-1, 10),
    (0, 0),
    (0, MAX_PAGE_SIZE + 1),
])
def test_page_request_rejects_out_of_range(page, size):
    with pytest.raises(ValueError):
        PageRequest(page=page, size=size)


@pytest.mark.parametrize("total, size, pages", [
    (0, 10, 0),
    (1, 10, 1),
    (10, 10, 1),
    (11, 10, 2),
])
def test_total_pages(total, size, pages):
    page = Page(content=[], total_elements=total, request=PageRequest(0, size))
    assert page.total_pages == pages


def test_is_last():
    assert Page(total_elements=25, request=PageRequest(2, 10)).is_last is True
    assert Page(total_elements=25, request=PageRequest(1, 10)).is_last is False
    assert Page(total_elements=0, request=PageRequest(0, 10)).is_last is True


def test_map_keeps_metadata():
    page = Page(content=[1, 2], total_elements=12, request=PageRequest(1, 2))
    mapped = page.map(str)
    assert mapped.content == ["1", "2"]
    assert mapped.total_elements == 12
    assert mapped.request == PageRequest(1, 2)
