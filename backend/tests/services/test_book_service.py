"""Book Service — catalog rules against a mocked repository.

Tests cover:
    - save() persists unique isbn, rejects duplicates without writing
    - get_by_id() passes through found / missing
    - update()/delete() reject null book or null id
    - update() rejects isbn held by another book
    - delete() rejects books with loans
    - find() builds the PageRequest from page/size
"""

import pytest
from unittest.mock import AsyncMock

from library_api.core.errors import BusinessRuleError, InvalidIdentifierError
from library_api.core.filters import BookFilter
from library_api.core.pagination import Page, PageRequest
from library_api.models.book import Book
from library_api.services.book_service import BookService


def _make_repo():
    repo = AsyncMock()
    repo.exists_by_isbn.return_value = False
    repo.has_loans.return_value = False
    repo.get_by_isbn.return_value = None
    repo.save.side_effect = lambda book: book
    return repo


def _valid_book(book_id=None) -> Book:
    return Book(id=book_id, title="o carrasco", author="draven", isbn=123321)


async def test_save_persists_book_with_unique_isbn():
    repo = _make_repo()
    saved = Book(id=10, title="o carrasco", author="draven", isbn=123321)
    repo.save.side_effect = None
    repo.save.return_value = saved

    result = await BookService(repo).save(_valid_book())

    assert result.id == 10
    assert result.isbn == 123321
    repo.save.assert_awaited_once()


async def test_save_rejects_duplicate_isbn():
    repo = _make_repo()
    repo.exists_by_isbn.return_value = True

    with pytest.raises(BusinessRuleError, match="Isbn already registered"):
        await BookService(repo).save(_valid_book())

    repo.save.assert_not_awaited()


async def test_get_by_id_returns_book():
    repo = _make_repo()
    book = _valid_book(book_id=1)
    repo.get_by_id.return_value = book

    assert await BookService(repo).get_by_id(1) is book
    repo.get_by_id.assert_awaited_once_with(1)


async def test_get_by_id_returns_none_when_missing():
    repo = _make_repo()
    repo.get_by_id.return_value = None

    assert await BookService(repo).get_by_id(1) is None


async def test_get_by_isbn_delegates_to_repository():
    repo = _make_repo()
    book = _valid_book(book_id=3)
    repo.get_by_isbn.return_value = book

    assert await BookService(repo).get_by_isbn(123321) is book


async def test_delete_removes_book():
    repo = _make_repo()
    book = _valid_book(book_id=1)

    await BookService(repo).delete(book)

    repo.delete.assert_awaited_once_with(book)


@pytest.mark.parametrize("book", [None, Book(title="t", author="a", isbn=1)])
async def test_delete_rejects_missing_id(book):
    repo = _make_repo()

    with pytest.raises(InvalidIdentifierError, match="Book id cant be null."):
        await BookService(repo).delete(book)

    repo.delete.assert_not_awaited()


async def test_delete_rejects_book_with_loans():
    repo = _make_repo()
    repo.has_loans.return_value = True

    with pytest.raises(BusinessRuleError):
        await BookService(repo).delete(_valid_book(book_id=1))

    repo.delete.assert_not_awaited()


async def test_update_applies_changes():
    repo = _make_repo()
    book = _valid_book(book_id=1)

    result = await BookService(repo).update(
        book, {"title": "houly", "author": "annhanham", "isbn": 555},
    )

    assert (result.id, result.title, result.author, result.isbn) == (
        1, "houly", "annhanham", 555,
    )
    repo.save.assert_awaited_once_with(book)


@pytest.mark.parametrize("book", [None, Book(title="t", author="a", isbn=1)])
async def test_update_rejects_missing_id(book):
    repo = _make_repo()

    with pytest.raises(InvalidIdentifierError):
        await BookService(repo).update(book, {"title": "x"})

    repo.save.assert_not_awaited()


async def test_update_rejects_isbn_of_another_book():
    repo = _make_repo()
    repo.get_by_isbn.return_value = Book(id=2, title="x", author="y", isbn=555)
    book = _valid_book(book_id=1)

    with pytest.raises(BusinessRuleError):
        await BookService(repo).update(book, {"isbn": 555})

    assert book.isbn == 123321
    repo.save.assert_not_awaited()


async def test_find_passes_filter_and_page_request():
    repo = _make_repo()
    book = _valid_book(book_id=1)
    request = PageRequest(page=0, size=100)
    repo.find.return_value = Page(content=[book], total_elements=1, request=request)
    book_filter = BookFilter(title="carrasco")

    page = await BookService(repo).find(book_filter, 0, 100)

    assert page.content == [book]
    assert page.total_elements == 1
    repo.find.assert_awaited_once_with(book_filter, request)
