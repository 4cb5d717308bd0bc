"""Book Schemas — required fields, blank rejection, ORM conversion."""

import pytest
from pydantic import ValidationError

from library_api.core.domain_types import MAX_ISBN
from library_api.models.book import Book
from library_api.schemas.book import BookCreate, BookResponse


def test_book_create_strips_text_fields():
    book = BookCreate(title="  Iracema ", author=" Alencar", isbn=1)
    assert book.title == "Iracema"
    assert book.author == "Alencar"


def test_book_create_empty_payload_has_three_errors():
    with pytest.raises(ValidationError) as exc_info:
        BookCreate.model_validate({})
    assert len(exc_info.value.errors()) == 3


@pytest.mark.parametrize("field", ["title", "author"])
def test_book_create_rejects_blank_text(field):
    data = {"title": "t", "author": "a", "isbn": 1, field: "   "}
    with pytest.raises(ValidationError):
        BookCreate(**data)


def test_book_create_rejects_non_positive_isbn():
    with pytest.raises(ValidationError):
        BookCreate(title="t", author="a", isbn=0)


def test_book_create_isbn_upper_bound():
    assert BookCreate(title="t", author="a", isbn=MAX_ISBN).isbn == MAX_ISBN
    with pytest.raises(ValidationError):
        BookCreate(title="t", author="a", isbn=MAX_ISBN + 1)


def test_book_response_from_orm_object():
    response = BookResponse.model_validate(
        Book(id=3, title="t", author="a", isbn=9),
    )
    assert response.model_dump() == {"id": 3, "title": "t", "author": "a", "isbn": 9}
