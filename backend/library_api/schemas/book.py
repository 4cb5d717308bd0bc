"""Book Schemas — request and response shapes for the catalog API.

Invariants:
    - title and author are required and not blank (whitespace stripped)
    - isbn is a required positive integer no larger than MAX_ISBN
    - An empty body yields exactly three field errors
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from library_api.core.domain_types import MAX_ISBN


class BookCreate(BaseModel):
    """Book payload for POST and PUT."""
    title: str = Field(max_length=255)
    author: str = Field(max_length=255)
    isbn: int = Field(gt=0, le=MAX_ISBN)

    @field_validator("title", "author")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class BookUpdate(BookCreate):
    """Full replacement of the editable book fields."""


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    author: str
    isbn: int
