"""Book ORM — catalog record.

Invariants:
    - id is an autoincrement integer primary key
    - isbn is unique (unique index; BookService pre-checks before insert)
    - title and author are non-nullable
"""

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from library_api.db.base import Base


class Book(Base):
    """Catalog entry identified by its ISBN."""
    __tablename__ = "books"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[int] = mapped_column(
        BigInteger, nullable=False, unique=True, index=True,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id!r}, isbn={self.isbn!r}, title={self.title!r})"
