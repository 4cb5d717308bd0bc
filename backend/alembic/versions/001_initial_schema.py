"""Initial schema — books, loans.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "books",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("isbn", sa.BigInteger, nullable=False),
    )
    op.create_index("ix_books_isbn", "books", ["isbn"], unique=True)

    op.create_table(
        "loans",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("customer", sa.String(255), nullable=False),
        sa.Column("book_id", sa.Integer, sa.ForeignKey("books.id"), nullable=False),
        sa.Column("loan_date", sa.Date, nullable=False),
        sa.Column("returned", sa.Boolean, nullable=True),
    )
    op.create_index("ix_loans_book_id", "loans", ["book_id"])


def downgrade() -> None:
    op.drop_index("ix_loans_book_id", table_name="loans")
    op.drop_table("loans")
    op.drop_index("ix_books_isbn", table_name="books")
    op.drop_table("books")
