"""Book ORM — one row per catalog entry in the books collection.

Invariants:
    - id is an opaque 32-char hex string assigned at insert, never changed
    - seq is the autoincrement insertion counter; it defines listing order
    - title, year, category, rating are non-nullable
    - year is BIGINT; validate_book_fields keeps it inside the signed 64-bit range
    - rating CHECK constraint mirrors validate_book_fields (1..5)
    - favorite defaults to false

Design Decisions:
    - seq is the primary key so every backend autoincrements it (SQLite only
      does so for an INTEGER PRIMARY KEY); clients only ever see the unique id
    - created_at is kept as metadata, not as a sort key: two inserts can share
      a timestamp
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    BigInteger, Boolean, CheckConstraint, DateTime, Integer, String, Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from bookexplorer.db.base import Base


def _new_book_id() -> str:
    return uuid.uuid4().hex


class Book(Base):
    """A catalog entry."""
    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_books_rating_range"),
    )

    seq: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    id: Mapped[str] = mapped_column(
        String(32), unique=True, nullable=False, default=_new_book_id,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int] = mapped_column(BigInteger, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    favorite: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "year": self.year,
            "category": self.category,
            "rating": self.rating,
            "favorite": self.favorite,
        }
