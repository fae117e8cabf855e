"""Book Store — list/create/get/update/delete over one async database session.

Invariants:
    - list() returns every book in insertion order (Book.seq); no filtering or paging
    - create() forces favorite=False and assigns a new opaque id
    - update() replaces title, year, category, rating and favorite together
    - Fields are validated (validate_book_fields) before any row is touched
    - Missing ids raise BookNotFoundError; every successful write commits immediately

Design Decisions:
    - Session injected by the caller (get_db in routes, fixtures in tests)
    - No version column or locking: two concurrent updates race and the later commit wins
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookexplorer.core.errors import BookNotFoundError, BookValidationError
from bookexplorer.core.validation import validate_book_fields
from bookexplorer.models.book import Book

logger = logging.getLogger(__name__)


class BookStore:
    """Persistent book collection."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list(self) -> list[Book]:
        result = await self._db.execute(
            select(Book).order_by(Book.seq),
        )
        return list(result.scalars().all())

    async def get(self, book_id: str) -> Book:
        result = await self._db.execute(select(Book).where(Book.id == book_id))
        book = result.scalar_one_or_none()
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    async def create(
        self, title: str, year: int, category: str, rating: int,
    ) -> Book:
        fields = validate_book_fields(title, year, category, rating)
        book = Book(**fields, favorite=False)
        self._db.add(book)
        await self._db.commit()
        await self._db.refresh(book)
        logger.info(f"Book created: {book.title}", extra={"book_id": book.id})
        return book

    async def update(
        self,
        book_id: str,
        title: str,
        year: int,
        category: str,
        rating: int,
        favorite: bool,
    ) -> Book:
        fields = validate_book_fields(title, year, category, rating)
        if not isinstance(favorite, bool):
            raise BookValidationError("favorite must be a boolean", "favorite")
        book = await self.get(book_id)
        for name, value in fields.items():
            setattr(book, name, value)
        book.favorite = favorite
        await self._db.commit()
        await self._db.refresh(book)
        logger.info(f"Book updated: {book.title}", extra={"book_id": book.id})
        return book

    async def delete(self, book_id: str) -> None:
        book = await self.get(book_id)
        await self._db.delete(book)
        await self._db.commit()
        logger.info("Book deleted", extra={"book_id": book_id})
