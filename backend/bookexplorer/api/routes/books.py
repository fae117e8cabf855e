"""Books Routes — HTTP-to-store translation for /api/books.

Invariants:
    - One route per store operation; routes hold no business logic
    - POST returns 201 with the new record; DELETE returns 200 with a confirmation message
    - Domain errors propagate to the global handlers (400 / 404 / 500)

Design Decisions:
    - BookStore built per request from the get_db session (stateless routes)
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from bookexplorer.infrastructure.database import get_db
from bookexplorer.schemas.book import (
    BookCreate, BookResponse, BookUpdate, DeleteResponse,
)
from bookexplorer.services.book_store import BookStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/books", tags=["books"])


def get_book_store(db: AsyncSession = Depends(get_db)) -> BookStore:
    return BookStore(db)


@router.get("", response_model=list[BookResponse])
async def list_books(store: BookStore = Depends(get_book_store)):
    """Every book in store order."""
    return await store.list()


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: str, store: BookStore = Depends(get_book_store)):
    return await store.get(book_id)


@router.post(
    "", response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookCreate, store: BookStore = Depends(get_book_store),
):
    """Create a book. favorite in the body is ignored."""
    return await store.create(
        title=body.title, year=body.year,
        category=body.category, rating=body.rating,
    )


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: str, body: BookUpdate, store: BookStore = Depends(get_book_store),
):
    """Replace all mutable fields of a book."""
    return await store.update(
        book_id,
        title=body.title, year=body.year, category=body.category,
        rating=body.rating, favorite=body.favorite,
    )


@router.delete("/{book_id}", response_model=DeleteResponse)
async def delete_book(book_id: str, store: BookStore = Depends(get_book_store)):
    await store.delete(book_id)
    return DeleteResponse(message="Book deleted successfully")
