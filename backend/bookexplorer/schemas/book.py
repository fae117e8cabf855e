"""Book Schemas — request bodies and response shape for /api/books.

Invariants:
    - BookCreate requires title, year, category, rating; favorite is ignored
    - BookUpdate requires every mutable field including favorite
    - Unknown body fields (e.g. id resent by a client) are ignored
    - BookResponse is exactly {id, title, year, category, rating, favorite}

Design Decisions:
    - Types only, no ranges: a rating of 0 passes the schema and is rejected by
      the store with BookValidationError, so both layers report 400 the same way
"""

from pydantic import BaseModel, ConfigDict


class BookCreate(BaseModel):
    """Book creation payload."""
    model_config = ConfigDict(extra="ignore")

    title: str
    year: int
    category: str
    rating: int
    favorite: bool | None = None


class BookUpdate(BaseModel):
    """Full replacement of a book's mutable fields."""
    model_config = ConfigDict(extra="ignore")

    title: str
    year: int
    category: str
    rating: int
    favorite: bool


class BookResponse(BaseModel):
    """Public book representation."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    year: int
    category: str
    rating: int
    favorite: bool


class DeleteResponse(BaseModel):
    message: str
