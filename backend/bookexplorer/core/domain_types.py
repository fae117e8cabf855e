"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BookId wraps the store-assigned opaque string id
    - Rating is bounded 1–5 (MIN_RATING..MAX_RATING)
    - UiMode is exactly Adding | Editing(book_id)
    - All sort options encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost
    - BookRecord is the client-side, immutable view of a Book JSON object;
      the ORM model stays on the server
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

BookId = NewType("BookId", str)


# ─── Value Types ─────────────────────────────────────────────────

Rating = NewType("Rating", int)   # 1–5

MIN_RATING = 1
MAX_RATING = 5
DEFAULT_PAGE_SIZE = 8


# ─── Enums ───────────────────────────────────────────────────────

class SortKey(str, Enum):
    """Client-side sort orders for the in-memory collection."""
    TITLE = "title"     # lexicographic, case-insensitive
    YEAR = "year"       # ascending
    RATING = "rating"   # descending


# ─── UI Mode ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Adding:
    """The form creates a new book on submit."""


@dataclass(frozen=True)
class Editing:
    """The form updates book_id on submit."""
    book_id: BookId


UiMode = Adding | Editing


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class BookRecord:
    """A book as the client sees it (the API's Book JSON shape)."""
    id: BookId
    title: str
    year: int
    category: str
    rating: int
    favorite: bool = False

    @classmethod
    def from_json(cls, data: dict) -> "BookRecord":
        return cls(
            id=BookId(str(data["id"])),
            title=data["title"],
            year=int(data["year"]),
            category=data["category"],
            rating=int(data["rating"]),
            favorite=bool(data.get("favorite", False)),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "year": self.year,
            "category": self.category,
            "rating": self.rating,
            "favorite": self.favorite,
        }

    def with_favorite_toggled(self) -> "BookRecord":
        return replace(self, favorite=not self.favorite)
