"""Book Query — client-side search, favorites filter, sort and page slicing.

Invariants:
    - Search is a case-insensitive substring match on title, category, or the
      decimal text of year
    - Sorting is stable: title ascending (case-insensitive), year ascending,
      rating descending
    - total_pages(n, p) == ceil(n / p); page_slice never raises for any page >= 1

Design Decisions:
    - Functions take and return plain lists so CatalogState stays a thin owner
"""

import math
from collections.abc import Sequence

from bookexplorer.core.domain_types import BookRecord, SortKey


def matches_search(book: BookRecord, term: str) -> bool:
    needle = term.lower()
    return (
        needle in book.title.lower()
        or needle in book.category.lower()
        or needle in str(book.year)
    )


def filter_books(books: Sequence[BookRecord], term: str) -> list[BookRecord]:
    """Books matching term. An empty term matches everything."""
    if not term:
        return list(books)
    return [b for b in books if matches_search(b, term)]


def filter_favorites(books: Sequence[BookRecord]) -> list[BookRecord]:
    return [b for b in books if b.favorite]


def _sort_key(key: SortKey):
    if key is SortKey.TITLE:
        return lambda b: b.title.casefold()
    if key is SortKey.YEAR:
        return lambda b: b.year
    return lambda b: -b.rating


def sort_books(books: list[BookRecord], key: SortKey) -> None:
    """Sort books in place by key."""
    books.sort(key=_sort_key(key))


def total_pages(count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(count / page_size)


def page_slice(
    books: Sequence[BookRecord], page: int, page_size: int,
) -> list[BookRecord]:
    """Sub-sequence [(page-1)*page_size, page*page_size) of books."""
    start = (page - 1) * page_size
    return list(books[start:start + page_size])
