"""Catalog State — the client's in-memory collection plus view state.

Invariants:
    - books is replaced wholesale after every fetch, never patched per record
    - current_page is 1-based and stays within [1, max(1, total_pages)]
    - Changing the search term, sort key or favorites toggle resets current_page to 1
    - The search term is kept as typed; only "" matches everything
    - Refresh keeps current_page, clamped to the new page count
    - mode is Adding() unless an edit is in progress

Design Decisions:
    - Dataclass with derived views (source, visible): pure, testable without mocks
    - The remembered sort key is re-applied after each refresh, so a mutation
      does not silently revert the user's chosen order
"""

from dataclasses import dataclass, field

from bookexplorer.core.book_query import (
    filter_books, filter_favorites, page_slice, sort_books, total_pages,
)
from bookexplorer.core.domain_types import (
    Adding, BookId, BookRecord, DEFAULT_PAGE_SIZE, Editing, SortKey, UiMode,
)


@dataclass
class CatalogState:
    """Client view state — pure dataclass, no IO."""

    books: list[BookRecord] = field(default_factory=list)
    page_size: int = DEFAULT_PAGE_SIZE
    current_page: int = 1
    favorites_only: bool = False
    search_term: str = ""
    sort_key: SortKey | None = None
    mode: UiMode = field(default_factory=Adding)

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")

    # ─── Derived views ───────────────────────────────────────────

    def source(self) -> list[BookRecord]:
        """The list being paginated: favorites filter, then search filter."""
        books = filter_favorites(self.books) if self.favorites_only else self.books
        return filter_books(books, self.search_term)

    def total_pages(self, source: list[BookRecord] | None = None) -> int:
        if source is None:
            source = self.source()
        return total_pages(len(source), self.page_size)

    def visible_slice(self, source: list[BookRecord] | None = None) -> list[BookRecord]:
        if source is None:
            source = self.source()
        return page_slice(source, self.current_page, self.page_size)

    def find(self, book_id: str) -> BookRecord | None:
        return next((b for b in self.books if b.id == book_id), None)

    # ─── Collection ──────────────────────────────────────────────

    def replace_books(self, books: list[BookRecord]) -> None:
        self.books = list(books)
        if self.sort_key is not None:
            sort_books(self.books, self.sort_key)
        self._clamp_page()

    # ─── Paging ──────────────────────────────────────────────────

    def go_to_page(self, page: int) -> bool:
        """Move to page if it exists. Out-of-range requests are no-ops."""
        if not 1 <= page <= self.total_pages():
            return False
        self.current_page = page
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self.current_page + 1)

    def prev_page(self) -> bool:
        return self.go_to_page(self.current_page - 1)

    def _clamp_page(self) -> None:
        self.current_page = min(max(1, self.current_page), max(1, self.total_pages()))

    # ─── Filters and sort ────────────────────────────────────────

    def set_search(self, term: str) -> None:
        self.search_term = term
        self.current_page = 1

    def apply_sort(self, key: SortKey) -> None:
        self.sort_key = key
        sort_books(self.books, key)
        self.current_page = 1

    def toggle_favorites_only(self) -> bool:
        self.favorites_only = not self.favorites_only
        self.current_page = 1
        return self.favorites_only

    # ─── Form mode ───────────────────────────────────────────────

    def begin_edit(self, book_id: BookId) -> BookRecord | None:
        """Switch to Editing(book_id). Unknown ids leave the mode unchanged."""
        book = self.find(book_id)
        if book is not None:
            self.mode = Editing(book.id)
        return book

    def finish_edit(self) -> None:
        self.mode = Adding()

    @property
    def editing_book(self) -> BookRecord | None:
        if isinstance(self.mode, Editing):
            return self.find(self.mode.book_id)
        return None
