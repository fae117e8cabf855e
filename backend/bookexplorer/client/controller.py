"""Catalog Controller — user actions wired to CatalogState, the API and the view.

Invariants:
    - Every handler returns a fresh RenderedView of the current state
    - Mutations (submit, delete, toggle_favorite) always finish with refresh()
    - submit() consults state.mode: Adding → create, Editing(id) → update
    - delete() only calls the API after confirm() returns True; without a
      confirm callback every delete is refused
    - search/sort/favorites/paging never touch the network
    - BookApiError is logged and the current view returned unchanged

Design Decisions:
    - State is owned here and passed to the view explicitly; no module globals
    - confirm is injected so a browser bridge, a CLI prompt or a test can answer it
"""

import logging
from collections.abc import Awaitable, Callable

from bookexplorer.client.api_client import BooksApiClient
from bookexplorer.client.forms import BookForm
from bookexplorer.client.view import RenderedView, render_page
from bookexplorer.core.catalog_state import CatalogState
from bookexplorer.core.domain_types import Adding, BookId, Editing, SortKey
from bookexplorer.core.errors import BookApiError

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this book?"

Confirm = Callable[[str], bool | Awaitable[bool]]


def _refuse(message: str) -> bool:
    """Default confirm: with nobody to ask, nothing is deleted."""
    return False


class CatalogController:
    """Handles catalog page actions."""

    def __init__(
        self,
        api: BooksApiClient,
        state: CatalogState | None = None,
        confirm: Confirm | None = None,
    ):
        self.api = api
        self.state = state or CatalogState()
        self._confirm = confirm or _refuse

    def render(self) -> RenderedView:
        return render_page(self.state)

    async def refresh(self) -> RenderedView:
        """Re-fetch the whole collection and replace local state."""
        try:
            books = await self.api.list_books()
        except BookApiError as e:
            logger.warning(f"Refresh failed: {e.message}")
            return self.render()
        self.state.replace_books(books)
        return self.render()

    # ─── Mutations ───────────────────────────────────────────────

    async def submit(self, form: BookForm) -> RenderedView:
        """Create or update depending on the form mode."""
        mode = self.state.mode
        try:
            if isinstance(mode, Editing):
                await self._update_from_form(mode.book_id, form)
            else:
                await self.api.create_book(
                    title=form.title,
                    year=form.year_value(),
                    category=form.category,
                    rating=form.rating_value(),
                )
        except BookApiError as e:
            logger.warning(f"Submit failed: {e.message}")
            return self.render()
        self.state.finish_edit()
        return await self.refresh()

    async def _update_from_form(self, book_id: BookId, form: BookForm) -> None:
        book = self.state.find(book_id)
        favorite = book.favorite if book is not None else False
        await self.api.replace_book(
            book_id,
            title=form.title,
            year=form.year_value(),
            category=form.category,
            rating=form.rating_value(),
            favorite=favorite,
        )

    async def delete(self, book_id: BookId) -> RenderedView:
        answer = self._confirm(DELETE_PROMPT)
        if not isinstance(answer, bool):
            answer = await answer
        if not answer:
            return self.render()
        try:
            await self.api.delete_book(book_id)
        except BookApiError as e:
            logger.warning(f"Delete failed: {e.message}", extra={"book_id": book_id})
            return self.render()
        if self.state.mode == Editing(book_id):
            self.state.finish_edit()
        return await self.refresh()

    async def toggle_favorite(self, book_id: BookId) -> RenderedView:
        """Resend the full record with only favorite flipped."""
        book = self.state.find(book_id)
        if book is None:
            return self.render()
        try:
            await self.api.update_book(book.with_favorite_toggled())
        except BookApiError as e:
            logger.warning(
                f"Favorite toggle failed: {e.message}", extra={"book_id": book_id},
            )
            return self.render()
        return await self.refresh()

    # ─── Form mode ───────────────────────────────────────────────

    def begin_edit(self, book_id: BookId) -> RenderedView:
        self.state.begin_edit(book_id)
        return self.render()

    def cancel_edit(self) -> RenderedView:
        self.state.finish_edit()
        return self.render()

    @property
    def is_editing(self) -> bool:
        return not isinstance(self.state.mode, Adding)

    # ─── Local view changes ──────────────────────────────────────

    def search(self, term: str) -> RenderedView:
        self.state.set_search(term)
        return self.render()

    def sort(self, key: SortKey | str) -> RenderedView:
        self.state.apply_sort(SortKey(key))
        return self.render()

    def toggle_favorites_only(self) -> RenderedView:
        self.state.toggle_favorites_only()
        return self.render()

    def next_page(self) -> RenderedView:
        self.state.next_page()
        return self.render()

    def prev_page(self) -> RenderedView:
        self.state.prev_page()
        return self.render()
