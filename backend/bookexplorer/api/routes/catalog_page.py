"""Catalog Page — serves the browser page rendered from the client view.

Invariants:
    - GET / returns text/html built by render_document; JSON stays under /api
    - Query parameters (page, q, sort, favorites, edit) rebuild the CatalogState
      the same way the controller would reach it: favorites, sort and search
      reset to page 1, then the requested page is applied if it exists
    - The full collection is loaded and filtered in memory, as the client does

Design Decisions:
    - Server-rendered so the page reuses client/view.py; client/static/catalog.js
      only turns clicks into API calls or query-string changes
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from bookexplorer.api.routes.books import get_book_store
from bookexplorer.client.view import render_document
from bookexplorer.config import get_settings
from bookexplorer.core.catalog_state import CatalogState
from bookexplorer.core.domain_types import BookId, BookRecord, SortKey
from bookexplorer.services.book_store import BookStore

logger = logging.getLogger(__name__)
router = APIRouter(tags=["page"])


@router.get("/", response_class=HTMLResponse)
async def catalog_page(
    page: int = 1,
    q: str = "",
    sort: SortKey | None = None,
    favorites: bool = False,
    edit: str | None = None,
    store: BookStore = Depends(get_book_store),
):
    """The catalog page for the given view state."""
    state = CatalogState(page_size=get_settings().page_size)
    books = await store.list()
    state.replace_books([BookRecord.from_json(b.to_dict()) for b in books])
    if favorites:
        state.toggle_favorites_only()
    if sort is not None:
        state.apply_sort(sort)
    state.set_search(q)
    state.go_to_page(page)
    if edit:
        state.begin_edit(BookId(edit))
    return render_document(state)
