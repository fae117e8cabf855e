"""Catalog View — renders the catalog state as HTML fragments.

Invariants:
    - Rendering is pure: same state in, same markup out, no IO
    - Every user-supplied value is HTML-escaped
    - The favorite button reads "Unfavorite" for favorites, "Favorite" otherwise
    - Previous is disabled on page 1; Next is disabled on the last page
      (both disabled when there are no pages)
    - The form submit label is "Add Book" in Adding mode and "Update Book" in Editing mode

Design Decisions:
    - Buttons carry data-action/data-id attributes instead of inline handlers;
      static/catalog.js dispatches them to the API or to query-string changes
    - render_document wraps the fragments in the page served at GET /
"""

from dataclasses import dataclass
from html import escape

from bookexplorer.client.forms import BookForm
from bookexplorer.core.catalog_state import CatalogState
from bookexplorer.core.domain_types import BookRecord, Editing

PAGE_SCRIPT = "/static/catalog.js"

_SORT_OPTIONS = (
    ("", "Sort by"),
    ("title", "Title"),
    ("year", "Year"),
    ("rating", "Rating"),
)


@dataclass(frozen=True)
class RenderedView:
    """Everything the page shows for one state."""
    list_html: str
    pagination_html: str
    form_html: str
    favorites_label: str
    current_page: int
    total_pages: int
    visible: tuple[BookRecord, ...]


def favorite_label(book: BookRecord) -> str:
    return "Unfavorite" if book.favorite else "Favorite"


def favorites_button_label(state: CatalogState) -> str:
    return "Show All" if state.favorites_only else "Show Favorites"


def render_card(book: BookRecord) -> str:
    book_id = escape(book.id)
    return (
        '<div class="book-card">'
        f"<h2>{escape(book.title)}</h2>"
        f"<p>Year: {book.year}</p>"
        f"<p>Category: {escape(book.category)}</p>"
        f"<p>Rating: {book.rating} ⭐</p>"
        f'<button data-action="delete" data-id="{book_id}">Delete</button>'
        f'<button data-action="edit" data-id="{book_id}">Edit</button>'
        f'<button data-action="toggle-favorite" data-id="{book_id}">'
        f"{favorite_label(book)}</button>"
        "</div>"
    )


def render_list(books: list[BookRecord]) -> str:
    """One card per book; an empty-state paragraph when there are none."""
    if not books:
        return '<p class="empty">No books to show.</p>'
    return "\n".join(render_card(b) for b in books)


def render_pagination(total: int, current: int) -> str:
    prev_disabled = " disabled" if current <= 1 else ""
    next_disabled = " disabled" if current >= total else ""
    return (
        f'<button data-action="prev-page"{prev_disabled}>Previous</button>'
        f"<span>Page {current} of {total}</span>"
        f'<button data-action="next-page"{next_disabled}>Next</button>'
    )


def render_form(state: CatalogState) -> str:
    book = state.editing_book
    form = BookForm.from_book(book) if book is not None else BookForm()
    if isinstance(state.mode, Editing):
        opening = f'<form id="add-book-form" data-book-id="{escape(state.mode.book_id)}">'
        submit_label = "Update Book"
        cancel = '<button type="button" data-action="cancel-edit">Cancel</button>'
    else:
        opening = '<form id="add-book-form">'
        submit_label = "Add Book"
        cancel = ""
    return (
        f"{opening}"
        f'<input id="book-title" name="title" placeholder="Title" value="{escape(form.title)}">'
        f'<input id="book-year" name="year" placeholder="Year" value="{escape(form.year)}">'
        f'<input id="book-category" name="category" placeholder="Category" value="{escape(form.category)}">'
        f'<input id="book-rating" name="rating" placeholder="Rating (1-5)" value="{escape(form.rating)}">'
        f'<button type="submit">{submit_label}</button>'
        f"{cancel}"
        "</form>"
    )


def render_page(state: CatalogState) -> RenderedView:
    """Derive the visible page from state and render every fragment."""
    source = state.source()
    visible = state.visible_slice(source)
    total = state.total_pages(source)
    return RenderedView(
        list_html=render_list(visible),
        pagination_html=render_pagination(total, state.current_page),
        form_html=render_form(state),
        favorites_label=favorites_button_label(state),
        current_page=state.current_page,
        total_pages=total,
        visible=tuple(visible),
    )


def render_controls(state: CatalogState) -> str:
    """Search box, sort picker and favorites-only toggle."""
    selected = state.sort_key.value if state.sort_key is not None else ""
    options = "".join(
        f'<option value="{value}"{" selected" if value == selected else ""}>{label}</option>'
        for value, label in _SORT_OPTIONS
    )
    return (
        '<form id="search-form">'
        f'<input id="search-input" name="q" placeholder="Search books" value="{escape(state.search_term)}">'
        '<button type="submit">Search</button>'
        "</form>"
        f'<select id="sort-select" name="sort">{options}</select>'
        f'<button data-action="toggle-favorites">{favorites_button_label(state)}</button>'
    )


def render_document(state: CatalogState) -> str:
    """The full catalog page: controls, form, list and pagination."""
    view = render_page(state)
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en"><head><meta charset="utf-8">'
        "<title>Book Explorer</title></head><body>"
        "<h1>Book Explorer</h1>"
        f'<section id="controls">{render_controls(state)}</section>'
        f'<section id="book-form">{view.form_html}</section>'
        '<p id="status" role="alert"></p>'
        f'<section id="book-list">{view.list_html}</section>'
        f'<nav id="pagination" data-page="{view.current_page}">{view.pagination_html}</nav>'
        f'<script src="{PAGE_SCRIPT}"></script>'
        "</body></html>"
    )
