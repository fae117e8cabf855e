"""Catalog Controller — action handlers against the in-process API.

Tests cover:
    - refresh replaces state with the store's collection
    - submit in Adding mode creates; in Editing mode updates and keeps favorite
    - delete asks for confirmation and only deletes when confirmed
    - a controller without a confirm callback never deletes
    - toggle_favorite flips only favorite and refreshes
    - API failures leave state untouched
"""

import pytest

from bookexplorer.client.api_client import BooksApiClient
from bookexplorer.client.controller import CatalogController, DELETE_PROMPT
from bookexplorer.client.forms import BookForm
from bookexplorer.core.catalog_state import CatalogState
from bookexplorer.core.domain_types import Adding, BookId, Editing, SortKey


@pytest.fixture
def api(client):
    return BooksApiClient("http://test/api/books", http=client)


@pytest.fixture
def prompts():
    return []


@pytest.fixture
def controller(api, prompts):
    answers = {"value": True}

    def confirm(message):
        prompts.append(message)
        return answers["value"]

    ctl = CatalogController(api, CatalogState(page_size=8), confirm=confirm)
    ctl.answers = answers
    return ctl


async def test_refresh_loads_collection(controller, api):
    await api.create_book("Dune", 1965, "SciFi", 5)
    view = await controller.refresh()
    assert [b.title for b in view.visible] == ["Dune"]
    assert view.total_pages == 1


async def test_submit_in_adding_mode_creates(controller):
    view = await controller.submit(BookForm("Emma", "1815", "Romance", "4"))
    assert [b.title for b in view.visible] == ["Emma"]
    assert view.visible[0].favorite is False
    assert ">Add Book<" in view.form_html


async def test_submit_invalid_rating_creates_nothing(controller):
    view = await controller.submit(BookForm("Emma", "1815", "Romance", "nine"))
    assert view.visible == ()
    assert controller.state.books == []


async def test_edit_updates_and_restores_adding_mode(controller, api):
    created = await api.create_book("Dune", 1965, "SciFi", 5)
    await api.update_book(created.with_favorite_toggled())
    await controller.refresh()

    view = controller.begin_edit(created.id)
    assert controller.state.mode == Editing(created.id)
    assert 'value="Dune"' in view.form_html

    view = await controller.submit(BookForm("Dune Messiah", "1969", "SciFi", "4"))
    assert controller.state.mode == Adding()
    book = view.visible[0]
    assert (book.title, book.year, book.rating, book.favorite) == (
        "Dune Messiah", 1969, 4, True,
    )
    assert len(controller.state.books) == 1


async def test_failed_edit_keeps_editing_mode(controller, api):
    created = await api.create_book("Dune", 1965, "SciFi", 5)
    await controller.refresh()
    controller.begin_edit(created.id)
    await controller.submit(BookForm("Dune", "1965", "SciFi", "6"))
    assert controller.state.mode == Editing(created.id)
    assert controller.state.books[0].rating == 5


async def test_cancel_edit(controller, api):
    created = await api.create_book("Dune", 1965, "SciFi", 5)
    await controller.refresh()
    controller.begin_edit(created.id)
    controller.cancel_edit()
    assert not controller.is_editing


async def test_delete_requires_confirmation(controller, api, prompts):
    created = await api.create_book("Dune", 1965, "SciFi", 5)
    await controller.refresh()

    controller.answers["value"] = False
    view = await controller.delete(created.id)
    assert prompts == [DELETE_PROMPT]
    assert len(view.visible) == 1
    assert len(await api.list_books()) == 1

    controller.answers["value"] = True
    view = await controller.delete(created.id)
    assert view.visible == ()
    assert await api.list_books() == []


async def test_delete_accepts_async_confirm(api):
    async def confirm(message):
        return True

    ctl = CatalogController(api, confirm=confirm)
    created = await api.create_book("Dune", 1965, "SciFi", 5)
    await ctl.refresh()
    view = await ctl.delete(created.id)
    assert view.visible == ()


async def test_delete_without_confirm_callback_keeps_record(api):
    ctl = CatalogController(api)
    created = await api.create_book("Dune", 1965, "SciFi", 5)
    await ctl.refresh()
    view = await ctl.delete(created.id)
    assert [b.id for b in view.visible] == [created.id]
    assert [b.id for b in await api.list_books()] == [created.id]


async def test_delete_missing_leaves_state(controller, api):
    await api.create_book("Dune", 1965, "SciFi", 5)
    await controller.refresh()
    view = await controller.delete(BookId("missing"))
    assert len(view.visible) == 1


async def test_toggle_favorite_twice_restores(controller, api):
    created = await api.create_book("Dune", 1965, "SciFi", 5)
    await controller.refresh()

    view = await controller.toggle_favorite(created.id)
    assert view.visible[0].favorite is True
    assert "Unfavorite" in view.list_html

    view = await controller.toggle_favorite(created.id)
    assert view.visible[0].favorite is False
    assert view.visible[0].title == "Dune"


async def test_toggle_favorite_unknown_id_is_noop(controller):
    view = await controller.toggle_favorite(BookId("missing"))
    assert view.visible == ()


async def test_favorites_only_view(controller, api):
    dune = await api.create_book("Dune", 1965, "SciFi", 5)
    await api.create_book("Emma", 1815, "Romance", 4)
    await api.update_book(dune.with_favorite_toggled())
    await controller.refresh()

    view = controller.toggle_favorites_only()
    assert view.favorites_label == "Show All"
    assert [b.title for b in view.visible] == ["Dune"]

    view = controller.toggle_favorites_only()
    assert view.favorites_label == "Show Favorites"
    assert len(view.visible) == 2


async def test_paging_through_collection(controller, api):
    for i in range(10):
        await api.create_book(f"Book {i}", 2000 + i, "Misc", 3)
    view = await controller.refresh()
    assert (view.current_page, view.total_pages, len(view.visible)) == (1, 2, 8)

    view = controller.next_page()
    assert (view.current_page, len(view.visible)) == (2, 2)
    view = controller.next_page()
    assert view.current_page == 2

    view = controller.prev_page()
    assert view.current_page == 1


async def test_sort_survives_refresh(controller, api):
    await api.create_book("Dune", 1965, "SciFi", 5)
    await api.create_book("Emma", 1815, "Romance", 4)
    await controller.refresh()
    controller.sort("year")
    assert controller.state.sort_key is SortKey.YEAR
    view = await controller.submit(BookForm("Beowulf", "1000", "Epic", "3"))
    assert [b.title for b in view.visible] == ["Beowulf", "Emma", "Dune"]


async def test_refresh_failure_keeps_books(controller, api, monkeypatch):
    await api.create_book("Dune", 1965, "SciFi", 5)
    await controller.refresh()
    monkeypatch.setattr(api, "base_url", "http://test/api/missing")
    view = await controller.refresh()
    assert [b.title for b in view.visible] == ["Dune"]
