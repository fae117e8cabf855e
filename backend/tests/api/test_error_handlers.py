"""Error Handlers — store failures surface as 500 without internal detail."""

from bookexplorer.core.errors import StoreUnavailableError
from bookexplorer.services.book_store import BookStore


async def test_store_unavailable_returns_generic_500(client, monkeypatch):
    async def broken_list(self):
        raise StoreUnavailableError("connection refused to 10.0.0.5", "execute")

    monkeypatch.setattr(BookStore, "list", broken_list)
    res = await client.get("/api/books")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "STORE_UNAVAILABLE"
    assert "10.0.0.5" not in error["message"]


async def test_store_unavailable_on_delete_returns_500(client, monkeypatch):
    async def broken_delete(self, book_id):
        raise StoreUnavailableError("disk full", "commit")

    monkeypatch.setattr(BookStore, "delete", broken_delete)
    res = await client.delete("/api/books/anything")
    assert res.status_code == 500
    assert "disk full" not in res.text
