"""Books API Client — thin async wrapper over httpx for the /api/books endpoints.

Invariants:
    - One request per call: no retry, no cancellation, no client timeout
    - Transport failures and non-2xx responses raise BookApiError (core/errors.py)
    - Responses are decoded into BookRecord values

Design Decisions:
    - httpx.AsyncClient injected or owned: tests pass one bound to the ASGI app
"""

import logging

import httpx

from bookexplorer.core.domain_types import BookRecord
from bookexplorer.core.errors import BookApiError, ErrorContext

logger = logging.getLogger(__name__)


class BooksApiClient:
    """Calls the catalog API at base_url (e.g. http://localhost:5000/api/books)."""

    def __init__(self, base_url: str, http: httpx.AsyncClient | None = None):
        self.base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.AsyncClient(timeout=None)

    async def __aenter__(self) -> "BooksApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def list_books(self) -> list[BookRecord]:
        data = await self._request("GET", self.base_url)
        return [BookRecord.from_json(item) for item in data]

    async def create_book(
        self, title: str, year: int | str, category: str, rating: int,
    ) -> BookRecord:
        payload = {
            "title": title, "year": year, "category": category,
            "rating": rating, "favorite": False,
        }
        data = await self._request("POST", self.base_url, json=payload)
        return BookRecord.from_json(data)

    async def update_book(self, book: BookRecord) -> BookRecord:
        """Send every mutable field of book (full replacement)."""
        return await self.replace_book(
            book.id, title=book.title, year=book.year, category=book.category,
            rating=book.rating, favorite=book.favorite,
        )

    async def replace_book(
        self,
        book_id: str,
        title: str,
        year: int | str,
        category: str,
        rating: int,
        favorite: bool,
    ) -> BookRecord:
        payload = {
            "title": title, "year": year, "category": category,
            "rating": rating, "favorite": favorite,
        }
        data = await self._request(
            "PUT", f"{self.base_url}/{book_id}", json=payload,
        )
        return BookRecord.from_json(data)

    async def delete_book(self, book_id: str) -> str:
        data = await self._request("DELETE", f"{self.base_url}/{book_id}")
        return data.get("message", "")

    async def _request(self, method: str, url: str, **kwargs):
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise BookApiError(f"{method} {url} failed: {e}")
        if response.is_error:
            logger.warning(
                f"{method} {url} returned {response.status_code}",
                extra={"status_code": response.status_code},
            )
            raise BookApiError(
                _error_message(response),
                status_code=response.status_code,
                context=ErrorContext(operation=method),
            )
        return response.json()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return f"HTTP {response.status_code}"
