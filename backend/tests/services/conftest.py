"""Service test fixtures — a BookStore on the test session."""

import pytest

from bookexplorer.services.book_store import BookStore


@pytest.fixture
def store(test_db):
    return BookStore(test_db)
