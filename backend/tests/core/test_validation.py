"""Book Field Validation — tests for the pure checks behind every store write.

Tests cover:
    - Valid fields pass through unchanged
    - Rating bounds 1 and 5 accepted; 0 and 6 rejected
    - Missing (None) fields rejected with the field name
    - Blank title/category rejected
    - bool and non-int values rejected for year/rating
    - year has no calendar bounds but must fit a signed 64-bit integer
"""

import pytest

from bookexplorer.core.errors import BookValidationError
from bookexplorer.core.validation import INT64_MAX, INT64_MIN, validate_book_fields


def test_valid_fields_returned():
    fields = validate_book_fields("Dune", 1965, "SciFi", 5)
    assert fields == {
        "title": "Dune", "year": 1965, "category": "SciFi", "rating": 5,
    }


@pytest.mark.parametrize("rating", [1, 5])
def test_rating_bounds_are_inclusive(rating):
    assert validate_book_fields("Emma", 1815, "Romance", rating)["rating"] == rating


@pytest.mark.parametrize("rating", [0, 6, -1])
def test_rating_outside_range_rejected(rating):
    with pytest.raises(BookValidationError) as exc:
        validate_book_fields("Emma", 1815, "Romance", rating)
    assert exc.value.field == "rating"
    assert exc.value.http_status == 400


@pytest.mark.parametrize(
    "field,args",
    [
        ("title", (None, 1965, "SciFi", 5)),
        ("year", ("Dune", None, "SciFi", 5)),
        ("category", ("Dune", 1965, None, 5)),
        ("rating", ("Dune", 1965, "SciFi", None)),
    ],
)
def test_missing_field_rejected(field, args):
    with pytest.raises(BookValidationError) as exc:
        validate_book_fields(*args)
    assert exc.value.field == field
    assert "required" in exc.value.message


def test_blank_title_rejected():
    with pytest.raises(BookValidationError) as exc:
        validate_book_fields("   ", 1965, "SciFi", 5)
    assert exc.value.field == "title"


def test_blank_category_rejected():
    with pytest.raises(BookValidationError) as exc:
        validate_book_fields("Dune", 1965, "", 5)
    assert exc.value.field == "category"


def test_bool_rating_rejected():
    with pytest.raises(BookValidationError) as exc:
        validate_book_fields("Dune", 1965, "SciFi", True)
    assert exc.value.field == "rating"


def test_text_year_rejected():
    with pytest.raises(BookValidationError) as exc:
        validate_book_fields("Dune", "1965", "SciFi", 5)
    assert exc.value.field == "year"


def test_year_has_no_calendar_range_check():
    assert validate_book_fields("Old", -800, "Epic", 3)["year"] == -800


@pytest.mark.parametrize("year", [INT64_MIN, INT64_MAX])
def test_year_at_64bit_bounds_accepted(year):
    assert validate_book_fields("Far", year, "Epic", 3)["year"] == year


@pytest.mark.parametrize("year", [INT64_MIN - 1, INT64_MAX + 1, 10 ** 19])
def test_year_beyond_64bit_rejected(year):
    with pytest.raises(BookValidationError) as exc:
        validate_book_fields("Far", year, "Epic", 3)
    assert exc.value.field == "year"
    assert exc.value.message == "year out of range"
