"""Book Field Validation — pure checks the store runs before every write.

Invariants:
    - title and category are required and non-blank
    - year is a required integer that fits a signed 64-bit column
    - rating is a required integer in [MIN_RATING, MAX_RATING]
    - First violation wins: raises BookValidationError naming the field

Design Decisions:
    - Pure function, no DB: the same rules back create and update, and are
      testable without a session
    - bool is rejected where an int is expected (bool subclasses int in Python)
"""

from bookexplorer.core.domain_types import MIN_RATING, MAX_RATING
from bookexplorer.core.errors import BookValidationError

# Bounds of the BIGINT columns integers are stored in.
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _require_text(value: object, field: str) -> str:
    if value is None:
        raise BookValidationError(f"{field} is required", field)
    if not isinstance(value, str):
        raise BookValidationError(f"{field} must be text", field)
    if not value.strip():
        raise BookValidationError(f"{field} cannot be empty", field)
    return value


def _require_int(value: object, field: str) -> int:
    if value is None:
        raise BookValidationError(f"{field} is required", field)
    if isinstance(value, bool) or not isinstance(value, int):
        raise BookValidationError(f"{field} must be an integer", field)
    if not INT64_MIN <= value <= INT64_MAX:
        raise BookValidationError(f"{field} out of range", field)
    return value


def validate_book_fields(
    title: object, year: object, category: object, rating: object,
) -> dict:
    """Validate the writable fields of a book. Returns them as a dict."""
    title = _require_text(title, "title")
    year = _require_int(year, "year")
    category = _require_text(category, "category")
    rating = _require_int(rating, "rating")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise BookValidationError(
            f"rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}",
            "rating",
        )
    return {
        "title": title,
        "year": year,
        "category": category,
        "rating": rating,
    }
