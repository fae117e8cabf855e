"""Book Form — raw text of the add/edit form and its conversion to API values.

Invariants:
    - Field values are kept as the user typed them until submit
    - rating parses like a leading-integer read; unparsable text becomes 0
      (which the store rejects with 400)
    - year is sent as an int when the whole text parses, otherwise as the raw
      text (which the API rejects with 400)
"""

import re
from dataclasses import dataclass

from bookexplorer.core.domain_types import BookRecord

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


@dataclass(frozen=True)
class BookForm:
    title: str = ""
    year: str = ""
    category: str = ""
    rating: str = ""

    @classmethod
    def from_book(cls, book: BookRecord) -> "BookForm":
        """Form pre-filled with a book's current values."""
        return cls(
            title=book.title,
            year=str(book.year),
            category=book.category,
            rating=str(book.rating),
        )

    def year_value(self) -> int | str:
        try:
            return int(self.year.strip())
        except ValueError:
            return self.year.strip()

    def rating_value(self) -> int:
        return parse_leading_int(self.rating) or 0

    def is_empty(self) -> bool:
        return not any((self.title, self.year, self.category, self.rating))
