# bookshelf/formatting.py
from typing import Iterable, List, Optional

from .models import Book

MISSING = "(no book)"


def format_book(book: Optional[Book]) -> str:
    """Render one catalogue line, e.g. ``Dune by Frank Herbert (ISBN: ..., Genre: ScienceFiction)``.

    ``None`` (a search miss or an exhausted cursor) renders as ``MISSING``
    so callers can print lookup results without checking them first.
    """
    if book is None:
        return MISSING
    return str(book)


def format_books(books: Iterable[Book]) -> List[str]:
    return [format_book(b) for b in books]
