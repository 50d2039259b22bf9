"""
In-memory book catalogue with bidirectional cursors.

The ``catalog`` sub-package holds the collection itself
(``LibraryCatalog``), the predicate objects used for filtering and the
cursor used for ordered walks. ``models`` defines the ``Book`` record.
"""

from .models import Book, Genre  # noqa: F401
from .catalog import (  # noqa: F401
    AllOf,
    AnyOf,
    AuthorFilter,
    BookCursor,
    BookFilter,
    GenreFilter,
    LibraryCatalog,
    Not,
    where,
)
from .formatting import format_book  # noqa: F401

__version__ = "1.0.0"
