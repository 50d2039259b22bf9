"""
In-memory storage for the catalogue.

``LibraryCatalog`` keeps its books in a plain list in insertion order.
Lookups are linear scans: the catalogue is meant for small, single-owner
collections, and the scan order is what defines the tie-break rules
(first added wins for ``search``, first match goes for ``remove``).
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from ..config import CursorBounds, RemovalMatch, get_settings
from ..formatting import format_book
from ..models import Book, Genre
from .cursor import CURSOR_BOUNDS, BookCursor
from .filters import GenreFilter, Predicate

logger = logging.getLogger(__name__)

REMOVAL_MATCHES = ("equality", "identity")


def _title_key(s: Optional[str]) -> str:
    """Normalize a title for case-insensitive comparison.

    Only case is folded: whitespace is significant, so ``" Dune"`` and
    ``"Dune"`` are different titles.

    Parameters
    ----------
    s : Optional[str]
        The string to normalize.

    Returns
    -------
    str
        The casefolded string. An empty string is returned when the
        input is ``None``.
    """
    return (s or "").casefold()


class LibraryCatalog:
    """An ordered, mutable collection of ``Book`` records.

    Parameters
    ----------
    books : iterable of Book, optional
        Initial contents, added in order.
    removal_match : str, optional
        ``"equality"`` makes ``remove`` delete the first book equal to its
        argument; ``"identity"`` only deletes that exact object. The two
        differ once the catalogue holds separately built books with the
        same content. Defaults to ``BOOKSHELF_REMOVAL_MATCH``.
    cursor_bounds : str, optional
        Passed to every cursor created by ``new_cursor``. Defaults to
        ``BOOKSHELF_CURSOR_BOUNDS``.
    """

    def __init__(
        self,
        books=None,
        *,
        removal_match: Optional[RemovalMatch] = None,
        cursor_bounds: Optional[CursorBounds] = None,
    ) -> None:
        settings = get_settings()
        self.removal_match = removal_match or settings.removal_match
        if self.removal_match not in REMOVAL_MATCHES:
            raise ValueError(
                f"removal_match must be one of {REMOVAL_MATCHES}, got {self.removal_match!r}"
            )
        self.cursor_bounds = cursor_bounds or settings.cursor_bounds
        if self.cursor_bounds not in CURSOR_BOUNDS:
            raise ValueError(
                f"cursor_bounds must be one of {CURSOR_BOUNDS}, got {self.cursor_bounds!r}"
            )
        self._books: List[Book] = []
        # Bumped on every add/remove so cursors can tell they are stale.
        self._version = 0
        for book in books or ():
            self.add(book)

    @property
    def books(self) -> Tuple[Book, ...]:
        return tuple(self._books)

    @property
    def version(self) -> int:
        return self._version

    def _live_items(self) -> List[Book]:
        # Read-through access for BookCursor; callers outside the
        # package should use ``books``.
        return self._books

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(tuple(self._books))

    def __contains__(self, book: object) -> bool:
        return book in self._books

    def __repr__(self) -> str:
        return f"<LibraryCatalog books={len(self._books)}>"

    def add(self, book: Book) -> None:
        self._books.append(book)
        self._version += 1
        logger.debug("Added book %r (%d in catalogue)", book.title, len(self._books))

    def remove(self, book: Book) -> bool:
        """Remove the first book matching ``book``.

        Returns True if a book was removed. A book that is not in the
        catalogue is ignored.
        """
        if self.removal_match == "identity":
            index = next((i for i, b in enumerate(self._books) if b is book), None)
        else:
            index = next((i for i, b in enumerate(self._books) if b == book), None)
        if index is None:
            logger.debug("Remove of %r ignored: not in catalogue", book.title)
            return False
        del self._books[index]
        self._version += 1
        logger.debug("Removed book %r at position %d", book.title, index)
        return True

    def search(self, title: Optional[str]) -> Optional[Book]:
        """Return the first book whose title matches ``title`` ignoring
        case, or ``None``. Whitespace is compared as-is, and a ``None``
        title matches nothing (not even an untitled book)."""
        if title is None:
            return None
        wanted = _title_key(title)
        return next((b for b in self._books if _title_key(b.title) == wanted), None)

    def filter_by(self, predicate: Predicate) -> List[Book]:
        """Return a new list of every book satisfying ``predicate``.

        Parameters
        ----------
        predicate : callable
            Any ``Book -> bool`` callable: a plain function, a lambda, or
            one of the ``BookFilter`` objects from ``filters``.

        Returns
        -------
        List[Book]
            Matching books in insertion order. The list is a fresh copy;
            changing it does not affect the catalogue.
        """
        return [b for b in self._books if predicate(b)]

    def filter_by_genre(self, genre: Genre) -> List[Book]:
        return self.filter_by(GenreFilter(genre))

    def new_cursor(self, snapshot: bool = False) -> BookCursor:
        """Create an independent cursor positioned at 0.

        Cursors never modify the catalogue. A live cursor (the default)
        sees later ``add``/``remove`` calls; see ``BookCursor.is_stale``.
        """
        cursor = BookCursor(self, snapshot=snapshot, bounds=self.cursor_bounds)
        logger.debug("Created %s cursor over %d books", "snapshot" if snapshot else "live", len(self._books))
        return cursor

    def format_book(self, book: Optional[Book]) -> str:
        return format_book(book)
