"""
Bidirectional cursor over a ``LibraryCatalog``.

A cursor holds nothing but an integer position and a reference to the
catalogue it was created from. Every call reads through to the
catalogue's live list, so the cursor always sees the current contents
(a snapshot cursor reads a tuple copied at creation time instead).

States, with ``length = len(catalog)``:

* before-start: ``position < 0``
* valid:        ``0 <= position < length``
* done:         ``position >= length`` (an empty catalogue starts here)

``is_done()`` is true in both before-start and done. Every method is
total: positions outside the list give ``None``, never ``IndexError``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Optional, Sequence

from ..config import CursorBounds, get_settings
from ..models import Book

if TYPE_CHECKING:
    from .store import LibraryCatalog

logger = logging.getLogger(__name__)

BEFORE_START = -1
CURSOR_BOUNDS = ("saturate", "drift")


class BookCursor:
    """Positional traversal handle bound to one catalogue.

    Parameters
    ----------
    catalog : LibraryCatalog
        The catalogue to walk. The cursor never mutates it.
    snapshot : bool
        When true, copy the catalogue's books at construction and walk
        the copy. Later ``add``/``remove`` calls are then invisible to
        this cursor.
    bounds : str, optional
        ``"saturate"`` keeps the position inside ``[-1, len(catalog)]``
        so that one ``previous()`` from done always lands on the last
        book. ``"drift"`` lets the position keep moving in either
        direction; the returned values are the same, only the index
        differs. Defaults to ``BOOKSHELF_CURSOR_BOUNDS``.
    """

    def __init__(
        self,
        catalog: "LibraryCatalog",
        *,
        snapshot: bool = False,
        bounds: Optional[CursorBounds] = None,
    ) -> None:
        if bounds is None:
            bounds = get_settings().cursor_bounds
        if bounds not in CURSOR_BOUNDS:
            raise ValueError(f"bounds must be one of {CURSOR_BOUNDS}, got {bounds!r}")
        self._catalog = catalog
        self._snapshot: Optional[Sequence[Book]] = tuple(catalog.books) if snapshot else None
        self._bounds = bounds
        self._position = 0
        self._version = catalog.version

    @property
    def position(self) -> int:
        return self._position

    @property
    def catalog(self) -> "LibraryCatalog":
        return self._catalog

    @property
    def is_snapshot(self) -> bool:
        return self._snapshot is not None

    def _items(self) -> Sequence[Book]:
        if self._snapshot is not None:
            return self._snapshot
        return self._catalog._live_items()

    def _bounded_position(self) -> int:
        # The catalogue may have shrunk or grown since the last step.
        return min(max(self._position, BEFORE_START), len(self._items()))

    def first(self) -> Optional[Book]:
        """Reset to position 0 and return the first book, or ``None`` if
        the catalogue is empty. This is the only way back to a known state."""
        self._position = 0
        self._version = self._catalog.version
        return self.current_item()

    def next(self) -> Optional[Book]:
        """Step forward and return the book now under the cursor.

        Landing exactly on ``len(catalog)`` is the done state and
        returns ``None``.
        """
        if self._bounds == "saturate":
            self._position = min(self._bounded_position() + 1, len(self._items()))
        else:
            self._position += 1
        return self.current_item()

    def previous(self) -> Optional[Book]:
        """Step backward and return the book now under the cursor.

        From done this re-enters the list at the last book; from the
        first book it moves to before-start and returns ``None``.
        """
        if self._bounds == "saturate":
            self._position = max(self._bounded_position() - 1, BEFORE_START)
        else:
            self._position -= 1
        return self.current_item()

    def is_done(self) -> bool:
        return self._position < 0 or self._position >= len(self._items())

    def current_item(self) -> Optional[Book]:
        items = self._items()
        if 0 <= self._position < len(items):
            return items[self._position]
        return None

    def is_stale(self) -> bool:
        """Return True if the catalogue changed since this cursor was
        created or last reset with ``first()``.

        A stale cursor keeps working, but its position may now skip or
        repeat a book. Snapshot cursors are never stale.
        """
        if self._snapshot is not None:
            return False
        return self._catalog.version != self._version

    def __iter__(self) -> Iterator[Book]:
        # Consumes the cursor: iteration starts at the current position
        # and leaves the cursor in the done (or before-start) state.
        while not self.is_done():
            book = self.current_item()
            if book is not None:
                yield book
            self.next()

    def __repr__(self) -> str:
        kind = "snapshot" if self._snapshot is not None else "live"
        return f"<BookCursor {kind} position={self._position} of {len(self._items())}>"
