"""
Catalogue package: storage, filtering and traversal.

``LibraryCatalog`` (``store``) owns an ordered list of books and answers
title searches and predicate filters. Ordered walks go through a
``BookCursor`` (``cursor``) obtained from ``LibraryCatalog.new_cursor()``;
the cursor borrows the catalogue and reads its current contents on every
call. Filter predicates live in ``filters`` and can be combined with
``&``, ``|`` and ``~``.
"""

from .cursor import BookCursor  # noqa: F401
from .filters import (  # noqa: F401
    AllOf,
    AnyOf,
    AuthorFilter,
    BookFilter,
    GenreFilter,
    Not,
    where,
)
from .store import LibraryCatalog  # noqa: F401
