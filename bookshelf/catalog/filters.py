"""
Predicate objects for ``LibraryCatalog.filter_by``.

``filter_by`` accepts any callable taking a ``Book`` and returning a
bool, so a plain function or lambda is enough for one-off filters. The
classes here cover the common cases and compose with ``&``, ``|`` and
``~`` so callers can build "mystery books by this author" without
touching the catalogue:

    GenreFilter(Genre.MYSTERY) & AuthorFilter("Christie")
"""

from __future__ import annotations

from typing import Callable, Iterable, Tuple

from ..models import Book, Genre

Predicate = Callable[[Book], bool]


def _author_key(s: str) -> str:
    # Authors are typed by hand; ignore case and stray whitespace.
    return (s or "").strip().casefold()


class BookFilter:
    """Base class for composable book predicates."""

    def matches(self, book: Book) -> bool:
        raise NotImplementedError

    def __call__(self, book: Book) -> bool:
        return self.matches(book)

    def __and__(self, other: Predicate) -> "AllOf":
        return AllOf(self, other)

    def __or__(self, other: Predicate) -> "AnyOf":
        return AnyOf(self, other)

    def __invert__(self) -> "Not":
        return Not(self)


class GenreFilter(BookFilter):
    def __init__(self, genre: Genre) -> None:
        self.genre = Genre(genre)

    def matches(self, book: Book) -> bool:
        return book.genre == self.genre

    def __repr__(self) -> str:
        return f"GenreFilter({self.genre.label})"


class AuthorFilter(BookFilter):
    """Match books whose author equals ``author``, ignoring case and
    surrounding whitespace."""

    def __init__(self, author: str) -> None:
        self.author = author
        self._key = _author_key(author)

    def matches(self, book: Book) -> bool:
        return _author_key(book.author) == self._key

    def __repr__(self) -> str:
        return f"AuthorFilter({self.author!r})"


class AllOf(BookFilter):
    """Logical AND. An empty ``AllOf()`` matches every book."""

    def __init__(self, *predicates: Predicate) -> None:
        self.predicates: Tuple[Predicate, ...] = _flatten(predicates, AllOf)

    def matches(self, book: Book) -> bool:
        return all(p(book) for p in self.predicates)

    def __repr__(self) -> str:
        return f"AllOf({', '.join(map(repr, self.predicates))})"


class AnyOf(BookFilter):
    """Logical OR. An empty ``AnyOf()`` matches nothing."""

    def __init__(self, *predicates: Predicate) -> None:
        self.predicates: Tuple[Predicate, ...] = _flatten(predicates, AnyOf)

    def matches(self, book: Book) -> bool:
        return any(p(book) for p in self.predicates)

    def __repr__(self) -> str:
        return f"AnyOf({', '.join(map(repr, self.predicates))})"


class Not(BookFilter):
    def __init__(self, predicate: Predicate) -> None:
        self.predicate = predicate

    def matches(self, book: Book) -> bool:
        return not self.predicate(book)

    def __repr__(self) -> str:
        return f"Not({self.predicate!r})"


def _flatten(predicates: Iterable[Predicate], kind: type) -> Tuple[Predicate, ...]:
    # (a & b) & c -> AllOf(a, b, c)
    out = []
    for p in predicates:
        if type(p) is kind:
            out.extend(p.predicates)  # type: ignore[attr-defined]
        else:
            out.append(p)
    return tuple(out)


def where(predicate: Predicate) -> BookFilter:
    """Wrap a plain callable so it gains the ``&``/``|``/``~`` operators."""
    if isinstance(predicate, BookFilter):
        return predicate
    return _FunctionFilter(predicate)


class _FunctionFilter(BookFilter):
    def __init__(self, func: Predicate) -> None:
        self.func = func

    def matches(self, book: Book) -> bool:
        return bool(self.func(book))

    def __repr__(self) -> str:
        return f"where({getattr(self.func, '__name__', self.func)!r})"
