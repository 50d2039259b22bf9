"""Shared pytest fixtures for bookshelf tests."""

import logging

import pytest
from click.testing import CliRunner

from bookshelf.catalog import LibraryCatalog
from bookshelf.config import get_settings
from bookshelf.models import Book, Genre


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    for name in ("BOOKSHELF_LOG_LEVEL", "BOOKSHELF_REMOVAL_MATCH", "BOOKSHELF_CURSOR_BOUNDS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    logger = logging.getLogger("bookshelf")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def book_a() -> Book:
    return Book(title="A", author="Author A", isbn="1", genre=Genre.FICTION)


@pytest.fixture
def book_b() -> Book:
    return Book(title="B", author="Author B", isbn="2", genre=Genre.MYSTERY)


@pytest.fixture
def book_c() -> Book:
    return Book(title="C", author="Author C", isbn="3", genre=Genre.MYSTERY)


@pytest.fixture
def catalog(book_a, book_b, book_c) -> LibraryCatalog:
    """Catalogue holding A (Fiction), B (Mystery), C (Mystery) in that order."""
    return LibraryCatalog([book_a, book_b, book_c])
