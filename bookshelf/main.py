# bookshelf/main.py
from typing import List, Optional

import click

from . import __version__
from .catalog import LibraryCatalog
from .formatting import format_books
from .log import configure_logging
from .models import Book, Genre

SAMPLE_BOOKS: List[Book] = [
    Book(title="Book1", author="Author1", isbn="111111", genre=Genre.FICTION),
    Book(title="Book2", author="Author2", isbn="222222", genre=Genre.ROMANCE),
    Book(title="Book3", author="Author3", isbn="333333", genre=Genre.MYSTERY),
    Book(title="Book4", author="Author4", isbn="444444", genre=Genre.SCIENCE_FICTION),
]


def build_sample_catalog() -> LibraryCatalog:
    return LibraryCatalog(SAMPLE_BOOKS)


def parse_genre(value: str) -> Optional[Genre]:
    """Accept ``mystery``, ``Mystery``, ``ScienceFiction``, ``science-fiction`` ..."""
    key = "".join(ch for ch in value.lower() if ch.isalnum())
    for genre in Genre:
        if genre.value.replace("_", "") == key:
            return genre
    return None


def _genre_callback(ctx: click.Context, param: click.Parameter, value: str) -> Genre:
    genre = parse_genre(value)
    if genre is None:
        choices = ", ".join(g.label for g in Genre)
        raise click.BadParameter(f"unknown genre {value!r} (expected one of {choices})")
    return genre


@click.command()
@click.version_option(version=__version__, prog_name="bookshelf-demo")
@click.option("--search", "title", default="Book2", show_default=True, help="Title to look up.")
@click.option(
    "--genre",
    default="mystery",
    show_default=True,
    callback=_genre_callback,
    help="Genre to filter by.",
)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
def cli(title: str, genre: Genre, verbose: bool) -> None:
    """Walk through the sample catalogue: search, forward walk, genre
    filter, then a backward walk with the same cursor."""
    configure_logging("DEBUG" if verbose else None)
    catalog = build_sample_catalog()

    click.echo(f"Searched Book: {catalog.format_book(catalog.search(title))}")

    cursor = catalog.new_cursor()
    click.echo("\nAll Books:")
    while not cursor.is_done():
        click.echo(catalog.format_book(cursor.current_item()))
        cursor.next()

    click.echo(f"\nBooks in {genre.label} genre:")
    for line in format_books(catalog.filter_by_genre(genre)):
        click.echo(line)

    # The cursor is now past the end; stepping back revisits every book.
    click.echo("\nAll Books (Backward Iteration):")
    while cursor.previous() is not None:
        click.echo(catalog.format_book(cursor.current_item()))


if __name__ == "__main__":
    cli()
