# bookshelf/models.py
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Genre(str, Enum):
    FICTION = "fiction"
    MYSTERY = "mystery"
    SCIENCE_FICTION = "science_fiction"
    ROMANCE = "romance"
    NON_FICTION = "non_fiction"

    @property
    def label(self) -> str:
        # "science_fiction" -> "ScienceFiction"
        return "".join(part.capitalize() for part in self.value.split("_"))


class Book(BaseModel):
    """A single catalogue entry.

    Instances are frozen: the catalogue stores whatever the caller hands
    it and never rewrites a field. Equality compares every field, so two
    separately built books with the same content are equal (and hash the
    same).
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    author: str = ""
    isbn: str = ""
    genre: Genre = Genre.FICTION

    def __str__(self) -> str:
        return f"{self.title} by {self.author} (ISBN: {self.isbn}, Genre: {self.genre.label})"
