from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

RemovalMatch = Literal["equality", "identity"]
CursorBounds = Literal["saturate", "drift"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    log_level: LogLevel = Field(default="WARNING", alias="BOOKSHELF_LOG_LEVEL")
    # How LibraryCatalog.remove() finds its target: by value or by object.
    removal_match: RemovalMatch = Field(default="equality", alias="BOOKSHELF_REMOVAL_MATCH")
    # Whether BookCursor positions stop at -1 and len(catalog) or keep moving.
    cursor_bounds: CursorBounds = Field(default="saturate", alias="BOOKSHELF_CURSOR_BOUNDS")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
