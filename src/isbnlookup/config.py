"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from isbnlookup.core.types import SourceName

EXTERNAL_SOURCES = (SourceName.OPEN_LIBRARY, SourceName.GOOGLE_BOOKS)


class IsbnLookupSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="ISBNLOOKUP_",
    )

    # Appwrite document store
    appwrite_endpoint: HttpUrl = Field(
        ...,
        description="Appwrite API endpoint, e.g. https://cloud.appwrite.io/v1",
    )
    appwrite_project_id: str = Field(..., description="Appwrite project ID")
    appwrite_api_key: str = Field(..., description="Appwrite server API key")
    appwrite_database_id: str = Field(..., description="Database holding the cache")
    appwrite_collection_id: str = Field(..., description="Collection holding the cache")
    appwrite_store_author: bool = Field(
        default=True,
        description="Persist the author alongside canonicalIsbn",
    )

    # External APIs
    google_books_api_key: str | None = Field(
        default=None,
        description="Google Books API key (optional, increases rate limits)",
    )
    sources: Annotated[list[SourceName], NoDecode] = Field(
        default_factory=lambda: list(EXTERNAL_SOURCES),
        description="External sources to query, in priority order",
    )
    parallel_sources: bool = Field(
        default=False,
        description="Query external sources concurrently",
    )
    http_timeout: float = Field(
        default=30.0,
        gt=0.0,
        description="Timeout in seconds for outbound HTTP calls",
    )

    # App settings
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("sources", mode="before")
    @classmethod
    def split_sources(cls, v: object) -> object:
        """Accept a comma separated list from the environment."""
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("sources")
    @classmethod
    def validate_sources(cls, v: list[SourceName]) -> list[SourceName]:
        if SourceName.CACHE in v:
            raise ValueError("'cache' is not an external source")
        if len(set(v)) != len(v):
            raise ValueError("sources must not contain duplicates")
        return v


@lru_cache
def get_settings() -> IsbnLookupSettings:
    """Get cached settings instance."""
    return IsbnLookupSettings()
