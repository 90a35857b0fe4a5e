"""Tests for application settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from isbnlookup.config import IsbnLookupSettings
from isbnlookup.core.types import SourceName

REQUIRED_ENV = {
    "ISBNLOOKUP_APPWRITE_ENDPOINT": "https://appwrite.test/v1",
    "ISBNLOOKUP_APPWRITE_PROJECT_ID": "project",
    "ISBNLOOKUP_APPWRITE_API_KEY": "secret",
    "ISBNLOOKUP_APPWRITE_DATABASE_ID": "library",
    "ISBNLOOKUP_APPWRITE_COLLECTION_ID": "titles",
}


@pytest.fixture
def required_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key, value in REQUIRED_ENV.items():
        monkeypatch.setenv(key, value)


class TestSettingsFromEnvironment:
    """Settings loaded from ISBNLOOKUP_* variables."""

    def test_loads_required_fields(self, required_env):
        settings = IsbnLookupSettings(_env_file=None)

        assert str(settings.appwrite_endpoint).startswith("https://appwrite.test/v1")
        assert settings.appwrite_project_id == "project"
        assert settings.appwrite_api_key == "secret"
        assert settings.appwrite_database_id == "library"
        assert settings.appwrite_collection_id == "titles"

    def test_defaults(self, required_env):
        settings = IsbnLookupSettings(_env_file=None)

        assert settings.sources == [SourceName.OPEN_LIBRARY, SourceName.GOOGLE_BOOKS]
        assert settings.parallel_sources is False
        assert settings.http_timeout == 30.0
        assert settings.google_books_api_key is None
        assert settings.log_level == "INFO"
        assert settings.appwrite_store_author is True

    def test_store_author_from_env(self, required_env, monkeypatch):
        monkeypatch.setenv("ISBNLOOKUP_APPWRITE_STORE_AUTHOR", "false")

        assert IsbnLookupSettings(_env_file=None).appwrite_store_author is False

    def test_missing_required_field_fails(self, required_env, monkeypatch):
        """Store settings have no defaults."""
        monkeypatch.delenv("ISBNLOOKUP_APPWRITE_API_KEY")

        with pytest.raises(ValidationError):
            IsbnLookupSettings(_env_file=None)

    def test_sources_comma_separated(self, required_env, monkeypatch):
        monkeypatch.setenv("ISBNLOOKUP_SOURCES", "google_books, open_library")

        settings = IsbnLookupSettings(_env_file=None)

        assert settings.sources == [SourceName.GOOGLE_BOOKS, SourceName.OPEN_LIBRARY]


class TestSourcesValidation:
    """Validation of the sources list."""

    def test_single_source(self, mock_settings_minimal):
        settings = IsbnLookupSettings(
            **mock_settings_minimal.model_dump(exclude={"sources"}),
            sources="open_library",
        )
        assert settings.sources == [SourceName.OPEN_LIBRARY]

    @pytest.mark.parametrize(
        "sources",
        ["cache", "open_library,open_library", "isbndb"],
    )
    def test_rejects_invalid_sources(self, mock_settings_minimal, sources):
        with pytest.raises(ValidationError):
            IsbnLookupSettings(
                **mock_settings_minimal.model_dump(exclude={"sources"}),
                sources=sources,
            )

    def test_timeout_must_be_positive(self, mock_settings_minimal):
        with pytest.raises(ValidationError):
            IsbnLookupSettings(
                **mock_settings_minimal.model_dump(exclude={"http_timeout"}),
                http_timeout=0,
            )
