"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

import pytest
import respx

from isbnlookup.store.appwrite import AppwriteConfig

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def appwrite_config() -> AppwriteConfig:
    """Appwrite connection details for tests."""
    return AppwriteConfig(
        endpoint="https://appwrite.test/v1",
        project_id="test-project",
        api_key="test-api-key",
        database_id="library",
        collection_id="titles",
        timeout=5.0,
    )
