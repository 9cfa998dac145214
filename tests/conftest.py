"""Shared pytest fixtures for commit-embed tests."""

from collections.abc import Iterator

import pytest
import structlog

from commit_embed.core.config import Settings


@pytest.fixture
def mock_settings() -> Settings:
    """Create Settings instance with test values.

    Returns:
        Settings instance configured for testing
    """
    return Settings(
        github_api_base_url="https://api.github.test",
        request_timeout_seconds=5,
        user_agent="commit-embed-tests",
        display_timezone="UTC",
        log_level="DEBUG",
    )


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    """Reset the global settings cache before and after each test.

    This ensures tests don't interfere with each other via cached settings.
    """
    # Import here to avoid circular dependencies
    import commit_embed.core.config

    # Clear cache before test
    commit_embed.core.config._settings = None

    yield

    # Clear cache after test
    commit_embed.core.config._settings = None


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()
