"""Shared fixtures for core tests."""

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults so no test keeps logging to a closed capture stream."""
    yield
    structlog.reset_defaults()
