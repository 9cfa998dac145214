"""Shared test fixtures for GitHub integration tests."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from commit_embed.github.client import GitHubClient
from commit_embed.shared.models import ParsedUrlRef

SHA = "37f48bffd26329505282d72c1e1ab8298fdc438c"


@pytest.fixture
def commit_ref() -> ParsedUrlRef:
    """Reference parsed from https://github.com/octo/hello/commit/<SHA>."""
    return ParsedUrlRef(owner="octo", repo="hello", sha=SHA)


@pytest.fixture
def sample_commit_response() -> dict[str, Any]:
    """Sample "get a commit" API response for testing.

    Returns:
        Dictionary shaped like GET /repos/{owner}/{repo}/commits/{sha}
    """
    return {
        "sha": SHA,
        "html_url": f"https://github.com/octo/hello/commit/{SHA}",
        "commit": {
            "message": "Fix bug in parser\n\nAdded validation logic",
            "author": {
                "name": "Test User",
                "email": "test@example.com",
                "date": "2024-01-05T10:00:00Z",
            },
        },
        "author": {
            "login": "testuser",
            "avatar_url": "https://avatars.githubusercontent.com/u/1",
        },
        "stats": {"additions": 10, "deletions": 2, "total": 12},
    }


@pytest.fixture
def github_client() -> GitHubClient:
    """Create a GitHub client instance for testing.

    Returns:
        GitHubClient instance pointing at the public API
    """
    return GitHubClient()


def mock_get(
    client: GitHubClient,
    status: int,
    json_data: Any = None,
    headers: dict[str, str] | None = None,
    json_error: Exception | None = None,
) -> MagicMock:
    """Attach a mocked session whose get() yields one response.

    Returns:
        The mocked session.get
    """
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.headers = headers or {}
    if json_error is not None:
        mock_response.json = AsyncMock(side_effect=json_error)
    else:
        mock_response.json = AsyncMock(return_value=json_data)

    mock_context = MagicMock()
    mock_context.__aenter__ = AsyncMock(return_value=mock_response)
    mock_context.__aexit__ = AsyncMock(return_value=None)

    client.session = AsyncMock()
    client.session.get = MagicMock(return_value=mock_context)
    return client.session.get
