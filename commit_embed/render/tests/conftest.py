"""Pytest fixtures for render tests."""

import pytest

from commit_embed.shared.models import CommitAuthor, CommitData, CommitStats

SHA = "37f48bffd26329505282d72c1e1ab8298fdc438c"


@pytest.fixture
def sample_commit() -> CommitData:
    """Commit with avatar and stats.

    Returns:
        CommitData for octo/hello
    """
    return CommitData(
        sha=SHA,
        message="Fix **parser** bug",
        author=CommitAuthor(login="jane", avatar_url="https://avatars.example/jane.png"),
        date="2024-01-05T10:00:00Z",
        stats=CommitStats(additions=12, deletions=3),
        url=f"https://github.com/octo/hello/commit/{SHA}",
        owner="octo",
        repo="hello",
    )
