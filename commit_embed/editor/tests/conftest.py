"""Pytest fixtures for editor and interaction tests."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from commit_embed.editor.document import DocumentEditor
from commit_embed.editor.ports import Choice
from commit_embed.github.client import GitHubClient
from commit_embed.shared.models import CommitAuthor, CommitData, CommitStats

SHA = "37f48bffd26329505282d72c1e1ab8298fdc438c"
COMMIT_URL = f"https://github.com/octo/hello/commit/{SHA}"


class RecordingSurface:
    """DecisionSurface test double that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.content: list[tuple[str, str]] = []
        self.on_choice: Callable[[Choice], None] | None = None
        self.is_open = False

    def open(self, title: str, on_choice: Callable[[Choice], None]) -> None:
        self.calls.append(("open", title))
        self.on_choice = on_choice
        self.is_open = True

    def clear(self) -> None:
        self.calls.append(("clear", None))
        self.content = []

    def show_text(self, text: str) -> None:
        self.calls.append(("show_text", text))
        self.content.append(("text", text))

    def show_html(self, html: str) -> None:
        self.calls.append(("show_html", html))
        self.content.append(("html", html))

    def close(self) -> None:
        self.calls.append(("close", None))
        self.is_open = False

    def click(self, choice: Choice) -> None:
        """Press one of the surface controls."""
        assert self.on_choice is not None, "surface was never opened"
        self.on_choice(choice)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def editor() -> DocumentEditor:
    """Document with the cursor after "Notes: "."""
    return DocumentEditor("Notes: ")


@pytest.fixture
def sample_commit() -> CommitData:
    return CommitData(
        sha=SHA,
        message="Fix **parser** bug",
        author=CommitAuthor(login="jane", avatar_url="https://avatars.example/jane.png"),
        date="2024-01-05T10:00:00Z",
        stats=CommitStats(additions=0, deletions=0),
        url=COMMIT_URL,
        owner="octo",
        repo="hello",
    )


@pytest.fixture
def mock_client(sample_commit: CommitData) -> MagicMock:
    """GitHub client whose fetch_commit returns sample_commit.

    Returns:
        Mock with spec GitHubClient
    """
    client = MagicMock(spec=GitHubClient)
    client.fetch_commit = AsyncMock(return_value=sample_commit)
    return client
