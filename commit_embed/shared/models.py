"""Data models for commit-embed."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from commit_embed.shared.exceptions import MalformedResponseError

SHORT_SHA_LENGTH = 7

_HEX_RE = re.compile(r"^[0-9a-f]+$")


class ParsedUrlRef(BaseModel):
    """Owner, repository and sha extracted from a pasted commit URL.

    Attributes:
        owner: Repository owner
        repo: Repository name
        sha: Commit sha as written in the URL (may be abbreviated)
    """

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., min_length=1, description="Repository owner")
    repo: str = Field(..., min_length=1, description="Repository name")
    sha: str = Field(..., min_length=1, description="Commit sha from the URL")


class CommitAuthor(BaseModel):
    """Display identity of a commit author."""

    model_config = ConfigDict(frozen=True)

    login: str = Field(..., min_length=1, description="GitHub login or raw author name")
    avatar_url: str = Field("", description="Avatar URL, empty when unavailable")


class CommitStats(BaseModel):
    """Line counts changed by a commit."""

    model_config = ConfigDict(frozen=True)

    additions: int = Field(0, ge=0)
    deletions: int = Field(0, ge=0)


class CommitData(BaseModel):
    """Normalized commit metadata used to build an embed card.

    Attributes:
        sha: Full lowercase commit sha
        message: Raw commit message, Markdown allowed
        author: Author login and avatar
        date: ISO-8601 authorship timestamp
        stats: Additions and deletions
        url: Canonical commit web URL as returned by the API
        owner: Repository owner from the pasted URL
        repo: Repository name from the pasted URL
    """

    model_config = ConfigDict(frozen=True)

    sha: str = Field(..., min_length=1, description="Full commit sha")
    message: str = Field(..., description="Commit message")
    author: CommitAuthor
    date: str = Field(..., min_length=1, description="ISO-8601 authorship date")
    stats: CommitStats = Field(default_factory=CommitStats)
    url: str = Field(..., min_length=1, description="Commit web URL")
    owner: str = Field(..., min_length=1, description="Repository owner")
    repo: str = Field(..., min_length=1, description="Repository name")

    @field_validator("sha")
    @classmethod
    def ensure_lowercase_hex(cls, v: str) -> str:
        """Normalize sha to lowercase and reject non-hex characters."""
        v_lower = v.lower()
        if not _HEX_RE.match(v_lower):
            raise ValueError(f"sha is not hexadecimal: {v!r}")
        return v_lower

    @property
    def short_sha(self) -> str:
        """First seven characters of the sha, or the whole sha if shorter."""
        return self.sha[:SHORT_SHA_LENGTH]

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def repo_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.repo}"

    @classmethod
    def from_github_commit(cls, data: Any, ref: ParsedUrlRef) -> "CommitData":
        """Parse a GitHub "get a commit" response into CommitData.

        Args:
            data: Decoded JSON body of GET /repos/{owner}/{repo}/commits/{sha}
            ref: Reference parsed from the pasted URL; its owner and repo win
                over anything in the response

        Returns:
            Fully populated CommitData

        Raises:
            MalformedResponseError: If a required field is missing or invalid

        Example:
            >>> data = {"sha": "abc123", "html_url": "...", "commit": {...}}
            >>> commit = CommitData.from_github_commit(data, ref)
        """
        if not isinstance(data, dict):
            raise MalformedResponseError("Response body is not a JSON object")

        commit = data.get("commit")
        if not isinstance(commit, dict):
            raise MalformedResponseError("Response is missing field: commit")
        commit_author = commit.get("author")
        if not isinstance(commit_author, dict):
            commit_author = {}

        sha = _require_str(data.get("sha"), "sha")
        message = _require_str(commit.get("message"), "commit.message", allow_empty=True)
        date = _require_str(commit_author.get("date"), "commit.author.date")
        html_url = _require_str(data.get("html_url"), "html_url")

        # Commits without a linked GitHub account have "author": null
        account = data.get("author")
        if not isinstance(account, dict):
            account = {}
        login = account.get("login") or commit_author.get("name")
        if not login:
            raise MalformedResponseError(
                "Response has neither author.login nor commit.author.name"
            )

        stats = data.get("stats")
        if not isinstance(stats, dict):
            stats = {}

        try:
            return cls(
                sha=sha,
                message=message,
                author=CommitAuthor(
                    login=login,
                    avatar_url=account.get("avatar_url") or "",
                ),
                date=date,
                stats=CommitStats(
                    additions=stats.get("additions") or 0,
                    deletions=stats.get("deletions") or 0,
                ),
                url=html_url,
                owner=ref.owner,
                repo=ref.repo,
            )
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid commit response: {e}") from e


def _require_str(value: Any, field: str, allow_empty: bool = False) -> str:
    """Return value if it is a usable string, otherwise raise MalformedResponseError."""
    if not isinstance(value, str) or (not allow_empty and not value):
        raise MalformedResponseError(f"Response is missing field: {field}")
    return value
