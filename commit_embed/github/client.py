"""GitHub API client for fetching a single commit."""

import asyncio
from typing import Any

import aiohttp

from commit_embed.core.logging import get_logger
from commit_embed.shared.exceptions import (
    ApiError,
    MalformedResponseError,
    NetworkError,
)
from commit_embed.shared.models import CommitData, ParsedUrlRef

logger = get_logger(__name__)


class GitHubClient:
    """Async GitHub API client for the "get a commit" endpoint.

    Sends exactly one request per fetch. Retrying is left to the user, who
    re-pastes the URL.

    Attributes:
        BASE_URL: Default GitHub API base URL
        ACCEPT: Versioned JSON media type requested from the API
    """

    BASE_URL = "https://api.github.com"
    ACCEPT = "application/vnd.github.v3+json"

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout_seconds: float = 10.0,
        user_agent: str = "commit-embed",
    ) -> None:
        """Initialize GitHub client.

        Args:
            base_url: API base URL without trailing slash
            timeout_seconds: Total timeout for one request
            user_agent: User-Agent header sent with every request
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.user_agent = user_agent
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "GitHubClient":
        """Context manager entry: create aiohttp session.

        Returns:
            Self for use in async with statement
        """
        self.session = aiohttp.ClientSession(
            headers={
                "Accept": self.ACCEPT,
                "User-Agent": self.user_agent,
            },
            timeout=aiohttp.ClientTimeout(total=self.timeout_seconds),
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Context manager exit: close aiohttp session."""
        if self.session:
            await self.session.close()
            self.session = None

    def commit_url(self, ref: ParsedUrlRef) -> str:
        """Build the API URL for a commit reference."""
        return f"{self.base_url}/repos/{ref.owner}/{ref.repo}/commits/{ref.sha}"

    async def fetch_commit(self, ref: ParsedUrlRef) -> CommitData:
        """Fetch one commit and normalize it.

        Args:
            ref: Owner, repo and sha parsed from the pasted URL

        Returns:
            Normalized CommitData

        Raises:
            NetworkError: If the request cannot be completed
            ApiError: If GitHub answers with a non-2xx status
            MalformedResponseError: If the body is not a usable commit object

        Example:
            >>> async with GitHubClient() as client:
            ...     commit = await client.fetch_commit(ref)
        """
        if not self.session:
            raise NetworkError("Session not initialized")

        url = self.commit_url(ref)
        logger.debug("github.commit.fetch_started", owner=ref.owner, repo=ref.repo, sha=ref.sha[:7])

        try:
            async with self.session.get(url) as response:
                if not 200 <= response.status < 300:
                    if response.status in (403, 429):
                        logger.warning(
                            "github.ratelimit",
                            remaining=response.headers.get("x-ratelimit-remaining"),
                            reset=response.headers.get("x-ratelimit-reset"),
                            status=response.status,
                        )
                    else:
                        logger.warning(
                            "github.commit.api_error",
                            owner=ref.owner,
                            repo=ref.repo,
                            sha=ref.sha[:7],
                            status=response.status,
                        )
                    raise ApiError(response.status)

                try:
                    data: Any = await response.json(content_type=None)
                except ValueError as e:
                    raise MalformedResponseError(f"Response is not valid JSON: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("github.commit.network_error", url=url, error=str(e))
            raise NetworkError(f"Network error: {e}") from e

        commit = CommitData.from_github_commit(data, ref)
        logger.info(
            "github.commit.fetched",
            repo=commit.full_name,
            sha=commit.short_sha,
            additions=commit.stats.additions,
            deletions=commit.stats.deletions,
        )
        return commit
