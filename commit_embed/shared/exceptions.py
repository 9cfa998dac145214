"""Custom exception hierarchy for commit-embed."""


class CommitEmbedError(Exception):
    """Base exception for all commit-embed errors."""

    pass


class ConfigError(CommitEmbedError):
    """Raised when configuration validation fails."""

    pass


class InvalidUrlError(CommitEmbedError):
    """Raised when text is not a GitHub commit URL."""

    pass


class CommitFetchError(CommitEmbedError):
    """Base for every failure while fetching a commit from GitHub."""

    pass


class NetworkError(CommitFetchError):
    """Raised when the request cannot be completed at the transport layer."""

    pass


class ApiError(CommitFetchError):
    """Raised when GitHub answers with a non-success HTTP status.

    Attributes:
        status: HTTP status code returned by the API
    """

    def __init__(self, status: int, message: str | None = None) -> None:
        self.status = status
        super().__init__(message or f"GitHub API returned HTTP {status}")


class MalformedResponseError(CommitFetchError):
    """Raised when a successful response body is unparseable or incomplete."""

    pass


class RenderContextClosedError(CommitEmbedError):
    """Raised when rendering through a render context that was released."""

    pass


class PluginStateError(CommitEmbedError):
    """Raised when the plugin lifecycle is used out of order."""

    pass
