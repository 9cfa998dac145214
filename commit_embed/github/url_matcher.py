"""Recognize GitHub commit URLs and extract owner, repo and sha."""

import re

from commit_embed.shared.exceptions import InvalidUrlError
from commit_embed.shared.models import ParsedUrlRef

# Whole-string gate applied to pasted text
COMMIT_URL_RE = re.compile(
    r"^https?://github\.com/([^/]+)/([^/]+)/commit/([a-f0-9]+)$",
    re.IGNORECASE,
)

# Same shape, found anywhere inside a longer string
_EMBEDDED_COMMIT_URL_RE = re.compile(
    r"github\.com/([^/]+)/([^/]+)/commit/([a-f0-9]+)",
    re.IGNORECASE,
)


def is_commit_url(text: str) -> bool:
    """Check whether text is exactly a GitHub commit URL.

    Args:
        text: Pasted text, already trimmed by the caller

    Returns:
        True if the whole string matches the commit URL pattern

    Example:
        >>> is_commit_url("https://github.com/psf/requests/commit/0e322af")
        True
        >>> is_commit_url("https://github.com/psf/requests/commit/0e322af?diff=split")
        False
    """
    return COMMIT_URL_RE.fullmatch(text) is not None


def parse(text: str) -> ParsedUrlRef | None:
    """Extract owner, repo and sha from the first commit URL inside text.

    Args:
        text: Any string containing a commit URL

    Returns:
        ParsedUrlRef, or None if no commit URL is present
    """
    match = _EMBEDDED_COMMIT_URL_RE.search(text)
    if not match:
        return None
    owner, repo, sha = match.groups()
    return ParsedUrlRef(owner=owner, repo=repo, sha=sha)


def parse_strict(text: str) -> ParsedUrlRef:
    """Parse text that must be exactly a commit URL.

    Raises:
        InvalidUrlError: If text fails the is_commit_url gate
    """
    match = COMMIT_URL_RE.fullmatch(text)
    if not match:
        raise InvalidUrlError(
            f"Not a GitHub commit URL: '{text}'. "
            "Expected format: https://github.com/<owner>/<repo>/commit/<sha>"
        )
    owner, repo, sha = match.groups()
    return ParsedUrlRef(owner=owner, repo=repo, sha=sha)
