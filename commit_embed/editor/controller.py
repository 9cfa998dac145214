"""Interaction controller for one pasted commit URL.

A session owns everything created for a single paste: the parsed reference,
the fetched commit, the rendered card and the decision surface. It moves
through these states::

    DETECTING -> LOADING -> PREVIEW_READY | PREVIEW_ERROR -> RESOLVED -> CLOSED

Choices can be made in any state once the surface is open. Embed only
inserts when a card was built.
"""

import asyncio
import uuid
from datetime import tzinfo
from enum import Enum

from commit_embed.core.logging import get_logger, set_correlation_id
from commit_embed.editor.ports import Choice, DecisionSurface, Editor
from commit_embed.github.client import GitHubClient
from commit_embed.github.url_matcher import parse
from commit_embed.render.card import generate_card_html
from commit_embed.render.markdown import MessageRenderer
from commit_embed.shared.exceptions import CommitFetchError, InvalidUrlError
from commit_embed.shared.models import CommitData

logger = get_logger(__name__)

SURFACE_TITLE = "GitHub commit embed"
LOADING_TEXT = "Loading commit..."
EMBED_SUFFIX = "\n\n"


class SessionState(str, Enum):
    """Lifecycle state of a CommitEmbedSession."""

    DETECTING = "detecting"
    LOADING = "loading"
    PREVIEW_READY = "preview_ready"
    PREVIEW_ERROR = "preview_error"
    RESOLVED = "resolved"
    CLOSED = "closed"


class CommitEmbedSession:
    """Decision flow for one pasted commit URL.

    Args:
        url: Trimmed pasted text, already accepted by the strict URL gate
        editor: Editor whose selection receives the chosen text
        surface: Decision surface owned by this session
        client: Open GitHub client used for the single fetch
        tz: Display timezone for the card date
    """

    def __init__(
        self,
        url: str,
        editor: Editor,
        surface: DecisionSurface,
        client: GitHubClient,
        tz: tzinfo | None = None,
    ) -> None:
        self.url = url
        self.session_id = uuid.uuid4().hex[:12]
        self._editor = editor
        self._surface = surface
        self._client = client
        self._tz = tz
        self._renderer = MessageRenderer()
        self._closed_event = asyncio.Event()

        self.state = SessionState.DETECTING
        self.commit: CommitData | None = None
        self.card_html: str | None = None
        self.error_text: str | None = None
        self.resolution: Choice | None = None

    @property
    def closed(self) -> bool:
        return self.state is SessionState.CLOSED

    @property
    def renderer(self) -> MessageRenderer:
        return self._renderer

    async def open(self) -> None:
        """Open the surface, fetch the commit and show the preview.

        Fetch and render errors are shown in the surface and never raised. If the
        session is closed while the fetch is in flight the result is dropped.
        """
        if self.state is not SessionState.DETECTING:
            return
        set_correlation_id(self.session_id)

        self.state = SessionState.LOADING
        self._surface.open(SURFACE_TITLE, self.choose)
        self._surface.clear()
        self._surface.show_text(LOADING_TEXT)
        logger.info("session.opened", url=self.url)

        try:
            ref = parse(self.url)
            if ref is None:
                raise InvalidUrlError("Invalid GitHub commit URL")
            commit = await self._client.fetch_commit(ref)
        except (CommitFetchError, InvalidUrlError) as e:
            self._show_error(e)
            return

        if self.closed:
            logger.debug("session.fetch.stale", outcome="success")
            return

        try:
            with self._renderer.scoped() as context:
                message_html = context.render(commit.message)
            card_html = generate_card_html(commit, message_html, tz=self._tz)
        except Exception as e:
            # Render failures end the preview like fetch errors
            self._show_error(e)
            return

        self.commit = commit
        self.card_html = card_html
        self.state = SessionState.PREVIEW_READY
        self._surface.clear()
        self._surface.show_html(card_html)
        logger.info("session.preview.ready", repo=commit.full_name, sha=commit.short_sha)

    def _show_error(self, error: Exception) -> None:
        """Replace the loading text with the error, unless the session already closed."""
        if self.closed:
            logger.debug("session.fetch.stale", outcome="error", error=str(error))
            return
        self.error_text = f"Error: {error}"
        self.state = SessionState.PREVIEW_ERROR
        self._surface.clear()
        self._surface.show_text(self.error_text)
        logger.warning(
            "session.preview.error", error_type=type(error).__name__, error=str(error)
        )

    def choose(self, choice: Choice) -> None:
        """Apply the user's decision and close the session.

        Args:
            choice: EMBED inserts the card followed by a blank line (only if a
                card exists), TEXT inserts the original URL, CANCEL inserts
                nothing
        """
        if self.state in (SessionState.RESOLVED, SessionState.CLOSED):
            return
        self.state = SessionState.RESOLVED
        self.resolution = choice

        try:
            if choice is Choice.EMBED:
                if self.card_html is not None:
                    self._editor.replace_selection(self.card_html + EMBED_SUFFIX)
                else:
                    logger.info("session.embed.no_commit", url=self.url)
            elif choice is Choice.TEXT:
                self._editor.replace_selection(self.url)
            logger.info("session.resolved", choice=choice.value)
        finally:
            self.close()

    def dismiss(self) -> None:
        """Close without inserting anything, same as Cancel."""
        self.choose(Choice.CANCEL)

    def close(self) -> None:
        """Release render contexts, clear and close the surface. Idempotent."""
        if self.closed:
            return
        if self.state is not SessionState.RESOLVED:
            self.resolution = Choice.CANCEL
        self.state = SessionState.CLOSED
        self._renderer.release_all()
        self._surface.clear()
        self._surface.close()
        self._closed_event.set()
        logger.debug("session.closed", resolution=self.resolution)

    async def wait_closed(self) -> None:
        """Wait until the session has been resolved and closed."""
        await self._closed_event.wait()
