"""Paste interception and plugin lifecycle."""

import asyncio

from commit_embed.core.config import Settings
from commit_embed.core.logging import get_logger
from commit_embed.editor.controller import CommitEmbedSession
from commit_embed.editor.ports import Editor, SurfaceFactory
from commit_embed.github.client import GitHubClient
from commit_embed.github.url_matcher import is_commit_url
from commit_embed.shared.exceptions import PluginStateError

logger = get_logger(__name__)


class CommitEmbedPlugin:
    """Turns pasted GitHub commit URLs into embed decision sessions.

    The host calls start() once when the plugin is enabled and stop() once
    when it is disabled, and forwards every paste to on_paste().
    """

    def __init__(self, settings: Settings, surface_factory: SurfaceFactory) -> None:
        """Initialize plugin.

        Args:
            settings: Application settings
            surface_factory: Creates a fresh decision surface for each session
        """
        self.settings = settings
        self.surface_factory = surface_factory
        self.client: GitHubClient | None = None
        self._sessions: dict[CommitEmbedSession, asyncio.Task[None]] = {}

    @property
    def started(self) -> bool:
        return self.client is not None

    @property
    def active_sessions(self) -> list[CommitEmbedSession]:
        return [session for session in self._sessions if not session.closed]

    async def start(self) -> None:
        """Open the shared GitHub client.

        Raises:
            PluginStateError: If the plugin is already started
        """
        if self.started:
            raise PluginStateError("Plugin already started")

        client = GitHubClient(
            base_url=self.settings.github_api_base_url,
            timeout_seconds=self.settings.request_timeout_seconds,
            user_agent=self.settings.user_agent,
        )
        await client.__aenter__()
        self.client = client
        logger.info("plugin.started", api=self.settings.github_api_base_url)

    def on_paste(self, raw_text: str | None, editor: Editor) -> CommitEmbedSession | None:
        """Handle a paste event.

        Args:
            raw_text: Plain-text clipboard contents (may be None or padded)
            editor: Editor the paste targets

        Returns:
            The new session when the paste was intercepted (the host must then
            suppress its default paste), or None to let the default paste run

        Raises:
            PluginStateError: If called before start()
        """
        if not self.started:
            raise PluginStateError("Plugin not started")

        text = (raw_text or "").strip()
        if not text or not is_commit_url(text):
            return None

        assert self.client is not None
        session = CommitEmbedSession(
            url=text,
            editor=editor,
            surface=self.surface_factory(),
            client=self.client,
            tz=self.settings.display_tz,
        )
        self._prune()
        self._sessions[session] = asyncio.get_running_loop().create_task(session.open())
        logger.info("plugin.paste.intercepted", session_id=session.session_id)
        return session

    def _prune(self) -> None:
        """Drop sessions that are closed and whose open task has finished."""
        self._sessions = {
            session: task
            for session, task in self._sessions.items()
            if not (session.closed and task.done())
        }

    async def stop(self) -> None:
        """Dismiss open sessions, wait for their fetches and close the client."""
        sessions = list(self._sessions.items())
        for session, _ in sessions:
            session.dismiss()
        tasks = [task for _, task in sessions]
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._sessions.clear()

        if self.client is not None:
            await self.client.__aexit__(None, None, None)
            self.client = None
        logger.info("plugin.stopped", dismissed=len(sessions))
