"""Commit message rendering through markdown-it-py."""

from collections.abc import Iterator
from contextlib import contextmanager

from markdown_it import MarkdownIt

from commit_embed.core.logging import get_logger
from commit_embed.shared.exceptions import RenderContextClosedError

logger = get_logger(__name__)


class RenderContext:
    """Short-lived Markdown parser handed out by MessageRenderer.scoped().

    A context renders until release() is called; after that it refuses work.
    """

    def __init__(self) -> None:
        # Raw HTML in commit messages is escaped, not passed through
        self._md: MarkdownIt | None = MarkdownIt("commonmark", {"html": False})

    @property
    def released(self) -> bool:
        return self._md is None

    def render(self, markdown_text: str) -> str:
        """Convert Markdown to HTML.

        Raises:
            RenderContextClosedError: If the context was already released
        """
        if self._md is None:
            raise RenderContextClosedError("Render context has been released")
        return self._md.render(markdown_text)

    def release(self) -> None:
        """Drop the parser. Safe to call more than once."""
        self._md = None


class MessageRenderer:
    """Renders commit messages to HTML inside scoped render contexts."""

    def __init__(self) -> None:
        self._live: set[RenderContext] = set()

    @property
    def live_contexts(self) -> int:
        """Number of contexts acquired and not yet released."""
        return len(self._live)

    def acquire(self) -> RenderContext:
        context = RenderContext()
        self._live.add(context)
        return context

    def release(self, context: RenderContext) -> None:
        context.release()
        self._live.discard(context)

    @contextmanager
    def scoped(self) -> Iterator[RenderContext]:
        """Acquire a render context that is released when the block exits.

        Example:
            >>> with renderer.scoped() as ctx:
            ...     html = ctx.render("**Fix** bug")
        """
        context = self.acquire()
        try:
            yield context
        finally:
            self.release(context)

    def render(self, markdown_text: str) -> str:
        """Render markdown_text in a fresh scoped context.

        Args:
            markdown_text: Raw commit message

        Returns:
            HTML fragment for the message body
        """
        with self.scoped() as context:
            html = context.render(markdown_text)
        logger.debug("render.message.rendered", chars=len(markdown_text))
        return html

    def release_all(self) -> None:
        """Release every context still live (used when a session closes early)."""
        for context in list(self._live):
            self.release(context)
