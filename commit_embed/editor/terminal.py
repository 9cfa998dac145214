"""Terminal implementation of the DecisionSurface port."""

import asyncio
import sys
from collections.abc import Callable
from typing import TextIO

from commit_embed.core.logging import get_logger
from commit_embed.editor.ports import CHOICE_LABELS, Choice

logger = get_logger(__name__)

# Keys accepted at the prompt, first letter of each control
CHOICE_KEYS: dict[str, Choice] = {
    "e": Choice.EMBED,
    "t": Choice.TEXT,
    "c": Choice.CANCEL,
}


class TerminalSurface:
    """Decision surface drawn on a text stream, answered from an input callable.

    The input callable blocks, so it runs on a worker thread. End of input
    counts as dismissing the surface.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        input_func: Callable[[str], str] = input,
    ) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self._input = input_func
        self._on_choice: Callable[[Choice], None] | None = None
        self._reader: asyncio.Task[None] | None = None
        self.is_open = False

    def _write(self, text: str) -> None:
        self._stream.write(text + "\n")
        self._stream.flush()

    @property
    def controls_line(self) -> str:
        return "  ".join(f"[{key}] {CHOICE_LABELS[choice]}" for key, choice in CHOICE_KEYS.items())

    def open(self, title: str, on_choice: Callable[[Choice], None]) -> None:
        """Print the title and controls and start waiting for an answer.

        Must be called from a running event loop.
        """
        self._on_choice = on_choice
        self.is_open = True
        self._write(f"== {title} ==")
        self._write(self.controls_line)
        self._reader = asyncio.get_running_loop().create_task(self._read_choice())

    def clear(self) -> None:
        if self.is_open:
            self._write("")

    def show_text(self, text: str) -> None:
        if self.is_open:
            self._write(text)

    def show_html(self, html: str) -> None:
        if self.is_open:
            self._write(html)

    def close(self) -> None:
        self.is_open = False
        self._on_choice = None
        if self._reader is not None and self._reader is not asyncio.current_task():
            self._reader.cancel()
        self._reader = None

    async def _read_choice(self) -> None:
        prompt = "Choice [e/t/c]: "
        while self.is_open:
            try:
                answer = await asyncio.to_thread(self._input, prompt)
            except EOFError:
                self._deliver(Choice.CANCEL)
                return
            choice = CHOICE_KEYS.get(answer.strip().lower()[:1])
            if choice is None:
                self._write(f"Unknown choice {answer.strip()!r}. {self.controls_line}")
                continue
            self._deliver(choice)
            return

    def _deliver(self, choice: Choice) -> None:
        if self._on_choice is None:
            logger.debug("surface.choice.ignored", choice=choice.value)
            return
        self._on_choice(choice)
