"""Ports for the host editor and decision surface.

The interaction controller depends only on these protocols; the command line
host and tests provide concrete implementations.
"""

from collections.abc import Callable
from enum import Enum
from typing import Protocol


class Choice(str, Enum):
    """User decision offered by the decision surface."""

    EMBED = "embed"
    TEXT = "text"
    CANCEL = "cancel"


CHOICE_LABELS: dict[Choice, str] = {
    Choice.EMBED: "Embed",
    Choice.TEXT: "Paste as text",
    Choice.CANCEL: "Cancel",
}


class Editor(Protocol):
    """Text editor holding the cursor/selection a paste lands in."""

    def replace_selection(self, text: str) -> None:
        """Insert text at the current selection, replacing it."""
        ...


class DecisionSurface(Protocol):
    """Modal element presenting the preview and the three controls."""

    def open(self, title: str, on_choice: Callable[[Choice], None]) -> None:
        """Show the surface and wire its controls to on_choice."""
        ...

    def clear(self) -> None:
        """Empty the content region."""
        ...

    def show_text(self, text: str) -> None:
        """Replace the content region with plain text."""
        ...

    def show_html(self, html: str) -> None:
        """Replace the content region with rendered HTML."""
        ...

    def close(self) -> None:
        """Hide the surface and disconnect its controls."""
        ...


SurfaceFactory = Callable[[], DecisionSurface]
