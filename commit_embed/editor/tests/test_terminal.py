"""Tests for the terminal decision surface."""

import asyncio
import io
from collections.abc import Callable

import pytest

from commit_embed.editor.ports import Choice
from commit_embed.editor.terminal import TerminalSurface


def scripted_input(*answers: str) -> Callable[[str], str]:
    """Input function returning answers in order, then raising EOFError."""
    remaining = list(answers)

    def _input(_prompt: str) -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input


async def open_and_wait(surface: TerminalSurface) -> list[Choice]:
    received: list[Choice] = []
    done = asyncio.Event()

    def on_choice(choice: Choice) -> None:
        received.append(choice)
        surface.close()
        done.set()

    surface.open("GitHub commit embed", on_choice)
    await asyncio.wait_for(done.wait(), timeout=2)
    return received


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("answer", "expected"),
    [
        ("e", Choice.EMBED),
        ("T", Choice.TEXT),
        ("cancel", Choice.CANCEL),
    ],
)
async def test_answer_maps_to_choice(answer: str, expected: Choice) -> None:
    """Test the first letter of the answer selects the control."""
    surface = TerminalSurface(stream=io.StringIO(), input_func=scripted_input(answer))

    assert await open_and_wait(surface) == [expected]


@pytest.mark.asyncio
async def test_unknown_answer_reprompts() -> None:
    """Test an unknown answer is reported and the prompt repeats."""
    stream = io.StringIO()
    surface = TerminalSurface(stream=stream, input_func=scripted_input("x", "", "t"))

    assert await open_and_wait(surface) == [Choice.TEXT]
    assert "Unknown choice 'x'" in stream.getvalue()


@pytest.mark.asyncio
async def test_end_of_input_dismisses() -> None:
    """Test EOF is treated as Cancel."""
    surface = TerminalSurface(stream=io.StringIO(), input_func=scripted_input())

    assert await open_and_wait(surface) == [Choice.CANCEL]


@pytest.mark.asyncio
async def test_open_prints_title_controls_and_content() -> None:
    """Test the title, controls and content region are written to the stream."""
    stream = io.StringIO()
    surface = TerminalSurface(stream=stream, input_func=scripted_input("c"))
    received: list[Choice] = []

    surface.open("GitHub commit embed", received.append)
    surface.show_text("Loading commit...")
    surface.show_html("<div>card</div>")
    await asyncio.sleep(0.05)
    surface.close()

    output = stream.getvalue()
    assert "== GitHub commit embed ==" in output
    assert "[e] Embed  [t] Paste as text  [c] Cancel" in output
    assert "Loading commit..." in output
    assert "<div>card</div>" in output


@pytest.mark.asyncio
async def test_closed_surface_ignores_output() -> None:
    """Test content written after close is dropped."""
    stream = io.StringIO()
    surface = TerminalSurface(stream=stream, input_func=scripted_input("c"))
    await open_and_wait(surface)
    before = stream.getvalue()

    surface.show_text("late")

    assert stream.getvalue() == before
