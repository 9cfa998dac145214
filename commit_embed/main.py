"""commit-embed command line entry point.

Pastes a URL into a document the way an editor would: a GitHub commit URL
opens the embed decision in the terminal, anything else is pasted verbatim.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from commit_embed.core.config import Settings, get_settings
from commit_embed.core.logging import get_logger, setup_logging
from commit_embed.editor.document import DocumentEditor
from commit_embed.editor.terminal import TerminalSurface
from commit_embed.plugin import CommitEmbedPlugin
from commit_embed.github.url_matcher import parse_strict
from commit_embed.shared.exceptions import ConfigError, InvalidUrlError

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commit-embed",
        description="Paste a GitHub commit URL as an HTML card or as plain text.",
    )
    parser.add_argument("url", help="Text to paste, normally a GitHub commit URL")
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Document to paste into (appended at the end); prints to stdout when omitted",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject input that is not exactly a GitHub commit URL instead of pasting it",
    )
    return parser


async def main(url: str, document: Path | None, settings: Settings) -> str:
    """Run one paste through the plugin and return the document text.

    Args:
        url: Pasted text
        document: Optional file whose contents the paste is appended to
        settings: Application settings

    Returns:
        Document contents after the paste was resolved
    """
    initial = document.read_text(encoding="utf-8") if document and document.exists() else ""
    editor = DocumentEditor(initial)

    plugin = CommitEmbedPlugin(settings, surface_factory=TerminalSurface)
    await plugin.start()
    try:
        session = plugin.on_paste(url, editor)
        if session is None:
            # Not a commit URL: default paste
            editor.replace_selection(url)
        else:
            await session.wait_closed()
    finally:
        await plugin.stop()

    return editor.text


def run(argv: list[str] | None = None) -> None:
    """Entry point for the commit-embed command."""
    args = build_parser().parse_args(argv)
    if args.strict:
        try:
            parse_strict(args.url.strip())
        except InvalidUrlError as e:
            print(f"Invalid input: {e}", file=sys.stderr)
            sys.exit(2)

    try:
        # Load settings first to validate configuration
        settings = get_settings()

        # Setup logging with configured level
        setup_logging(log_level=settings.log_level)

        text = asyncio.run(main(args.url, args.file, settings))

    except ConfigError as e:
        # Configuration errors should exit immediately with clear message
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        # Ctrl+C while the decision is open leaves the document untouched
        logger.info("application.interrupted")
        sys.exit(130)

    if args.file is not None:
        args.file.write_text(text, encoding="utf-8")
        logger.info("document.written", path=str(args.file))
    else:
        sys.stdout.write(text)


if __name__ == "__main__":
    run()
