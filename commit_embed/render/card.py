"""Self-contained HTML card for a GitHub commit.

Every element carries its own ``style`` attribute so the fragment renders the
same when pasted into any HTML-capable viewer, with no stylesheet or script.
"""

from datetime import tzinfo
from html import escape

from commit_embed.render.dates import format_commit_date
from commit_embed.shared.models import CommitData

# Card palette (GitHub light theme)
BORDER_COLOR = "#d0d7de"
BACKGROUND_COLOR = "#ffffff"
TEXT_COLOR = "#1f2328"
MUTED_COLOR = "#656d76"
LINK_COLOR = "#0969da"
ADDITIONS_COLOR = "#1a7f37"  # GitHub green
DELETIONS_COLOR = "#cf222e"  # Red

FONT_STACK = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Helvetica, Arial, sans-serif"

CARD_STYLE = (
    f"border: 1px solid {BORDER_COLOR}; border-radius: 8px; padding: 16px; margin: 8px 0; "
    f"background: {BACKGROUND_COLOR}; font-family: {FONT_STACK}; color: {TEXT_COLOR};"
)
HEADER_STYLE = "display: flex; align-items: center; gap: 12px; margin-bottom: 12px;"
AVATAR_STYLE = "width: 32px; height: 32px; border-radius: 50%;"
LOGIN_STYLE = f"display: block; color: {TEXT_COLOR};"
META_STYLE = f"font-size: 0.85em; color: {MUTED_COLOR};"
REPO_LINK_STYLE = f"font-size: 0.85em; color: {LINK_COLOR}; text-decoration: none;"
MESSAGE_STYLE = f"margin: 12px 0; color: {TEXT_COLOR};"
FOOTER_STYLE = (
    "display: flex; justify-content: space-between; align-items: center; font-size: 0.85em;"
)
ADDITIONS_STYLE = f"font-family: monospace; color: {ADDITIONS_COLOR}; font-weight: 600;"
DELETIONS_STYLE = f"font-family: monospace; color: {DELETIONS_COLOR}; font-weight: 600;"
SHA_LINK_STYLE = f"color: {LINK_COLOR}; text-decoration: none; font-weight: 500;"


def _attr(value: str) -> str:
    return escape(value, quote=True)


def _avatar_html(commit: CommitData) -> str:
    if not commit.author.avatar_url:
        return ""
    return (
        f'<img src="{_attr(commit.author.avatar_url)}" style="{AVATAR_STYLE}" '
        f'alt="{_attr(commit.author.login)}" />'
    )


def generate_card_html(
    commit: CommitData,
    message_html: str,
    *,
    tz: tzinfo | None = None,
) -> str:
    """Build the embeddable HTML card for a commit.

    Args:
        commit: Normalized commit data
        message_html: Commit message already rendered to HTML, inserted as is
        tz: Display timezone for the date line

    Returns:
        HTML fragment: header (avatar, login, date, repo link), message body,
        footer (+additions, -deletions, short sha link)

    Example:
        >>> html = generate_card_html(commit, "<p>Fix bug</p>\\n")
        >>> ">+0</span>" in html
        True
    """
    login = escape(commit.author.login)
    full_name = escape(commit.full_name)
    date = escape(format_commit_date(commit.date, tz))

    header_lines = [f'  <div style="{HEADER_STYLE}">']
    avatar = _avatar_html(commit)
    if avatar:
        header_lines.append(f"    {avatar}")
    header_lines.extend(
        [
            "    <div>",
            f'      <strong style="{LOGIN_STYLE}">{login}</strong>',
            f'      <span style="{META_STYLE}">{date}</span>',
            f'      <span style="{META_STYLE}"> · </span>',
            f'      <a href="{_attr(commit.repo_url)}" style="{REPO_LINK_STYLE}">{full_name}</a>',
            "    </div>",
            "  </div>",
        ]
    )

    message_lines = [
        f'  <div style="{MESSAGE_STYLE}">',
        message_html.rstrip("\n"),
        "  </div>",
    ]

    footer_lines = [
        f'  <div style="{FOOTER_STYLE}">',
        f'    <span style="{ADDITIONS_STYLE}">+{commit.stats.additions}</span>',
        f'    <span style="{DELETIONS_STYLE}">-{commit.stats.deletions}</span>',
        f'    <a href="{_attr(commit.url)}" style="{SHA_LINK_STYLE}">'
        f"{escape(commit.short_sha)}</a>",
        "  </div>",
    ]

    return "\n".join(
        [f'<div style="{CARD_STYLE}">', *header_lines, *message_lines, *footer_lines, "</div>"]
    )
