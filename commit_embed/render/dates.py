"""Display formatting for commit timestamps."""

from datetime import UTC, datetime, tzinfo

from commit_embed.core.logging import get_logger

logger = get_logger(__name__)

# Fixed English abbreviations so output does not depend on the process locale
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_commit_date(iso_date: str, tz: tzinfo | None = None) -> str:
    """Format an ISO-8601 timestamp as "<Mon> <day>, <year>".

    Args:
        iso_date: Timestamp such as "2024-01-05T10:00:00Z"
        tz: Display timezone; the timestamp's own offset is used when None

    Returns:
        Formatted date (e.g., "Jan 5, 2024"), or iso_date unchanged if it
        cannot be parsed

    Example:
        >>> format_commit_date("2024-01-05T10:00:00Z")
        'Jan 5, 2024'
    """
    try:
        timestamp = datetime.fromisoformat(iso_date.replace("Z", "+00:00"))
        if tz is not None:
            if timestamp.tzinfo is None:
                timestamp = timestamp.replace(tzinfo=UTC)
            timestamp = timestamp.astimezone(tz)
    except (ValueError, TypeError, AttributeError, OverflowError):
        # Conversion can leave the datetime range near year 1 or 9999
        logger.debug("render.date.unparseable", value=iso_date)
        return iso_date

    return f"{MONTH_ABBREVIATIONS[timestamp.month - 1]} {timestamp.day}, {timestamp.year}"
