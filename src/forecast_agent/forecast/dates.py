"""Permissive date parsing and long-form rendering.

Parsing follows en-US conventions (month before day in numeric dates).
ISO 8601 is accepted in its extended calendar form only; compact
(``20251225``) and week (``2025-W52-4``) forms are not dates here. Month-day
strings without a year take the current year.
"""

import re
from datetime import datetime

_ISO_CALENDAR = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ]|$)")

# Tried in order after ISO 8601
_DATE_FORMATS = (
    "%m/%d/%y",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %I:%M %p",
    "%m-%d-%Y",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%A, %B %d, %Y",
    "%a, %b %d, %Y",
    "%a, %d %b %Y",
    "%B %Y",
)

# Parsed with the current year appended
_NO_YEAR_FORMATS = (
    "%m/%d",
    "%B %d",
    "%b %d",
    "%d %B",
    "%d %b",
)


def parse_date(value: str) -> datetime | None:
    """Parse a date string, returning None when it is not a recognizable date.

    Args:
        value: Free-form date string

    Returns:
        Parsed datetime, or None
    """
    candidate = value.strip()
    if not candidate:
        return None

    if _ISO_CALENDAR.match(candidate):
        try:
            return datetime.fromisoformat(candidate.replace("Z", "+00:00"))
        except ValueError:
            pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(candidate, fmt)
        except ValueError:
            continue

    year = datetime.now().year
    for fmt in _NO_YEAR_FORMATS:
        try:
            return datetime.strptime(f"{candidate} {year}", f"{fmt} %Y")
        except ValueError:
            continue

    return None


def format_long_date(value: datetime) -> str:
    """Render a date as e.g. ``Thursday, December 25, 2025``."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def resolve_date(value: str) -> tuple[datetime | None, str]:
    """Parse ``value`` and render it for display.

    Returns:
        The parsed datetime (None if unrecognized) and the long form, which
        is ``value`` unchanged when it does not parse
    """
    parsed = parse_date(value)
    return parsed, value if parsed is None else format_long_date(parsed)


def render_long_date(value: str) -> str:
    """Render ``value`` in long form, or return it unchanged if it does not parse."""
    return resolve_date(value)[1]
