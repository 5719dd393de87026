"""Calendar-day helpers shared by the streak, trend and quote engines."""

from __future__ import annotations

import logging
from datetime import date, datetime
from zoneinfo import ZoneInfo

from wellnest.core.config import Settings
from wellnest.core.config import settings as default_settings

logger = logging.getLogger(__name__)

# Browser Date.toDateString() format, e.g. "Mon Oct 19 2026"
_LEGACY_DAY_FORMAT = "%a %b %d %Y"


def local_today(config: Settings | None = None) -> date:
    """Return today's calendar day in the configured timezone."""
    cfg = config or default_settings
    return datetime.now(ZoneInfo(cfg.timezone)).date()


def parse_day(value: object) -> date | None:
    """Normalize a stored date value to a calendar day; return None on failure.

    Accepts ``date``/``datetime`` objects, ISO dates, ISO timestamps (the
    time-of-day is discarded) and the legacy ``toDateString`` form.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        pass
    try:
        return datetime.strptime(value, _LEGACY_DAY_FORMAT).date()
    except ValueError:
        logger.debug("Unparseable date: %s", value)
        return None


def day_of_year(day: date) -> int:
    """1-based ordinal day within the year (1 January is 1)."""
    return day.timetuple().tm_yday


def display_label(day: date) -> str:
    """Short chart label, e.g. 'Oct 19'."""
    return f"{day:%b} {day.day}"


def heading_label(day: date) -> str:
    """Long dashboard heading, e.g. 'Monday, October 19, 2026'."""
    return f"{day:%A, %B} {day.day}, {day.year}"
