"""Consecutive-day streaks derived from journal and mood records."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from wellnest.data.dates import parse_day
from wellnest.data.schemas import JournalRecord, MoodRecord, StoreKey, StreakSummary
from wellnest.data.store import ActivityStore, load_collection

logger = logging.getLogger(__name__)


def _extract_days(values: Iterable[object], today: date) -> set[date]:
    """Normalize values to calendar days, dropping unparseable and future ones."""
    days: set[date] = set()
    for value in values:
        parsed = parse_day(value)
        if parsed is None or parsed > today:
            continue
        days.add(parsed)
    return days


def _count_back(day_set: set[date], start: date) -> int:
    """Count consecutive days backwards from start (inclusive)."""
    count = 0
    cursor = start
    while cursor in day_set:
        count += 1
        cursor -= timedelta(days=1)
    return count


def streak(dates: Iterable[object], today: date) -> int:
    """Return the length of the unbroken run of days ending today.

    A missing today is forgiven once, at the start of the walk: if yesterday
    is logged the run is counted from yesterday instead. Interior gaps always
    break the run. Future-dated values are ignored.
    """
    day_set = _extract_days(dates, today)
    if not day_set:
        return 0
    if today in day_set:
        return _count_back(day_set, today)
    return _count_back(day_set, today - timedelta(days=1))


def get_streak_summary(store: ActivityStore, today: date) -> StreakSummary:
    """Compute journal and mood streaks from a store snapshot."""
    journal = load_collection(store, StoreKey.JOURNAL_ENTRIES, JournalRecord)
    moods = load_collection(store, StoreKey.MOOD_ENTRIES, MoodRecord)

    summary = StreakSummary(
        journal=streak((e["date"] for e in journal), today),
        mood=streak((e["date"] for e in moods), today),
        breathing=0,
    )
    logger.debug("Streaks on %s: %s", today, summary)
    return summary


def logged_on(records: Iterable[JournalRecord | MoodRecord], day: date) -> bool:
    """True if any record falls on the given calendar day."""
    return any(parse_day(r["date"]) == day for r in records)
