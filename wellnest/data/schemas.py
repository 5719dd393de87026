"""Record schemas for journal entries, mood check-ins and achievements.

Stored shapes keep the camelCase field names of the store's wire format.
"""

from __future__ import annotations

from datetime import date
from enum import IntEnum, StrEnum
from typing import Annotated, NotRequired

from typing_extensions import TypedDict

from pydantic import Field

Rating = Annotated[int, Field(ge=1, le=5)]

RATING_MIN = 1
RATING_MAX = 5


class StoreKey(StrEnum):
    """Fixed keys recognized in the activity store."""

    JOURNAL_ENTRIES = "journalEntries"
    MOOD_ENTRIES = "moodEntries"
    ACHIEVEMENTS = "achievements"
    QUOTE_DATE = "quoteDate"
    DAILY_QUOTE = "dailyQuote"
    BREATHING_STATS = "breathingStats"  # reserved, not read yet


class TrendWindow(IntEnum):
    """Supported trend window lengths in days."""

    WEEK = 7
    MONTH = 30


class MoodRecord(TypedDict):
    """A daily mood check-in. At most one per calendar day."""

    date: str  # ISO calendar day
    mood: Rating
    energy: Rating
    anxiety: Rating
    notes: NotRequired[str]


class JournalRecord(TypedDict):
    """A free-text journal entry."""

    id: str
    date: str  # ISO calendar day
    content: str
    prompt: NotRequired[str | None]
    createdAt: int  # epoch milliseconds


class Achievement(TypedDict):
    """Persisted achievement state for one catalog id."""

    id: str
    title: str
    description: str
    icon: str
    earned: bool
    earnedDate: NotRequired[str | None]  # ISO calendar day once earned


class AchievementMetrics(TypedDict):
    """Counters the achievement predicates are evaluated against."""

    journal_count: int
    mood_count: int
    journal_streak: int
    mood_streak: int
    breathing_sessions: int


class StreakSummary(TypedDict):
    """Current streak per tracked activity."""

    journal: int
    mood: int
    breathing: int  # breathing sessions are not tracked yet, always 0


class TrendBucket(TypedDict):
    """One day of a trend window. None marks a day without a check-in."""

    date: str
    label: str
    mood: int | None
    energy: int | None
    anxiety: int | None


class TrendAverages(TypedDict):
    """Per-metric window averages; None when the window has no values."""

    mood: float | None
    energy: float | None
    anxiety: float | None


class TrendSummary(TypedDict):
    """Fixed-length trend series plus averages."""

    window_days: int
    buckets: list[TrendBucket]
    averages: TrendAverages


class QuoteCache(TypedDict):
    """Last selected daily message and the day it was selected for."""

    last_date: str | None
    last_message: str | None


def make_mood_record(
    day: date,
    mood: int,
    energy: int = 3,
    anxiety: int = 3,
    notes: str = "",
) -> MoodRecord:
    """Create a mood check-in record for a calendar day."""
    return MoodRecord(
        date=day.isoformat(),
        mood=mood,
        energy=energy,
        anxiety=anxiety,
        notes=notes.strip(),
    )


def make_journal_record(
    entry_id: str,
    day: date,
    content: str,
    created_at: int,
    prompt: str | None = None,
) -> JournalRecord:
    """Create a journal record. An empty prompt is stored as None."""
    return JournalRecord(
        id=entry_id,
        date=day.isoformat(),
        content=content.strip(),
        prompt=prompt or None,
        createdAt=created_at,
    )


def make_achievement(
    achievement_id: str,
    title: str,
    description: str,
    icon: str,
    earned: bool = False,
    earned_date: date | None = None,
) -> Achievement:
    """Create an achievement state record."""
    return Achievement(
        id=achievement_id,
        title=title,
        description=description,
        icon=icon,
        earned=earned,
        earnedDate=earned_date.isoformat() if earned_date else None,
    )


def make_metrics(
    journal_count: int = 0,
    mood_count: int = 0,
    journal_streak: int = 0,
    mood_streak: int = 0,
    breathing_sessions: int = 0,
) -> AchievementMetrics:
    """Create an achievement metrics snapshot."""
    return AchievementMetrics(
        journal_count=journal_count,
        mood_count=mood_count,
        journal_streak=journal_streak,
        mood_streak=mood_streak,
        breathing_sessions=breathing_sessions,
    )
