"""Threshold achievements with monotonic (never-revoked) unlock state."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from wellnest.data.schemas import (
    Achievement,
    AchievementMetrics,
    JournalRecord,
    MoodRecord,
    StoreKey,
    make_achievement,
    make_metrics,
)
from wellnest.data.store import ActivityStore, load_collection
from wellnest.data.streaks import streak

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AchievementDefinition:
    """Catalog entry: display fields plus the unlock predicate."""

    id: str
    title: str
    description: str
    icon: str
    unlocked: Callable[[AchievementMetrics], bool]


ACHIEVEMENT_CATALOG: tuple[AchievementDefinition, ...] = (
    AchievementDefinition(
        id="journal-1",
        title="First Entry",
        description="Write your first journal entry",
        icon="📝",
        unlocked=lambda m: m["journal_count"] >= 1,
    ),
    AchievementDefinition(
        id="journal-7",
        title="Week Warrior",
        description="Journal for 7 consecutive days",
        icon="🗓️",
        unlocked=lambda m: m["journal_streak"] >= 7,
    ),
    AchievementDefinition(
        id="journal-30",
        title="Monthly Master",
        description="Journal for 30 consecutive days",
        icon="📚",
        unlocked=lambda m: m["journal_streak"] >= 30,
    ),
    AchievementDefinition(
        id="mood-1",
        title="Mood Tracker",
        description="Log your first mood check-in",
        icon="😊",
        unlocked=lambda m: m["mood_count"] >= 1,
    ),
    AchievementDefinition(
        id="mood-7",
        title="Emotion Expert",
        description="Track mood for 7 consecutive days",
        icon="❤️",
        unlocked=lambda m: m["mood_streak"] >= 7,
    ),
    AchievementDefinition(
        id="breathing-1",
        title="Breath Beginner",
        description="Complete your first breathing exercise",
        icon="🫁",
        unlocked=lambda m: m["breathing_sessions"] >= 1,
    ),
    AchievementDefinition(
        id="wellbeing-week",
        title="Wellness Week",
        description="Use the app for 7 consecutive days",
        icon="🌟",
        unlocked=lambda m: min(m["journal_streak"], m["mood_streak"]) >= 7,
    ),
)


def evaluate(
    catalog: Sequence[AchievementDefinition],
    metrics: AchievementMetrics,
    previously_earned: Iterable[Achievement],
    today: date,
) -> list[Achievement]:
    """Return one achievement per catalog entry, in catalog order.

    An entry already earned in previously_earned is carried forward as stored.
    Every other entry is evaluated against metrics and stamped with today when
    it unlocks. Earned state is never revoked.
    """
    earned_by_id = {a["id"]: a for a in previously_earned if a.get("earned")}

    result: list[Achievement] = []
    for definition in catalog:
        carried = earned_by_id.get(definition.id)
        if carried is not None:
            result.append(Achievement(**carried))
            continue

        unlocked = definition.unlocked(metrics)
        if unlocked:
            logger.info("Achievement unlocked: %s", definition.id)
        result.append(
            make_achievement(
                achievement_id=definition.id,
                title=definition.title,
                description=definition.description,
                icon=definition.icon,
                earned=unlocked,
                earned_date=today if unlocked else None,
            )
        )
    return result


def collect_metrics(store: ActivityStore, today: date) -> AchievementMetrics:
    """Build achievement metrics from a single store snapshot."""
    journal = load_collection(store, StoreKey.JOURNAL_ENTRIES, JournalRecord)
    moods = load_collection(store, StoreKey.MOOD_ENTRIES, MoodRecord)
    return make_metrics(
        journal_count=len(journal),
        mood_count=len(moods),
        journal_streak=streak((e["date"] for e in journal), today),
        mood_streak=streak((e["date"] for e in moods), today),
        breathing_sessions=0,
    )


def update_achievements(
    store: ActivityStore,
    today: date,
    catalog: Sequence[AchievementDefinition] = ACHIEVEMENT_CATALOG,
) -> tuple[list[Achievement], bool]:
    """Evaluate achievements against the store and write the result back.

    Returns (achievements, persisted). The computed list is returned even when
    the write fails.
    """
    metrics = collect_metrics(store, today)
    previous = load_collection(store, StoreKey.ACHIEVEMENTS, Achievement)
    achievements = evaluate(catalog, metrics, previous, today)

    persisted = store.set(StoreKey.ACHIEVEMENTS, achievements)
    if not persisted:
        logger.error("Failed to persist achievements for %s", today)
    return achievements, persisted


def split_achievements(
    achievements: Iterable[Achievement],
    limit: int = 3,
) -> tuple[list[Achievement], list[Achievement]]:
    """Split into (earned, next goals), keeping at most limit next goals."""
    items = list(achievements)
    earned = [a for a in items if a["earned"]]
    upcoming = [a for a in items if not a["earned"]][:limit]
    return earned, upcoming
