"""Progress screen: current streaks and achievements."""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any

from wellnest.data.achievements import split_achievements, update_achievements
from wellnest.data.store import ActivityStore
from wellnest.data.streaks import get_streak_summary

logger = logging.getLogger(__name__)


def show_progress(**kwargs: Any) -> str:
    """Streaks plus earned achievements and the next few goals.

    Achievements are re-evaluated and written back on every visit.
    """
    store: ActivityStore = kwargs.pop("store")
    today: date = kwargs.pop("today")
    kwargs.pop("config", None)

    streaks = get_streak_summary(store, today)
    achievements, persisted = update_achievements(store, today)
    earned, upcoming = split_achievements(achievements)

    return json.dumps(
        {
            "streaks": streaks,
            "earned": earned,
            "next_goals": upcoming,
            "persisted": persisted,
        }
    )
