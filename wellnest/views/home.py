"""Home dashboard: daily quote, entry counts and today's progress."""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any

from wellnest.data.dates import heading_label
from wellnest.data.quotes import get_daily_quote
from wellnest.data.schemas import JournalRecord, MoodRecord, StoreKey
from wellnest.data.store import ActivityStore, load_collection
from wellnest.data.streaks import logged_on, streak

logger = logging.getLogger(__name__)


def show_home(**kwargs: Any) -> str:
    """Dashboard summary for the home screen.

    The current streak is the journal streak, computed with the same grace-day
    rule as the progress screen.
    """
    store: ActivityStore = kwargs.pop("store")
    today: date = kwargs.pop("today")
    kwargs.pop("config", None)

    journal = load_collection(store, StoreKey.JOURNAL_ENTRIES, JournalRecord)
    moods = load_collection(store, StoreKey.MOOD_ENTRIES, MoodRecord)
    quote, quote_saved = get_daily_quote(store, today)

    return json.dumps(
        {
            "date": today.isoformat(),
            "heading": heading_label(today),
            "quote": quote,
            "quote_persisted": quote_saved,
            "journal_entries": len(journal),
            "mood_entries": len(moods),
            "current_streak": streak((e["date"] for e in journal), today),
            "today_completed": {
                "journal": logged_on(journal, today),
                "mood": logged_on(moods, today),
            },
        }
    )
