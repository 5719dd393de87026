"""Mood screen: today's check-in and the trend chart."""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any

from wellnest.core.config import Settings, settings
from wellnest.data.collectors import get_mood_entry, save_mood_entry
from wellnest.data.schemas import MoodRecord, StoreKey, TrendWindow
from wellnest.data.store import ActivityStore, load_collection
from wellnest.data.trends import format_average, has_any_data, trend

logger = logging.getLogger(__name__)


def show_mood(**kwargs: Any) -> str:
    """Today's check-in (if any) plus a 7- or 30-day trend window."""
    store: ActivityStore = kwargs.pop("store")
    today: date = kwargs.pop("today")
    cfg: Settings = kwargs.pop("config", None) or settings
    try:
        window = TrendWindow(int(kwargs.get("window_days", cfg.trend_window)))
    except (TypeError, ValueError):
        return json.dumps({"error": "window_days must be 7 or 30"})

    records = load_collection(store, StoreKey.MOOD_ENTRIES, MoodRecord)
    summary = trend(records, window, today)

    return json.dumps(
        {
            "today_entry": get_mood_entry(store, today),
            "trend": summary,
            "averages": {k: format_average(v) for k, v in summary["averages"].items()},
            "has_data": has_any_data(summary),
        }
    )


def log_mood(**kwargs: Any) -> str:
    """Save or update today's mood check-in.

    Accepts: mood (required), energy, anxiety, notes.
    """
    store: ActivityStore = kwargs.pop("store")
    today: date = kwargs.pop("today")
    kwargs.pop("config", None)
    if kwargs.get("mood") is None:
        return json.dumps({"error": "mood is required"})
    try:
        mood = int(kwargs["mood"])
        energy = int(kwargs.get("energy", 3))
        anxiety = int(kwargs.get("anxiety", 3))
        record, persisted = save_mood_entry(
            store,
            today,
            mood=mood,
            energy=energy,
            anxiety=anxiety,
            notes=str(kwargs.get("notes", "")),
        )
    except (TypeError, ValueError) as exc:
        return json.dumps({"error": str(exc)})

    return json.dumps({"status": "logged", "entry": record, "persisted": persisted})
