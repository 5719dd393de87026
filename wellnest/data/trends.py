"""Fixed-length mood/energy/anxiety trend windows for charting."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, timedelta

from wellnest.data.dates import display_label, parse_day
from wellnest.data.schemas import MoodRecord, TrendAverages, TrendBucket, TrendSummary, TrendWindow

logger = logging.getLogger(__name__)


def _index_by_day(records: Iterable[MoodRecord]) -> dict[date, MoodRecord]:
    """Map calendar day -> record; a later record for the same day wins."""
    by_day: dict[date, MoodRecord] = {}
    for rec in records:
        day = parse_day(rec.get("date"))
        if day is None:
            continue
        by_day[day] = rec
    return by_day


def _average(values: list[int]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


def trend(records: Iterable[MoodRecord], window_days: int, today: date) -> TrendSummary:
    """Build exactly window_days daily buckets ending today, oldest first.

    Days without a check-in carry None for every metric, so "no data" is never
    confused with the lowest rating. Averages skip absent days and are None
    when a metric has no values in the window.

    Raises ValueError if window_days is not a supported TrendWindow.
    """
    window = TrendWindow(window_days)
    by_day = _index_by_day(records)

    buckets: list[TrendBucket] = []
    for offset in range(window - 1, -1, -1):
        day = today - timedelta(days=offset)
        rec = by_day.get(day)
        buckets.append(
            TrendBucket(
                date=day.isoformat(),
                label=display_label(day),
                mood=rec["mood"] if rec else None,
                energy=rec["energy"] if rec else None,
                anxiety=rec["anxiety"] if rec else None,
            )
        )

    averages = TrendAverages(
        mood=_average([b["mood"] for b in buckets if b["mood"] is not None]),
        energy=_average([b["energy"] for b in buckets if b["energy"] is not None]),
        anxiety=_average([b["anxiety"] for b in buckets if b["anxiety"] is not None]),
    )
    return TrendSummary(window_days=int(window), buckets=buckets, averages=averages)


def has_any_data(summary: TrendSummary) -> bool:
    """True if at least one bucket in the window has a mood value."""
    return any(b["mood"] is not None for b in summary["buckets"])


def format_average(value: float | None) -> str:
    """One-decimal display form of an average, 'N/A' when unavailable."""
    if value is None:
        return "N/A"
    return f"{value:.1f}"
