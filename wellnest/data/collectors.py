"""Journal and mood check-in record operations against the activity store."""

from __future__ import annotations

import logging
import random
import time
from datetime import date

from wellnest.data.dates import parse_day
from wellnest.data.schemas import (
    RATING_MAX,
    RATING_MIN,
    JournalRecord,
    MoodRecord,
    StoreKey,
    make_journal_record,
    make_mood_record,
)
from wellnest.data.store import ActivityStore, load_collection, split_collection

logger = logging.getLogger(__name__)

REFLECTION_PROMPTS: tuple[str, ...] = (
    "If you saw someone feeling the way you are feeling right now, what would you tell that person?",
    "If you wrote a book about your first heartbreak, what would the last sentence be?",
    "If you ever had to walk into a room full of everyone you loved, who would you look for first?",
    "What's the best memory you have of your father and/or mother?",
    "Who is the person you lost and would like to hug again, even if only for a moment?",
    "If someone offered you a box containing everything you've ever lost, what would you look for first?",
    "You are alone, and you have one last phone call before you die... Who would you call for a final goodbye?",
    "Are you okay?",
    "If you could send a note to your younger self, what would it say?",
)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _check_rating(name: str, value: int) -> None:
    if not RATING_MIN <= value <= RATING_MAX:
        msg = f"{name} must be between {RATING_MIN} and {RATING_MAX}, got {value}"
        raise ValueError(msg)


# ---------------------------------------------------------------------------
# Mood check-ins
# ---------------------------------------------------------------------------


def get_mood_entry(store: ActivityStore, day: date) -> MoodRecord | None:
    """Return the check-in logged for day, if any."""
    found: MoodRecord | None = None
    for rec in load_collection(store, StoreKey.MOOD_ENTRIES, MoodRecord):
        if parse_day(rec["date"]) == day:
            found = rec
    return found


def save_mood_entry(
    store: ActivityStore,
    today: date,
    mood: int,
    energy: int = 3,
    anxiety: int = 3,
    notes: str = "",
) -> tuple[MoodRecord, bool]:
    """Record today's check-in, replacing any earlier one for the same day.

    Stored items that fail validation are written back unchanged, except
    those dated today, which the new check-in supersedes.

    Returns (record, persisted). Raises ValueError for ratings outside 1-5.
    """
    _check_rating("mood", mood)
    _check_rating("energy", energy)
    _check_rating("anxiety", anxiety)

    record = make_mood_record(today, mood=mood, energy=energy, anxiety=anxiety, notes=notes)
    existing, invalid = split_collection(store, StoreKey.MOOD_ENTRIES, MoodRecord)
    updated = [r for r in existing if parse_day(r["date"]) != today]
    unreadable = [r for r in invalid if not (isinstance(r, dict) and parse_day(r.get("date")) == today)]
    replaced = len(updated) != len(existing)
    updated.append(record)

    persisted = store.set(StoreKey.MOOD_ENTRIES, [*updated, *unreadable])
    logger.info("%s mood check-in for %s", "Updated" if replaced else "Saved", today)
    return record, persisted


# ---------------------------------------------------------------------------
# Journal entries
# ---------------------------------------------------------------------------


def list_journal_entries(store: ActivityStore) -> list[JournalRecord]:
    """All journal entries, newest first."""
    entries = load_collection(store, StoreKey.JOURNAL_ENTRIES, JournalRecord)
    return sorted(entries, key=lambda e: e["createdAt"], reverse=True)


def save_journal_entry(
    store: ActivityStore,
    today: date,
    content: str,
    prompt: str | None = None,
    entry_id: str | None = None,
    now_ms: int | None = None,
) -> tuple[JournalRecord, bool]:
    """Create a new entry, or replace entry_id while keeping its createdAt.

    New entries are placed first; unreadable stored items are kept after the
    valid ones. Returns (record, persisted).

    Raises:
        ValueError: content is blank.
        KeyError: entry_id does not exist.
    """
    if not content.strip():
        msg = "Journal content must not be empty"
        raise ValueError(msg)

    stored, invalid = split_collection(store, StoreKey.JOURNAL_ENTRIES, JournalRecord)
    entries = sorted(stored, key=lambda e: e["createdAt"], reverse=True)
    stamp = now_ms if now_ms is not None else _now_ms()

    if entry_id is not None:
        original = next((e for e in entries if e["id"] == entry_id), None)
        if original is None:
            msg = f"Unknown journal entry: {entry_id}"
            raise KeyError(msg)
        record = make_journal_record(entry_id, today, content, original["createdAt"], prompt=prompt)
        updated = [record if e["id"] == entry_id else e for e in entries]
    else:
        taken = {e["id"] for e in entries} | {r.get("id") for r in invalid if isinstance(r, dict)}
        new_id = str(stamp)
        suffix = 1
        while new_id in taken:
            new_id = f"{stamp}-{suffix}"
            suffix += 1
        record = make_journal_record(new_id, today, content, stamp, prompt=prompt)
        updated = [record, *entries]

    persisted = store.set(StoreKey.JOURNAL_ENTRIES, [*updated, *invalid])
    logger.info("Saved journal entry %s", record["id"])
    return record, persisted


def delete_journal_entry(store: ActivityStore, entry_id: str) -> tuple[bool, bool]:
    """Remove an entry by id. Returns (removed, persisted)."""
    entries, invalid = split_collection(store, StoreKey.JOURNAL_ENTRIES, JournalRecord)
    remaining = [e for e in entries if e["id"] != entry_id]
    if len(remaining) == len(entries):
        return False, True
    persisted = store.set(StoreKey.JOURNAL_ENTRIES, [*remaining, *invalid])
    logger.info("Deleted journal entry %s", entry_id)
    return True, persisted


# ---------------------------------------------------------------------------
# Reflection prompts
# ---------------------------------------------------------------------------


def suggested_prompts(limit: int = 3) -> list[str]:
    """The first few reflection prompts shown as quick picks."""
    return list(REFLECTION_PROMPTS[:limit])


def random_prompt(rng: random.Random | None = None) -> str:
    """Pick a reflection prompt at random."""
    return (rng or random).choice(REFLECTION_PROMPTS)
