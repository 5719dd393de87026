"""Tests for wellnest.views — screen handlers end to end over an in-memory store."""

from __future__ import annotations

import json
from datetime import date, timedelta

import pytest

from wellnest.core.config import Settings
from wellnest.core.registry import dispatch_action
from wellnest.data.quotes import DAILY_QUOTES
from wellnest.data.schemas import StoreKey
from wellnest.data.store import InMemoryStore

TODAY = date(2026, 3, 1)


def _run(name: str, store: InMemoryStore, today: date = TODAY, **params: object) -> dict:
    return json.loads(dispatch_action(name, dict(params), store, today=today))


# ---------------------------------------------------------------------------
# home
# ---------------------------------------------------------------------------


class TestHome:
    def test_empty_store(self) -> None:
        store = InMemoryStore()
        data = _run("home", store)

        assert data["date"] == "2026-03-01"
        assert data["heading"] == "Sunday, March 1, 2026"
        assert data["quote"] == DAILY_QUOTES[0]
        assert data["journal_entries"] == 0
        assert data["mood_entries"] == 0
        assert data["current_streak"] == 0
        assert data["today_completed"] == {"journal": False, "mood": False}
        assert store.get(StoreKey.QUOTE_DATE) == "2026-03-01"

    def test_counts_and_completion(self) -> None:
        store = InMemoryStore()
        for offset in (2, 1):
            _run("save_journal_entry", store, today=TODAY - timedelta(days=offset), content=f"day -{offset}")
        _run("log_mood", store, mood=4)

        data = _run("home", store)

        assert data["journal_entries"] == 2
        assert data["mood_entries"] == 1
        assert data["current_streak"] == 2  # grace day: today not written yet
        assert data["today_completed"] == {"journal": False, "mood": True}


# ---------------------------------------------------------------------------
# mood
# ---------------------------------------------------------------------------


class TestMood:
    def test_log_and_show(self) -> None:
        store = InMemoryStore()
        logged = _run("log_mood", store, mood=5, energy=4, anxiety=2, notes="great")
        assert logged["status"] == "logged"
        assert logged["persisted"] is True

        data = _run("mood", store, window_days=7)
        assert data["today_entry"]["mood"] == 5
        assert len(data["trend"]["buckets"]) == 7
        assert data["averages"] == {"mood": "5.0", "energy": "4.0", "anxiety": "2.0"}
        assert data["has_data"] is True

    def test_empty_month(self) -> None:
        data = _run("mood", InMemoryStore(), window_days=30)
        assert len(data["trend"]["buckets"]) == 30
        assert data["averages"] == {"mood": "N/A", "energy": "N/A", "anxiety": "N/A"}
        assert data["has_data"] is False
        assert data["today_entry"] is None

    def test_default_window_from_config(self) -> None:
        store = InMemoryStore()
        result = dispatch_action("mood", {}, store, config=Settings(trend_window=30), today=TODAY)
        assert json.loads(result)["trend"]["window_days"] == 30

    def test_window_param_overrides_config(self) -> None:
        cfg = Settings(trend_window=30)
        result = dispatch_action("mood", {"window_days": 7}, InMemoryStore(), config=cfg, today=TODAY)
        assert json.loads(result)["trend"]["window_days"] == 7

    @pytest.mark.parametrize("window", [14, "week", None])
    def test_bad_window(self, window: object) -> None:
        assert "error" in _run("mood", InMemoryStore(), window_days=window)

    def test_log_requires_mood(self) -> None:
        assert "error" in _run("log_mood", InMemoryStore(), energy=3)

    def test_log_rejects_out_of_range(self) -> None:
        store = InMemoryStore()
        result = _run("log_mood", store, mood=7)
        assert "error" in result
        assert store.get(StoreKey.MOOD_ENTRIES) is None


# ---------------------------------------------------------------------------
# journal
# ---------------------------------------------------------------------------


class TestJournal:
    def test_create_edit_delete(self) -> None:
        store = InMemoryStore()
        created = _run("save_journal_entry", store, content="hello", prompt="Are you okay?")
        assert created["status"] == "stored"
        entry_id = created["entry"]["id"]

        updated = _run("save_journal_entry", store, content="hello again", entry_id=entry_id)
        assert updated["status"] == "updated"
        assert updated["entry"]["createdAt"] == created["entry"]["createdAt"]

        listing = _run("journal", store)
        assert [e["content"] for e in listing["entries"]] == ["hello again"]
        assert len(listing["prompts"]) == 3

        deleted = _run("delete_journal_entry", store, entry_id=entry_id)
        assert deleted["status"] == "deleted"
        assert _run("journal", store)["entries"] == []

    def test_content_required(self) -> None:
        assert "error" in _run("save_journal_entry", InMemoryStore(), content="  ")

    def test_edit_unknown_id(self) -> None:
        assert "error" in _run("save_journal_entry", InMemoryStore(), content="x", entry_id="404")

    def test_delete_requires_id(self) -> None:
        assert "error" in _run("delete_journal_entry", InMemoryStore())

    def test_delete_unknown_id(self) -> None:
        assert "error" in _run("delete_journal_entry", InMemoryStore(), entry_id="404")


# ---------------------------------------------------------------------------
# breathe
# ---------------------------------------------------------------------------


class TestBreathe:
    def test_catalog(self) -> None:
        data = _run("breathe", InMemoryStore())
        assert [e["name"] for e in data["exercises"]] == ["4-7-8 Breathing", "Box Breathing", "Simple Breathing"]
        assert data["exercises"][0]["pattern"] == [4, 7, 8]
        assert data["selected"] == "4-7-8 Breathing"
        assert "session" not in data

    def test_session_phase(self) -> None:
        data = _run("breathe", InMemoryStore(), exercise="Box Breathing", elapsed_seconds=9)
        assert data["selected"] == "Box Breathing"
        assert data["session"] == {"phase": "Exhale", "phase_index": 2, "seconds_left": 3, "cycles": 0}

    def test_nothing_persisted(self) -> None:
        store = InMemoryStore()
        _run("breathe", store, elapsed_seconds=100)
        assert store.get(StoreKey.BREATHING_STATS) is None

    def test_unknown_exercise(self) -> None:
        assert "error" in _run("breathe", InMemoryStore(), exercise="Lion's Breath")

    @pytest.mark.parametrize("elapsed", [-1, "soon"])
    def test_bad_elapsed(self, elapsed: object) -> None:
        assert "error" in _run("breathe", InMemoryStore(), elapsed_seconds=elapsed)


# ---------------------------------------------------------------------------
# progress
# ---------------------------------------------------------------------------


class TestProgress:
    def test_week_of_activity(self) -> None:
        store = InMemoryStore()
        for offset in range(7, 0, -1):
            day = TODAY - timedelta(days=offset)
            _run("save_journal_entry", store, today=day, content=f"entry {offset}")
            _run("log_mood", store, today=day, mood=3)

        data = _run("progress", store)

        assert data["streaks"] == {"journal": 7, "mood": 7, "breathing": 0}
        earned = {a["id"] for a in data["earned"]}
        assert earned == {"journal-1", "journal-7", "mood-1", "mood-7", "wellbeing-week"}
        assert all(a["earnedDate"] == "2026-03-01" for a in data["earned"])
        assert [a["id"] for a in data["next_goals"]] == ["journal-30", "breathing-1"]
        assert data["persisted"] is True

    def test_earned_survive_broken_streak(self) -> None:
        store = InMemoryStore()
        _run("save_journal_entry", store, content="once")
        _run("progress", store)

        data = _run("progress", store, today=TODAY + timedelta(days=5))

        assert data["streaks"]["journal"] == 0
        assert [a["id"] for a in data["earned"]] == ["journal-1"]
        assert data["earned"][0]["earnedDate"] == "2026-03-01"
