"""Journal screen: entry list, prompts, and create/edit/delete actions."""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any

from wellnest.data.collectors import (
    delete_journal_entry,
    list_journal_entries,
    save_journal_entry,
    suggested_prompts,
)
from wellnest.data.store import ActivityStore

logger = logging.getLogger(__name__)


def show_journal(**kwargs: Any) -> str:
    """Previous entries (newest first) and prompt suggestions."""
    store: ActivityStore = kwargs.pop("store")
    kwargs.pop("today", None)
    kwargs.pop("config", None)
    return json.dumps(
        {
            "entries": list_journal_entries(store),
            "prompts": suggested_prompts(),
        }
    )


def save_journal(**kwargs: Any) -> str:
    """Create a journal entry, or update one when entry_id is given.

    Accepts: content (required), prompt, entry_id.
    """
    store: ActivityStore = kwargs.pop("store")
    today: date = kwargs.pop("today")
    kwargs.pop("config", None)
    content = str(kwargs.get("content", ""))
    prompt = kwargs.get("prompt")
    entry_id = kwargs.get("entry_id")

    if not content.strip():
        return json.dumps({"error": "content is required"})

    try:
        record, persisted = save_journal_entry(
            store,
            today,
            content,
            prompt=str(prompt) if prompt else None,
            entry_id=str(entry_id) if entry_id else None,
        )
    except KeyError:
        return json.dumps({"error": f"unknown entry_id: {entry_id}"})

    status = "updated" if entry_id else "stored"
    return json.dumps({"status": status, "entry": record, "persisted": persisted})


def delete_journal(**kwargs: Any) -> str:
    """Delete a journal entry by entry_id."""
    store: ActivityStore = kwargs.pop("store")
    kwargs.pop("today", None)
    kwargs.pop("config", None)
    entry_id = str(kwargs.get("entry_id", ""))
    if not entry_id:
        return json.dumps({"error": "entry_id is required"})

    removed, persisted = delete_journal_entry(store, entry_id)
    if not removed:
        return json.dumps({"error": f"unknown entry_id: {entry_id}"})
    return json.dumps({"status": "deleted", "entry_id": entry_id, "persisted": persisted})
