"""Action registry: named screen/actions with synchronous dispatch."""

import logging
from collections.abc import Callable
from datetime import date
from typing import Any, TypedDict

from wellnest.core.config import Settings, settings
from wellnest.data.dates import local_today
from wellnest.data.store import ActivityStore
from wellnest.views import (
    delete_journal,
    log_mood,
    save_journal,
    show_breathe,
    show_home,
    show_journal,
    show_mood,
    show_progress,
)

logger = logging.getLogger(__name__)


class ActionDef(TypedDict):
    """Registry entry for a single action."""

    handler: Callable[..., str]
    description: str
    view: bool  # True for navigable screens


# Navigation tabs; anything else falls back to the home screen
DEFAULT_VIEW = "home"

ACTION_REGISTRY: dict[str, ActionDef] = {
    "home": {
        "handler": show_home,
        "description": "Dashboard with daily quote, entry counts and today's progress.",
        "view": True,
    },
    "journal": {
        "handler": show_journal,
        "description": "Previous journal entries and reflection prompts.",
        "view": True,
    },
    "mood": {
        "handler": show_mood,
        "description": "Today's mood check-in and the trend chart (window_days: 7 or 30).",
        "view": True,
    },
    "breathe": {
        "handler": show_breathe,
        "description": "Breathing exercises and the current phase of a session (exercise, elapsed_seconds).",
        "view": True,
    },
    "progress": {
        "handler": show_progress,
        "description": "Current streaks, earned achievements and next goals.",
        "view": True,
    },
    "log_mood": {
        "handler": log_mood,
        "description": "Save today's mood check-in (mood, energy, anxiety, notes).",
        "view": False,
    },
    "save_journal_entry": {
        "handler": save_journal,
        "description": "Create a journal entry or update one by entry_id.",
        "view": False,
    },
    "delete_journal_entry": {
        "handler": delete_journal,
        "description": "Delete a journal entry by entry_id.",
        "view": False,
    },
}


def get_view_names() -> list[str]:
    """Names of navigable screens, in registry order."""
    return [name for name, action in ACTION_REGISTRY.items() if action["view"]]


def resolve_view(tab: str | None) -> str:
    """Map a navigation tab to a registered view, defaulting to home."""
    if tab and tab in ACTION_REGISTRY and ACTION_REGISTRY[tab]["view"]:
        return tab
    return DEFAULT_VIEW


def register_handler(action_name: str, handler: Callable[..., str]) -> None:
    """Wire a different handler into an existing registry entry."""
    if action_name not in ACTION_REGISTRY:
        msg = f"Unknown action: {action_name}"
        raise KeyError(msg)
    ACTION_REGISTRY[action_name]["handler"] = handler


def dispatch_action(
    name: str,
    params: dict[str, Any],
    store: ActivityStore,
    config: Settings | None = None,
    today: date | None = None,
) -> str:
    """Look up and execute an action against the given store.

    Args:
        name: Action name from the registry.
        params: Arguments for the handler.
        store: Store the handler reads from and writes to.
        config: Settings passed to the handler and used to resolve today;
            defaults to the module settings.
        today: Calendar day to compute for.

    Returns:
        The handler's JSON string result, or an error message.
    """
    if name not in ACTION_REGISTRY:
        logger.error("Unknown action requested: %s", name)
        return f"Error: unknown action '{name}'"

    action = ACTION_REGISTRY[name]
    cfg = config or settings
    reference_date = today or local_today(cfg)

    try:
        result = action["handler"](store=store, today=reference_date, config=cfg, **params)
    except Exception:
        logger.exception("Error executing action %s", name)
        return f"Error: action '{name}' failed"

    return result
