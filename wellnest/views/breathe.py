"""Breathe screen: exercise catalog and the current phase of a session."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import Any

from wellnest.data.breathing import BREATHING_EXERCISES, get_exercise, phase_at

logger = logging.getLogger(__name__)


def show_breathe(**kwargs: Any) -> str:
    """List the exercises; with elapsed_seconds, also report the session phase.

    Accepts: exercise (name, defaults to the first), elapsed_seconds.
    Sessions are not recorded in the store.
    """
    kwargs.pop("store", None)
    kwargs.pop("today", None)
    kwargs.pop("config", None)

    try:
        exercise = get_exercise(kwargs.get("exercise"))
    except KeyError:
        return json.dumps({"error": f"unknown exercise: {kwargs.get('exercise')}"})

    result: dict[str, Any] = {
        "exercises": [asdict(e) for e in BREATHING_EXERCISES],
        "selected": exercise.name,
    }

    elapsed = kwargs.get("elapsed_seconds")
    if elapsed is not None:
        try:
            state = phase_at(exercise, int(elapsed))
        except (TypeError, ValueError):
            return json.dumps({"error": "elapsed_seconds must be a non-negative integer"})
        result["session"] = state._asdict()

    return json.dumps(result)
