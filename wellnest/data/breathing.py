"""Guided breathing exercises and their phase timing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class BreathingExercise:
    """A repeating breathing pattern: one duration (seconds) per phase."""

    name: str
    description: str
    pattern: tuple[int, ...]
    phases: tuple[str, ...]

    @property
    def cycle_seconds(self) -> int:
        return sum(self.pattern)


class BreathingPhase(NamedTuple):
    """Where a session stands after some elapsed time."""

    phase: str
    phase_index: int
    seconds_left: int
    cycles: int  # completed full cycles


BREATHING_EXERCISES: tuple[BreathingExercise, ...] = (
    BreathingExercise(
        name="4-7-8 Breathing",
        description="Inhale for 4, hold for 7, exhale for 8",
        pattern=(4, 7, 8),
        phases=("Inhale", "Hold", "Exhale"),
    ),
    BreathingExercise(
        name="Box Breathing",
        description="Inhale 4, hold 4, exhale 4, hold 4",
        pattern=(4, 4, 4, 4),
        phases=("Inhale", "Hold", "Exhale", "Hold"),
    ),
    BreathingExercise(
        name="Simple Breathing",
        description="Inhale for 4, exhale for 6",
        pattern=(4, 6),
        phases=("Inhale", "Exhale"),
    ),
)


def get_exercise(name: str | None = None) -> BreathingExercise:
    """Look up an exercise by name; the first one when name is empty.

    Raises KeyError for an unknown name.
    """
    if not name:
        return BREATHING_EXERCISES[0]
    for exercise in BREATHING_EXERCISES:
        if exercise.name == name:
            return exercise
    msg = f"Unknown breathing exercise: {name}"
    raise KeyError(msg)


def phase_at(exercise: BreathingExercise, elapsed_seconds: int) -> BreathingPhase:
    """Phase, seconds remaining in it, and completed cycles after elapsed_seconds.

    A phase of n seconds counts down n..1; at the boundary the next phase
    starts with its full duration, and wrapping to the first phase completes
    a cycle.

    Raises ValueError for negative elapsed time.
    """
    if elapsed_seconds < 0:
        msg = f"elapsed_seconds must not be negative, got {elapsed_seconds}"
        raise ValueError(msg)

    cycles, offset = divmod(elapsed_seconds, exercise.cycle_seconds)
    index = 0
    while offset >= exercise.pattern[index]:
        offset -= exercise.pattern[index]
        index += 1
    return BreathingPhase(
        phase=exercise.phases[index],
        phase_index=index,
        seconds_left=exercise.pattern[index] - offset,
        cycles=cycles,
    )
