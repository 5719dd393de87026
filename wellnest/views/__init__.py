"""Screen handlers — each returns a JSON string for the view to render."""

from wellnest.views.breathe import show_breathe
from wellnest.views.home import show_home
from wellnest.views.journal import delete_journal, save_journal, show_journal
from wellnest.views.mood import log_mood, show_mood
from wellnest.views.progress import show_progress

__all__ = [
    "delete_journal",
    "log_mood",
    "save_journal",
    "show_breathe",
    "show_home",
    "show_journal",
    "show_mood",
    "show_progress",
]
