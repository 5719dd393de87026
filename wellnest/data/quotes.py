"""Daily inspiration: one deterministic message per calendar day."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from wellnest.data.dates import day_of_year
from wellnest.data.schemas import QuoteCache, StoreKey
from wellnest.data.store import ActivityStore, load_text

logger = logging.getLogger(__name__)

DAILY_QUOTES: tuple[str, ...] = (
    "The present moment is the only time over which we have dominion. - Thich Nhat Hanh",
    "You are not your illness. You have an individual story to tell. - Julian Seifter",
    "Your current situation is not your final destination. The best is yet to come.",
    "Mental health is not a destination, but a process. It's about how you drive, not where you're going.",
    (
        "You don't have to be positive all the time. It's perfectly okay to feel sad, angry, "
        "annoyed, frustrated, scared and anxious."
    ),
    "Healing isn't about changing who you are; it's about changing your relationship with who you are.",
    "You are stronger than you think and more resilient than you realize.",
    "Progress, not perfection. Every small step counts.",
    "Be patient with yourself. Self-growth is tender; it's holy ground. There's no greater investment.",
    "You are worthy of the love you give to others.",
)


@dataclass(frozen=True)
class DailyMessage:
    """Selected message plus the cache state to persist."""

    message: str
    cache: QuoteCache
    from_cache: bool


def message_of_day(catalog: Sequence[str], today: date, cache: QuoteCache | None = None) -> DailyMessage:
    """Pick today's message, reusing the cached one when it is for today.

    A stale or empty cache selects catalog[day_of_year(today) % len(catalog)].

    Raises ValueError for an empty catalog.
    """
    today_str = today.isoformat()
    if cache and cache["last_date"] == today_str and cache["last_message"]:
        return DailyMessage(message=cache["last_message"], cache=cache, from_cache=True)

    if not catalog:
        msg = "Message catalog is empty"
        raise ValueError(msg)

    selected = catalog[day_of_year(today) % len(catalog)]
    return DailyMessage(
        message=selected,
        cache=QuoteCache(last_date=today_str, last_message=selected),
        from_cache=False,
    )


def get_daily_quote(
    store: ActivityStore,
    today: date,
    catalog: Sequence[str] = DAILY_QUOTES,
) -> tuple[str, bool]:
    """Return (today's quote, persisted) using the store-backed cache.

    The cache keys are rewritten only when the cached day is stale; they are
    written one after the other, not atomically.
    """
    cache = QuoteCache(
        last_date=load_text(store, StoreKey.QUOTE_DATE),
        last_message=load_text(store, StoreKey.DAILY_QUOTE),
    )
    selected = message_of_day(catalog, today, cache)
    if selected.from_cache:
        return selected.message, True

    date_ok = store.set(StoreKey.QUOTE_DATE, selected.cache["last_date"])
    quote_ok = store.set(StoreKey.DAILY_QUOTE, selected.cache["last_message"])
    if not (date_ok and quote_ok):
        logger.warning("Daily quote cache not persisted for %s", today)
    return selected.message, date_ok and quote_ok
