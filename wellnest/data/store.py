"""Activity store: a key -> JSON value mapping injected into every computation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from wellnest.core.config import Settings
from wellnest.core.config import settings as default_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ActivityStore(Protocol):
    """Durable key-value store of JSON-serializable values.

    No transactional guarantees: related keys are written one by one and the
    last write to a key wins.
    """

    def get(self, key: str) -> Any | None:
        """Return the decoded value for key, or None if absent or unreadable."""
        ...

    def set(self, key: str, value: Any) -> bool:
        """Persist value under key. Returns False when the write failed."""
        ...


class InMemoryStore:
    """Store holding JSON text per key, like browser local storage.

    ``quota_bytes`` caps the total encoded size; a write that would exceed it
    fails the way a full browser store does. ``raw`` seeds undecoded text.
    """

    def __init__(self, raw: dict[str, str] | None = None, quota_bytes: int | None = None) -> None:
        self._data: dict[str, str] = dict(raw or {})
        self._quota_bytes = quota_bytes

    def get(self, key: str) -> Any | None:
        text = self._data.get(key)
        if text is None:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            logger.warning("Malformed JSON under key %s", key)
            return None

    def set(self, key: str, value: Any) -> bool:
        try:
            text = json.dumps(value)
        except (TypeError, ValueError) as exc:
            logger.error("Cannot serialize value for %s: %s", key, exc)
            return False
        if self._quota_bytes is not None:
            used = sum(len(v.encode()) for k, v in self._data.items() if k != key)
            if used + len(text.encode()) > self._quota_bytes:
                logger.error("Store quota exceeded writing %s", key)
                return False
        self._data[key] = text
        return True

    def raw(self, key: str) -> str | None:
        """Return the stored JSON text for key."""
        return self._data.get(key)


class JsonFileStore:
    """Store backed by a single JSON object file on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Unreadable store file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file %s does not hold an object", self.path)
            return {}
        return data

    def get(self, key: str) -> Any | None:
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> bool:
        data = {**self._read_all(), key: value}
        try:
            text = json.dumps(data, indent=2)
        except (TypeError, ValueError) as exc:
            logger.error("Cannot serialize value for %s: %s", key, exc)
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp.write_text(text, encoding="utf-8")
            tmp.replace(self.path)
        except OSError as exc:
            logger.error("Failed to write %s to %s: %s", key, self.path, exc)
            return False
        return True


def open_store(config: Settings | None = None) -> JsonFileStore:
    """Open the file store configured by data_path."""
    cfg = config or default_settings
    return JsonFileStore(cfg.data_path)


def split_collection(store: ActivityStore, key: str, item_type: type[T]) -> tuple[list[T], list[Any]]:
    """Read a list-valued key as (valid items, raw items that failed validation).

    Writers put the invalid raw items back so a save never erases records this
    version cannot read. Absent, malformed or non-list values read as ([], []).
    """
    raw = store.get(key)
    if raw is None:
        return [], []
    if not isinstance(raw, list):
        logger.warning("Expected a list under %s, got %s", key, type(raw).__name__)
        return [], []

    adapter: TypeAdapter[T] = TypeAdapter(item_type)
    items: list[T] = []
    invalid: list[Any] = []
    for idx, item in enumerate(raw):
        try:
            items.append(adapter.validate_python(item))
        except ValidationError as exc:
            logger.warning("Skipping invalid %s item #%d: %s", key, idx, exc.errors()[:1])
            invalid.append(item)
    return items, invalid


def load_collection(store: ActivityStore, key: str, item_type: type[T]) -> list[T]:
    """Read a list-valued key, validating each item against item_type.

    Absent, malformed or non-list values read as an empty list. Items that fail
    validation are dropped; the rest are kept in store order.
    """
    return split_collection(store, key, item_type)[0]


def load_text(store: ActivityStore, key: str) -> str | None:
    """Read a string-valued key; anything else reads as None."""
    raw = store.get(key)
    return raw if isinstance(raw, str) else None
