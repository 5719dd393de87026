"""Tests for wellnest/core/config.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wellnest.core.config import Settings
from wellnest.data.schemas import TrendWindow


def test_defaults() -> None:
    cfg = Settings(_env_file=None)
    assert cfg.timezone == "UTC"
    assert cfg.trend_window is TrendWindow.WEEK


def test_trend_window_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TREND_WINDOW", "30")
    assert Settings(_env_file=None).trend_window is TrendWindow.MONTH


@pytest.mark.parametrize("window", [0, 14, 31])
def test_unsupported_trend_window_rejected(window: int) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, trend_window=window)
