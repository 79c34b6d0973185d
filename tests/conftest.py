"""Global pytest configuration and cross-cutting fixtures."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"

if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from oratime.settings import get_settings  # noqa: E402


@pytest.fixture
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the caller's ORATIME_* environment and the settings cache."""

    for key in ("ORATIME_LOG_LEVEL", "ORATIME_LOG_FORMAT", "ORATIME_ON_ERROR", "ORATIME_LITERAL_COLUMN"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def env_vars(monkeypatch: pytest.MonkeyPatch) -> Callable[[dict[str, str]], None]:
    """Temporarily set environment variables for the duration of a test."""

    def _apply(values: dict[str, str]) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key, value)

    return _apply
