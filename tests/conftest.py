from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List

import pytest

# Ensure the package under src/ is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from lumen import EntityStore, LightService  # noqa: E402

NOW = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


class ManualTimer:
    """Timer stand-in that only runs its callback when told to."""

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.started = False

    def start(self) -> None:
        self.started = True


class ManualTimers:
    """Timer factory that records every timer it creates."""

    def __init__(self) -> None:
        self.created: List[ManualTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(delay, callback)
        self.created.append(timer)
        return timer

    def fire_all(self) -> None:
        for timer in sorted(self.created, key=lambda item: item.delay):
            timer.callback()


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def timers() -> ManualTimers:
    return ManualTimers()


@pytest.fixture
def service(store: EntityStore, timers: ManualTimers) -> LightService:
    return LightService(store, clock=lambda: NOW, timer_factory=timers)


@pytest.fixture
def now() -> datetime:
    return NOW
