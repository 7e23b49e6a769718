from __future__ import annotations

import base64
from typing import Callable, List

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from lights.services import reset_default_service
from lumen import LightService


class DeferredTimers:
    """Collects scheduler timers so tests decide when they fire."""

    def __init__(self) -> None:
        self.callbacks: List[Callable[[], None]] = []

    def __call__(self, delay: float, callback: Callable[[], None]):
        self.callbacks.append(callback)
        return self

    def start(self) -> None:
        pass

    def fire_all(self) -> None:
        for callback in self.callbacks:
            callback()


@pytest.fixture(autouse=True)
def clear_state():
    reset_default_service()
    cache.clear()
    yield
    reset_default_service()
    cache.clear()


@pytest.fixture
def timers() -> DeferredTimers:
    return DeferredTimers()


@pytest.fixture
def light_service(monkeypatch, timers: DeferredTimers) -> LightService:
    service = LightService(timer_factory=timers)
    monkeypatch.setattr("lights.views.get_default_service", lambda: service)
    return service


@pytest.fixture
def api_client(light_service: LightService) -> APIClient:
    return APIClient()


@pytest.fixture
def basic_auth() -> Callable[[str, str], str]:
    def build(username: str, password: str) -> str:
        token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        return f"Basic {token}"

    return build
