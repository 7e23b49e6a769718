"""Process-wide access to the light service."""

from __future__ import annotations

from functools import lru_cache

from lumen import LightService


@lru_cache(maxsize=1)
def get_default_service() -> LightService:
    """Return the shared :class:`LightService` instance for the process."""

    return LightService()


def reset_default_service() -> None:
    """Discard the cached service so the next call builds a fresh store (useful for tests)."""

    get_default_service.cache_clear()
