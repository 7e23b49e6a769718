"""Exceptions raised by the light service core."""

from __future__ import annotations


class LightServiceError(Exception):
    """Base class for failures reported by the core."""


class NotFoundError(LightServiceError, LookupError):
    """A referenced light or group id does not exist."""


class InvalidArgumentError(LightServiceError, ValueError):
    """A value is outside its allowed range or the schedule time has passed."""


__all__ = ["InvalidArgumentError", "LightServiceError", "NotFoundError"]
