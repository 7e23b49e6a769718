"""In-memory control of simulated lights and light groups."""

from .errors import InvalidArgumentError, LightServiceError, NotFoundError
from .models import Light, LightColor, LightCommand, LightGroup, LightStatus
from .scheduler import ActionScheduler, ActionState, ScheduledAction
from .service import LightService
from .store import EntityStore

__all__ = [
    "ActionScheduler",
    "ActionState",
    "EntityStore",
    "InvalidArgumentError",
    "Light",
    "LightColor",
    "LightCommand",
    "LightGroup",
    "LightService",
    "LightServiceError",
    "LightStatus",
    "NotFoundError",
    "ScheduledAction",
]
