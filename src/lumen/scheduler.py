"""Deferred on/off actions for lights.

Each scheduled action owns a one-shot :class:`threading.Timer`. When the timer
elapses the scheduler sends a :class:`~lumen.models.LightCommand` to the
light controller, so the store sees the fire exactly like an ordinary request.
Pending actions live only in memory and are lost when the process stops.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Protocol

from .controllers import LightController
from .errors import InvalidArgumentError, NotFoundError
from .models import LightCommand, LightStatus
from .store import EntityStore
from .utils.logger import get_logger

logger = get_logger(__name__)


class Timer(Protocol):
    def start(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], Timer]
Clock = Callable[[], datetime]


class ActionState(str, Enum):
    PENDING = "pending"
    FIRED = "fired"
    ABANDONED = "abandoned"


@dataclass
class ScheduledAction:
    """A one-shot action waiting for its fire time."""

    light_id: int
    fire_at: datetime
    action: LightStatus
    state: ActionState = field(default=ActionState.PENDING)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _daemon_timer(delay: float, callback: Callable[[], None]) -> Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    return timer


def parse_fire_time(value: str) -> datetime:
    """Parse an ISO 8601 timestamp into an aware :class:`datetime`.

    A trailing ``Z`` means UTC. Timestamps without an offset are taken to be
    in the server's local time zone.
    """

    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError("Scheduled time must be a non-empty string")
    normalised = value.strip()
    if normalised.endswith(("Z", "z")):
        normalised = normalised[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(normalised)
    except ValueError:
        raise InvalidArgumentError(f"Invalid scheduled time: {value!r}") from None
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


class ActionScheduler:
    """Arrange for a light to be switched on or off at a later time.

    There is no cancellation: once scheduled an action either fires or, when
    its light has been deleted in the meantime, is silently abandoned.
    """

    def __init__(
        self,
        store: EntityStore,
        lights: LightController,
        *,
        clock: Clock = _utc_now,
        timer_factory: TimerFactory = _daemon_timer,
    ) -> None:
        self._store = store
        self._lights = lights
        self._clock = clock
        self._timer_factory = timer_factory

    def schedule_action(
        self, light_id: int, fire_time: str, action: LightStatus | str
    ) -> ScheduledAction:
        """Schedule ``action`` for ``light_id`` at ``fire_time``.

        Raises :class:`NotFoundError` when the light does not exist and
        :class:`InvalidArgumentError` when the time cannot be parsed or lies
        in the past or beyond the longest wait a timer supports.
        """

        self._store.get_light(light_id)
        try:
            status = LightStatus(action)
        except ValueError:
            raise InvalidArgumentError('Action must be "on" or "off"') from None
        fire_at = parse_fire_time(fire_time)
        delay = (fire_at - self._clock()).total_seconds()
        if delay < 0:
            raise InvalidArgumentError("Scheduled time must be in the future")
        if delay > threading.TIMEOUT_MAX:
            raise InvalidArgumentError("Scheduled time is too far in the future")

        scheduled = ScheduledAction(light_id=light_id, fire_at=fire_at, action=status)
        self._timer_factory(delay, lambda: self._fire(scheduled)).start()
        logger.info(
            "Light %s scheduled to turn %s at %s", light_id, status.value, fire_time
        )
        return scheduled

    def _fire(self, scheduled: ScheduledAction) -> None:
        if scheduled.state is not ActionState.PENDING:
            return
        command = LightCommand(
            light_id=scheduled.light_id, action=scheduled.action, source="schedule"
        )
        try:
            self._lights.apply(command)
        except NotFoundError:
            scheduled.state = ActionState.ABANDONED
            logger.info(
                "Scheduled %s for light %s dropped: light no longer exists",
                scheduled.action.value,
                scheduled.light_id,
            )
            return
        scheduled.state = ActionState.FIRED
        logger.info(
            "Scheduled action fired: light %s turned %s",
            scheduled.light_id,
            scheduled.action.value,
        )


__all__ = [
    "ActionScheduler",
    "ActionState",
    "ScheduledAction",
    "parse_fire_time",
]
