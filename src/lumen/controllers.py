"""Mutation operations on single lights and on light groups."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List

from .errors import InvalidArgumentError, NotFoundError
from .models import (
    MAX_BRIGHTNESS,
    MIN_BRIGHTNESS,
    Light,
    LightColor,
    LightCommand,
    LightGroup,
    LightStatus,
)
from .store import EntityStore
from .utils.logger import get_logger

logger = get_logger(__name__)


def _coerce_status(action: LightStatus | str) -> LightStatus:
    try:
        return LightStatus(action)
    except ValueError:
        raise InvalidArgumentError('Action must be "on" or "off"') from None


class LightController:
    """Validated mutations of individual lights."""

    def __init__(self, store: EntityStore) -> None:
        self._store = store

    def turn_on(self, light_id: int) -> Light:
        return self._set_status(light_id, LightStatus.ON)

    def turn_off(self, light_id: int) -> Light:
        return self._set_status(light_id, LightStatus.OFF)

    def apply(self, command: LightCommand) -> Light:
        """Apply a :class:`LightCommand` to the light it targets.

        Scheduled actions reach the store through this method so they take
        the same path, and the same lock, as a direct request.
        """

        status = _coerce_status(command.action)
        logger.debug(
            "Applying %s to light %s from %s (issued %s)",
            status.value,
            command.light_id,
            command.source,
            command.timestamp.isoformat(),
        )
        return self._set_status(command.light_id, status)

    def set_brightness(self, light_id: int, brightness: int) -> Light:
        with self._store.lock:
            light = self._store.get_light(light_id)
            if isinstance(brightness, bool) or not isinstance(brightness, int):
                raise InvalidArgumentError("Brightness must be an integer")
            if not MIN_BRIGHTNESS <= brightness <= MAX_BRIGHTNESS:
                raise InvalidArgumentError(
                    f"Brightness should be between {MIN_BRIGHTNESS} and {MAX_BRIGHTNESS}"
                )
            light = replace(light, brightness=brightness)
            self._store.put_light(light)
        logger.info("Light %s brightness set to %s", light_id, brightness)
        return light

    def set_color(self, light_id: int, color: LightColor | str) -> Light:
        with self._store.lock:
            light = self._store.get_light(light_id)
            try:
                color = LightColor(color)
            except ValueError:
                allowed = ", ".join(member.value for member in LightColor)
                raise InvalidArgumentError(f"Color must be one of: {allowed}") from None
            light = replace(light, color=color)
            self._store.put_light(light)
        logger.info("Light %s color set to %s", light_id, color.value)
        return light

    def add_light(self) -> int:
        """Insert a light in its default state and return its new id."""

        with self._store.lock:
            light_id = self._store.allocate_light_id()
            self._store.put_light(Light(id=light_id))
        logger.info("New light added with ID %s", light_id)
        return light_id

    def delete_light(self, light_id: int) -> None:
        self._store.delete_light(light_id)
        logger.info("Light %s deleted", light_id)

    def _set_status(self, light_id: int, status: LightStatus) -> Light:
        with self._store.lock:
            light = replace(self._store.get_light(light_id), status=status)
            self._store.put_light(light)
        logger.info("Light %s turned %s", light_id, status.value)
        return light


class GroupController:
    """Group lifecycle and bulk control built on :class:`LightController`."""

    def __init__(self, store: EntityStore, lights: LightController) -> None:
        self._store = store
        self._lights = lights

    def create_group(self, name: str, light_ids: Iterable[int]) -> int:
        """Create a group and return its id.

        Every member must already exist. Nothing is written, and no group id
        is consumed, when any member is unknown.
        """

        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("Group name must be a non-empty string")
        members: List[int] = []
        for light_id in light_ids:
            if light_id not in members:
                members.append(light_id)
        with self._store.lock:
            missing = self._store.missing_lights(members)
            if missing:
                raise InvalidArgumentError(
                    "Unknown light ID(s): " + ", ".join(str(light_id) for light_id in missing)
                )
            group_id = self._store.allocate_group_id()
            self._store.put_group(LightGroup(id=group_id, name=name, light_ids=tuple(members)))
        logger.info('Group "%s" created with ID %s', name, group_id)
        return group_id

    def get_group(self, group_id: int) -> LightGroup:
        return self._store.get_group(group_id)

    def control_group(self, group_id: int, action: LightStatus | str) -> None:
        """Switch every member light on or off in membership order.

        The first member that no longer exists aborts the loop with
        :class:`NotFoundError`; members already switched keep their new state.
        """

        status = _coerce_status(action)
        with self._store.lock:
            group = self._store.get_group(group_id)
            for light_id in group.light_ids:
                self._lights.apply(LightCommand(light_id, status, source=f"group:{group_id}"))
        logger.info("Group %s lights turned %s", group_id, status.value)

    def add_light_to_group(self, group_id: int, light_id: int) -> None:
        with self._store.lock:
            group = self._store.get_group(group_id)
            self._store.get_light(light_id)
            if light_id in group.light_ids:
                logger.info("Light %s is already in group %s", light_id, group_id)
                return
            self._store.put_group(replace(group, light_ids=group.light_ids + (light_id,)))
        logger.info("Light %s added to group %s", light_id, group_id)

    def remove_light_from_group(self, group_id: int, light_id: int) -> None:
        with self._store.lock:
            group = self._store.get_group(group_id)
            if light_id in group.light_ids:
                self._store.put_group(
                    replace(
                        group,
                        light_ids=tuple(member for member in group.light_ids if member != light_id),
                    )
                )
        logger.info("Light %s removed from group %s", light_id, group_id)

    def delete_light_from_system(self, light_id: int) -> None:
        """Delete the light and purge ``light_id`` from every group."""

        self._store.delete_light(light_id)
        logger.info(
            "Light %s deleted from the system and removed from all groups.", light_id
        )

    def delete_group(self, group_id: int) -> None:
        self._store.delete_group(group_id)
        logger.info("Group %s deleted", group_id)


__all__ = ["GroupController", "LightController"]
