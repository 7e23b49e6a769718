"""Operation surface consumed by the HTTP layer."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from .controllers import GroupController, LightController
from .models import Light, LightColor, LightGroup, LightStatus
from .scheduler import ActionScheduler, ScheduledAction
from .store import EntityStore
from .utils.logger import get_logger

logger = get_logger(__name__)


class LightService:
    """Bundle one store with the controllers and scheduler that act on it.

    Each instance is fully independent, so tests can build as many as they
    like. Keyword arguments not consumed here are forwarded to
    :class:`ActionScheduler` (``clock`` and ``timer_factory``).
    """

    def __init__(self, store: Optional[EntityStore] = None, **scheduler_options) -> None:
        self.store = store if store is not None else EntityStore()
        self.lights = LightController(self.store)
        self.groups = GroupController(self.store, self.lights)
        self.scheduler = ActionScheduler(self.store, self.lights, **scheduler_options)

    # Lights
    def list_lights(self) -> Dict[int, Light]:
        return self.store.get_all_lights()

    def get_light(self, light_id: int) -> Light:
        return self.store.get_light(light_id)

    def turn_on(self, light_id: int) -> Light:
        return self.lights.turn_on(light_id)

    def turn_off(self, light_id: int) -> Light:
        return self.lights.turn_off(light_id)

    def set_brightness(self, light_id: int, brightness: int) -> Light:
        return self.lights.set_brightness(light_id, brightness)

    def set_color(self, light_id: int, color: LightColor | str) -> Light:
        return self.lights.set_color(light_id, color)

    def add_light(self) -> int:
        return self.lights.add_light()

    def delete_light(self, light_id: int) -> None:
        self.lights.delete_light(light_id)

    # Groups
    def create_group(self, name: str, light_ids: Iterable[int]) -> int:
        return self.groups.create_group(name, light_ids)

    def get_group(self, group_id: int) -> LightGroup:
        return self.groups.get_group(group_id)

    def control_group(self, group_id: int, action: LightStatus | str) -> None:
        self.groups.control_group(group_id, action)

    def add_light_to_group(self, group_id: int, light_id: int) -> None:
        self.groups.add_light_to_group(group_id, light_id)

    def remove_light_from_group(self, group_id: int, light_id: int) -> None:
        self.groups.remove_light_from_group(group_id, light_id)

    def delete_light_from_system(self, light_id: int) -> None:
        self.groups.delete_light_from_system(light_id)

    def delete_group(self, group_id: int) -> None:
        self.groups.delete_group(group_id)

    # Scheduling
    def schedule_action(
        self, light_id: int, fire_time: str, action: LightStatus | str
    ) -> ScheduledAction:
        return self.scheduler.schedule_action(light_id, fire_time, action)

    # Persistence placeholders
    def save_state(self) -> None:
        logger.info("Saving current state of lights and groups...")

    def load_state(self) -> None:
        logger.info("Loading state of lights and groups...")


__all__ = ["LightService"]
