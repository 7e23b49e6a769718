"""In-memory entity store for lights and light groups."""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, Iterable

from .errors import NotFoundError
from .models import Light, LightGroup

# Lights created when a store starts up.
DEFAULT_LIGHT_COUNT = 2


class EntityStore:
    """Sole owner of light and group records and their id counters.

    Records are immutable dataclasses: readers receive values that can never
    change underneath them and writers replace whole records with
    :meth:`put_light` / :meth:`put_group`. Every public method holds
    :attr:`lock`; callers that need several steps to be atomic (check then
    insert) hold it around the whole sequence. The lock is re-entrant so
    they can keep calling store methods while holding it.
    """

    def __init__(self, seed_lights: int = DEFAULT_LIGHT_COUNT) -> None:
        self.lock = threading.RLock()
        self._lights: Dict[int, Light] = {}
        self._groups: Dict[int, LightGroup] = {}
        for light_id in range(1, seed_lights + 1):
            self._lights[light_id] = Light(id=light_id)
        self._next_light_id = seed_lights + 1
        self._next_group_id = 1

    # Identifier allocation -------------------------------------------------
    def allocate_light_id(self) -> int:
        with self.lock:
            light_id = self._next_light_id
            self._next_light_id += 1
            return light_id

    def allocate_group_id(self) -> int:
        with self.lock:
            group_id = self._next_group_id
            self._next_group_id += 1
            return group_id

    # Lights ----------------------------------------------------------------
    def get_light(self, light_id: int) -> Light:
        """Return the light stored under ``light_id``.

        Raises :class:`NotFoundError` when no such light exists.
        """

        with self.lock:
            try:
                return self._lights[light_id]
            except KeyError:
                raise NotFoundError(f"Light with ID {light_id} not found") from None

    def has_light(self, light_id: int) -> bool:
        with self.lock:
            return light_id in self._lights

    def get_all_lights(self) -> Dict[int, Light]:
        """Return a snapshot of every light keyed by id."""

        with self.lock:
            return dict(self._lights)

    def put_light(self, light: Light) -> None:
        with self.lock:
            self._lights[light.id] = light

    def delete_light(self, light_id: int) -> None:
        """Remove a light and scrub its id from every group's members."""

        with self.lock:
            if light_id not in self._lights:
                raise NotFoundError(f"Light with ID {light_id} not found")
            self.purge_light_from_groups(light_id)
            del self._lights[light_id]

    def purge_light_from_groups(self, light_id: int) -> None:
        with self.lock:
            for group_id, group in self._groups.items():
                if light_id in group.light_ids:
                    self._groups[group_id] = replace(
                        group,
                        light_ids=tuple(
                            member for member in group.light_ids if member != light_id
                        ),
                    )

    # Groups ----------------------------------------------------------------
    def get_group(self, group_id: int) -> LightGroup:
        with self.lock:
            try:
                return self._groups[group_id]
            except KeyError:
                raise NotFoundError(f"Group with ID {group_id} not found") from None

    def get_all_groups(self) -> Dict[int, LightGroup]:
        with self.lock:
            return dict(self._groups)

    def put_group(self, group: LightGroup) -> None:
        with self.lock:
            self._groups[group.id] = group

    def delete_group(self, group_id: int) -> None:
        with self.lock:
            if group_id not in self._groups:
                raise NotFoundError(f"Group with ID {group_id} not found")
            del self._groups[group_id]

    def missing_lights(self, light_ids: Iterable[int]) -> list[int]:
        """Return the ids from ``light_ids`` that are not in the store."""

        with self.lock:
            return [light_id for light_id in light_ids if light_id not in self._lights]


__all__ = ["DEFAULT_LIGHT_COUNT", "EntityStore"]
