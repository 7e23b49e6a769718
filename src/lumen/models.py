"""Records held by the light store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Tuple


class LightStatus(str, Enum):
    """Power state of a light, also used as the on/off action type."""

    ON = "on"
    OFF = "off"


class LightColor(str, Enum):
    """Fixed palette a simulated light can display."""

    WHITE = "white"
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100


@dataclass(frozen=True)
class Light:
    """Current state of a simulated light.

    Attributes:
        id: Identifier allocated by the store, never reused.
        status: Whether the light is on or off.
        brightness: Brightness level between 0 and 100 inclusive.
        color: Colour drawn from :class:`LightColor`.
    """

    id: int
    status: LightStatus = LightStatus.OFF
    brightness: int = MIN_BRIGHTNESS
    color: LightColor = LightColor.WHITE

    def as_dict(self) -> Dict[str, Any]:
        """Return the JSON friendly representation of the light."""

        return {
            "id": self.id,
            "status": self.status.value,
            "brightness": self.brightness,
            "color": self.color.value,
        }


@dataclass(frozen=True)
class LightGroup:
    """Named, ordered set of light ids controlled as a unit.

    Attributes:
        id: Identifier allocated by the store, never reused.
        name: Display name, not required to be unique.
        light_ids: Member light ids in insertion order without duplicates.
    """

    id: int
    name: str
    light_ids: Tuple[int, ...] = ()

    def as_dict(self) -> Dict[str, Any]:
        """Return the JSON friendly representation of the group."""

        return {"id": self.id, "name": self.name, "lightIds": list(self.light_ids)}


@dataclass(frozen=True)
class LightCommand:
    """Request to switch a light, routed through :meth:`LightController.apply`."""

    light_id: int
    action: LightStatus
    source: str = "api"
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


__all__ = [
    "Light",
    "LightColor",
    "LightCommand",
    "LightGroup",
    "LightStatus",
    "MAX_BRIGHTNESS",
    "MIN_BRIGHTNESS",
]
