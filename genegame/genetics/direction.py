"""Sensor registers and the probabilistic direction selector.

Every directional opcode (Move, Eat, Attack, Reproduce) picks its target
tile by rolling a weighted die over the four sensor registers. The weight of
a direction is its register value plus one, so a zeroed register still has
a chance of being picked.

The die range is ``[0, total]`` inclusive: one more outcome than the summed
weights. The extra outcome falls through to South, which is therefore very
slightly favoured. This is observable behaviour and is kept as-is.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from genegame.config.creatures import INITIAL_SENSOR_VALUE, SENSOR_MAX, SENSOR_MIN


class Direction(Enum):
    """Cardinal directions as ``(dx, dy)`` steps (y grows southwards)."""

    EAST = (1, 0)
    WEST = (-1, 0)
    NORTH = (0, -1)
    SOUTH = (0, 1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


# Register order, also the bucket order of the selector
CARDINALS = (Direction.EAST, Direction.WEST, Direction.NORTH, Direction.SOUTH)


def saturate(value: int) -> int:
    """Clamp an unbounded non-negative amount into a sensor register."""
    return SENSOR_MAX if value >= SENSOR_MAX else max(value, SENSOR_MIN)


@dataclass
class Sensors:
    """Four unsigned byte registers, one per cardinal direction."""

    east: int = INITIAL_SENSOR_VALUE
    west: int = INITIAL_SENSOR_VALUE
    north: int = INITIAL_SENSOR_VALUE
    south: int = INITIAL_SENSOR_VALUE

    def __post_init__(self) -> None:
        for name, value in self.as_dict().items():
            if not SENSOR_MIN <= value <= SENSOR_MAX:
                raise ValueError(f"Sensor {name} out of byte range: {value}")

    def get(self, direction: Direction) -> int:
        return getattr(self, direction.name.lower())

    def set(self, direction: Direction, value: int) -> None:
        assert SENSOR_MIN <= value <= SENSOR_MAX, f"register value {value} out of range"
        setattr(self, direction.name.lower(), value)

    def invert(self) -> None:
        """Reflect every register: ``v -> |v - 255|``."""
        for direction in CARDINALS:
            self.set(direction, abs(self.get(direction) - SENSOR_MAX))

    def as_dict(self) -> dict:
        return {"east": self.east, "west": self.west, "north": self.north, "south": self.south}


def choose_direction(sensors: Sensors, rng: random.Random) -> Direction:
    """Roll a weighted direction from the sensor registers.

    Buckets, in order: East ``[0, e+1)``, West ``[e+1, e+w+2)``, North
    ``[e+w+2, e+w+n+3)``, South for everything above, including the extra
    outcome ``dice == total``.

    Args:
        sensors: Register block of the acting creature
        rng: Random source

    Returns:
        The chosen Direction.
    """
    east = sensors.east + 1
    west = sensors.west + 1
    north = sensors.north + 1
    south = sensors.south + 1

    total = east + west + north + south
    dice = rng.randint(0, total)

    if dice < east:
        return Direction.EAST
    if dice < east + west:
        return Direction.WEST
    if dice < east + west + north:
        return Direction.NORTH
    return Direction.SOUTH
