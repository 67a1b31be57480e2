"""Lightweight simulation configuration helpers."""

from dataclasses import dataclass, replace
from typing import Any, Optional

from genegame.config.world import (
    INITIAL_POPULATION,
    STARTING_TILE_FOOD,
    WORLD_HEIGHT,
    WORLD_WIDTH,
)
from genegame.exceptions import ConfigurationError


@dataclass
class SimulationConfig:
    """Host-supplied parameters for a simulation run.

    Attributes:
        width: Grid width in tiles.
        height: Grid height in tiles.
        initial_population: Creatures scattered on the grid by ``setup()``.
        starting_food: Food placed on every tile at world creation.
        seed: Optional RNG seed. ``None`` leaves the run unseeded.
        max_rounds: Optional bound used by ``SimulationEngine.run``.
        stats_interval: Log population stats every N rounds (0 = never).
    """

    width: int = WORLD_WIDTH
    height: int = WORLD_HEIGHT
    initial_population: int = INITIAL_POPULATION
    starting_food: int = STARTING_TILE_FOOD
    seed: Optional[int] = None
    max_rounds: Optional[int] = None
    stats_interval: int = 0

    def validate(self) -> None:
        """Raise ConfigurationError if any field is out of range."""
        if self.width < 1 or self.height < 1:
            raise ConfigurationError(
                f"World must be at least 1x1, got {self.width}x{self.height}"
            )
        if self.initial_population < 0:
            raise ConfigurationError(
                f"initial_population must be non-negative, got {self.initial_population}"
            )
        if self.initial_population > self.width * self.height:
            raise ConfigurationError(
                f"initial_population {self.initial_population} exceeds the "
                f"{self.width * self.height} tiles available"
            )
        if self.starting_food < 0:
            raise ConfigurationError(
                f"starting_food must be non-negative, got {self.starting_food}"
            )
        if self.max_rounds is not None and self.max_rounds < 0:
            raise ConfigurationError(f"max_rounds must be non-negative, got {self.max_rounds}")
        if self.stats_interval < 0:
            raise ConfigurationError(
                f"stats_interval must be non-negative, got {self.stats_interval}"
            )

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a validated copy with the given fields replaced."""
        updated = replace(self, **overrides)
        updated.validate()
        return updated
