"""Configuration package for the gene game.

Constants are grouped by concern (world, creatures, genes); the
``SimulationConfig`` dataclass collects the host-tunable parameters.
"""

from genegame.config.simulation_config import SimulationConfig

__all__ = ["SimulationConfig"]
