"""Read-only data models handed to hosts (renderers, CLIs, inspectors).

These are detached copies: holding one never keeps a creature alive and
mutating one never touches the simulation.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel


class HandleData(BaseModel):
    """A creature handle in plain form."""

    slot_index: int
    generation: int


class CreatureSnapshot(BaseModel):
    """A creature's display attributes."""

    handle: HandleData
    x: int
    y: int
    energy: int
    dietary_class: str  # 'Herbivore', 'Carnivore', 'Omnivore'
    sensors: Dict[str, int]
    genes: List[str]

    @property
    def gene_count(self) -> int:
        return len(self.genes)


class TileSnapshot(BaseModel):
    """One tile and, if occupied, the creature standing on it."""

    x: int
    y: int
    food: int
    occupant: Optional[CreatureSnapshot] = None


class StatsSnapshot(BaseModel):
    """Population statistics after a round."""

    round: int
    population: int
    herbivores: int = 0
    carnivores: int = 0
    omnivores: int = 0
    total_food: int = 0
    average_energy: float = 0.0
    average_gene_count: float = 0.0
    total_births: int = 0
    deaths_by_starvation: int = 0
    deaths_by_attack: int = 0
    extinct: bool = False
