"""Creatures and their per-round lifecycle."""

import logging
import random
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

from genegame.config.creatures import (
    CARNIVORE_METABOLISM,
    HERBIVORE_METABOLISM,
    INITIAL_ENERGY,
    OMNIVORE_METABOLISM,
)
from genegame.config.genes import MAX_GENES
from genegame.entity_ids import EntityHandle
from genegame.exceptions import GeneticsError
from genegame.genetics.direction import Sensors
from genegame.genetics.interpreter import TurnContext, run_program
from genegame.genetics.opcodes import Opcode

if TYPE_CHECKING:
    from genegame.entity_store import EntityStore
    from genegame.world import World


logger = logging.getLogger(__name__)


class DietaryClass(Enum):
    """What a creature's genes say it eats. Drives metabolic cost."""

    HERBIVORE = "Herbivore"
    CARNIVORE = "Carnivore"
    OMNIVORE = "Omnivore"

    @property
    def metabolism(self) -> int:
        """Energy burnt per round."""
        return _METABOLISM[self]

    def __str__(self) -> str:
        return self.value


_METABOLISM = {
    DietaryClass.HERBIVORE: HERBIVORE_METABOLISM,
    DietaryClass.CARNIVORE: CARNIVORE_METABOLISM,
    DietaryClass.OMNIVORE: OMNIVORE_METABOLISM,
}


class LifeState(Enum):
    """Outcome of a creature's turn. DEAD is terminal."""

    ALIVE = "alive"
    DEAD = "dead"


def classify_diet(genes: Iterable[Opcode]) -> DietaryClass:
    """Omnivore with Eat and Attack, Carnivore with Attack only, else Herbivore."""
    genes = set(genes)
    eats = Opcode.EAT in genes
    attacks = Opcode.ATTACK in genes
    if eats and attacks:
        return DietaryClass.OMNIVORE
    if attacks:
        return DietaryClass.CARNIVORE
    return DietaryClass.HERBIVORE


class Creature:
    """A single individual on the grid.

    The dietary class is fixed at birth from the genes the creature was
    created with. It is never refreshed, so it stays a snapshot-at-birth
    even if the gene list is later edited in place.

    Attributes:
        handle: Generational handle of the slot that owns this creature
        x, y: Position on the grid
        energy: Unsigned energy budget
        sensors: East/West/North/South byte registers
        genes: Gene program, 1..MAX_GENES opcodes
        dietary_class: Derived from ``genes`` at construction
    """

    def __init__(
        self,
        handle: EntityHandle,
        x: int,
        y: int,
        genes: Sequence[Opcode],
        energy: int = INITIAL_ENERGY,
        sensors: Optional[Sensors] = None,
    ) -> None:
        """Create a creature.

        Args:
            handle: Handle returned by ``EntityStore.allocate()``
            x: Grid column
            y: Grid row
            genes: Gene program (copied)
            energy: Starting energy
            sensors: Starting registers (all midpoint by default)

        Raises:
            GeneticsError: If the gene program is empty, too long, or holds
                something other than Opcode values.
        """
        genes = list(genes)
        if not 1 <= len(genes) <= MAX_GENES:
            raise GeneticsError(f"Gene program must hold 1..{MAX_GENES} opcodes, got {len(genes)}")
        for gene in genes:
            if not isinstance(gene, Opcode):
                raise GeneticsError(f"Invalid gene {gene!r}; expected an Opcode")
        if energy < 0:
            raise ValueError(f"energy must be non-negative, got {energy}")

        self.handle = handle
        self.x = x
        self.y = y
        self.energy = energy
        self.sensors = sensors if sensors is not None else Sensors()
        self.genes: List[Opcode] = genes
        self.dietary_class = classify_diet(genes)

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def metabolism(self) -> int:
        return self.dietary_class.metabolism

    def simulate_one_tick(
        self,
        world: "World",
        store: "EntityStore",
        ctx: Optional[TurnContext] = None,
    ) -> LifeState:
        """Run the gene program, then pay metabolism.

        Metabolism moves energy onto the creature's current tile as food.
        If the creature cannot afford it (energy at or below the cost), its
        whole remaining energy becomes food, the tile is vacated and the
        creature's slot is released.

        Args:
            world: The tile grid
            store: The entity store (without this creature in it)
            ctx: Turn context carrying the RNG and event tally

        Returns:
            LifeState.ALIVE or LifeState.DEAD.
        """
        if ctx is None:
            ctx = TurnContext(world=world, store=store, rng=random.Random())

        if self.energy == 0:
            return LifeState.DEAD

        run_program(self, ctx)
        return self._apply_metabolism(world, store, ctx)

    def _apply_metabolism(self, world: "World", store: "EntityStore", ctx: TurnContext) -> LifeState:
        tile = world.tile_at_mut(self.x, self.y)
        cost = self.metabolism

        if self.energy <= cost:
            tile.food += self.energy
            self.energy = 0
            tile.occupant = None
            store.deallocate(self.handle)
            ctx.events.starvations += 1
            logger.debug(f"{self.handle} starved at ({self.x}, {self.y})")
            return LifeState.DEAD

        tile.food += cost
        self.energy -= cost
        return LifeState.ALIVE

    def stats_line(self) -> str:
        s = self.sensors
        return f"Energy: {self.energy} E: {s.east} W: {s.west} N: {s.north} S: {s.south}"

    def __str__(self) -> str:
        lines = [
            "==Creature==",
            f"Type: {self.dietary_class}",
            f"Stats: {self.stats_line()}",
            f"Genes({len(self.genes)}):",
        ]
        lines.extend(str(gene) for gene in self.genes)
        lines.append("============")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Creature({self.handle}, pos=({self.x}, {self.y}), energy={self.energy}, "
            f"{self.dietary_class.value}, genes={len(self.genes)})"
        )
