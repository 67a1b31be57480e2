"""Gene program interpreter.

Each opcode is a small function that reads and writes the acting creature,
the World and the EntityStore. Opcodes run in gene order, once per creature
per round, and each one fully applies its effect before the next starts.
There is no rollback.

Blocked actions are silent no-ops: moving, eating or reproducing onto an
occupied tile, attacking an empty tile, or reproducing below the energy
threshold simply does nothing and the program carries on.

The acting creature is NOT in the store while its program runs (the round
driver has taken it out), so nothing here can reach it through a handle
lookup. Every other creature is reached only through the store.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Tuple

from genegame.config.creatures import (
    ATTACK_DAMAGE,
    EAT_QUOTA,
    REPRODUCE_COST,
    REPRODUCE_THRESHOLD,
    SENSOR_MAX,
    SENSOR_MIN,
)
from genegame.config.genes import MAX_GENES
from genegame.events import TickEvents
from genegame.genetics.direction import CARDINALS, choose_direction, saturate
from genegame.genetics.mutation import mutate_genes
from genegame.genetics.opcodes import Opcode

if TYPE_CHECKING:
    from genegame.entities.creature import Creature
    from genegame.entity_store import EntityStore
    from genegame.world import World


logger = logging.getLogger(__name__)


@dataclass
class TurnContext:
    """Shared state a creature's program runs against.

    Attributes:
        world: The tile grid
        store: Every creature except the one taking its turn
        rng: Random source for direction rolls and mutation
        events: Tally of births and kills caused by this turn
    """

    world: "World"
    store: "EntityStore"
    rng: random.Random
    events: TickEvents = field(default_factory=TickEvents)


def _target(creature: "Creature", ctx: TurnContext) -> Tuple[int, int]:
    """Roll a direction and return the wrapped coordinates it points at."""
    direction = choose_direction(creature.sensors, ctx.rng)
    return ctx.world.neighbor(creature.x, creature.y, direction.delta)


# =============================================================================
# Opcode handlers
# =============================================================================


def op_nop(creature: "Creature", ctx: TurnContext) -> None:
    pass


def op_look_for_food(creature: "Creature", ctx: TurnContext) -> None:
    """Load each register with the food on the adjacent tile, saturated."""
    for direction in CARDINALS:
        x, y = ctx.world.neighbor(creature.x, creature.y, direction.delta)
        creature.sensors.set(direction, saturate(ctx.world.tile_at(x, y).food))


def op_look_for_creature(creature: "Creature", ctx: TurnContext) -> None:
    """Set each register to max if the adjacent tile is occupied, else min."""
    for direction in CARDINALS:
        x, y = ctx.world.neighbor(creature.x, creature.y, direction.delta)
        occupied = ctx.world.tile_at(x, y).occupant is not None
        creature.sensors.set(direction, SENSOR_MAX if occupied else SENSOR_MIN)


def op_move(creature: "Creature", ctx: TurnContext) -> None:
    x, y = _target(creature, ctx)
    destination = ctx.world.tile_at_mut(x, y)
    if destination.occupant is not None:
        return

    ctx.world.tile_at_mut(creature.x, creature.y).occupant = None
    destination.occupant = creature.handle
    creature.x, creature.y = x, y


def op_eat(creature: "Creature", ctx: TurnContext) -> None:
    """Take up to EAT_QUOTA food from an unoccupied neighbouring tile."""
    x, y = _target(creature, ctx)
    tile = ctx.world.tile_at_mut(x, y)
    if tile.occupant is not None:
        return

    taken = min(EAT_QUOTA, tile.food)
    creature.energy += taken
    tile.food -= taken


def op_attack(creature: "Creature", ctx: TurnContext) -> None:
    """Drain ATTACK_DAMAGE energy from a neighbour, killing it if that is all it has."""
    x, y = _target(creature, ctx)
    tile = ctx.world.tile_at_mut(x, y)
    if tile.occupant is None:
        return

    victim_handle = tile.occupant
    victim = ctx.store.get_mut(victim_handle)
    if victim is None:
        # Only reachable on a 1-wide or 1-high world, where the attacker is
        # its own neighbour and is checked out of the store.
        logger.debug(f"{creature.handle} attacked unresolved occupant {victim_handle}")
        return

    if victim.energy <= ATTACK_DAMAGE:
        creature.energy += victim.energy
        tile.occupant = None
        ctx.store.deallocate(victim_handle)
        ctx.events.kills += 1
        logger.debug(f"{creature.handle} killed {victim_handle} at ({x}, {y})")
    else:
        victim.energy -= ATTACK_DAMAGE
        creature.energy += ATTACK_DAMAGE


def op_reproduce(creature: "Creature", ctx: TurnContext) -> None:
    """Spawn a (possibly mutated) clone onto a free neighbouring tile."""
    if creature.energy < REPRODUCE_THRESHOLD:
        return

    x, y = _target(creature, ctx)
    tile = ctx.world.tile_at_mut(x, y)
    if tile.occupant is not None:
        return

    offspring_genes = mutate_genes(creature.genes, ctx.rng)
    tile.occupant = ctx.store.add_creature(x, y, offspring_genes)
    creature.energy -= REPRODUCE_COST
    ctx.events.births += 1
    logger.debug(f"{creature.handle} reproduced into {tile.occupant} at ({x}, {y})")


def op_invert(creature: "Creature", ctx: TurnContext) -> None:
    creature.sensors.invert()


OPCODE_HANDLERS: Dict[Opcode, Callable[["Creature", TurnContext], None]] = {
    Opcode.NOP: op_nop,
    Opcode.LOOK_FOR_FOOD: op_look_for_food,
    Opcode.LOOK_FOR_CREATURE: op_look_for_creature,
    Opcode.MOVE: op_move,
    Opcode.EAT: op_eat,
    Opcode.ATTACK: op_attack,
    Opcode.REPRODUCE: op_reproduce,
    Opcode.INVERT: op_invert,
}


# =============================================================================
# Dispatch
# =============================================================================


def execute(opcode: Opcode, creature: "Creature", ctx: TurnContext) -> None:
    """Apply a single opcode's effect."""
    OPCODE_HANDLERS[opcode](creature, ctx)


def run_program(creature: "Creature", ctx: TurnContext) -> None:
    """Execute the creature's whole gene program in order."""
    assert 1 <= len(creature.genes) <= MAX_GENES, (
        f"{creature.handle} carries {len(creature.genes)} genes (max {MAX_GENES})"
    )
    for opcode in creature.genes:
        execute(opcode, creature, ctx)
