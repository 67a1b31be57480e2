"""Initial population seeding.

This module provides the single source of truth for placing the starting
population, used by the engine's ``setup()`` and by tests that need a
populated world.
"""

import logging
import random
from typing import List, Optional, Sequence

from genegame.entity_ids import EntityHandle
from genegame.entity_store import EntityStore
from genegame.exceptions import SimulationError
from genegame.genetics.opcodes import STARTING_GENES, Opcode
from genegame.world import World

logger = logging.getLogger(__name__)


def create_initial_population(
    world: World,
    store: EntityStore,
    count: int,
    rng: Optional[random.Random] = None,
    genes: Sequence[Opcode] = STARTING_GENES,
) -> List[EntityHandle]:
    """Scatter ``count`` creatures onto distinct, unoccupied tiles.

    Positions are drawn uniformly at random and redrawn whenever they land on
    an occupied tile, until every creature is placed.

    Args:
        world: Grid to place creatures on
        store: Store that will own the creatures
        count: Number of creatures to place
        rng: Random source for positions
        genes: Gene program every seeded creature starts with

    Returns:
        Handles of the placed creatures, in placement order.

    Raises:
        SimulationError: If there are fewer free tiles than ``count``.
    """
    rng = rng if rng is not None else random.Random()
    width, height = world.size()

    free_tiles = width * height - world.living_occupant_count()
    if count > free_tiles:
        raise SimulationError(f"Cannot place {count} creatures on {free_tiles} free tiles")

    handles: List[EntityHandle] = []
    for _ in range(count):
        while True:
            x = rng.randrange(width)
            y = rng.randrange(height)
            tile = world.tile_at_mut(x, y)
            if tile.occupant is None:
                handle = store.add_creature(x, y, genes)
                tile.occupant = handle
                handles.append(handle)
                break

    logger.info(f"Seeded {len(handles)} creatures on a {width}x{height} world")
    return handles
