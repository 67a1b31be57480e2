"""Round driver - the slim orchestrator.

This module owns the World, the EntityStore and the RNG, and advances the
simulation one round at a time.

Design Decisions:
-----------------
1. The engine is a COORDINATOR, not a DOER. Opcode semantics live in
   ``genetics.interpreter``, metabolism in ``entities.creature``, seeding in
   ``simulation.population`` and reporting in ``simulation.diagnostics``.

2. Turn order is ascending slot index, snapshotted at the start of the
   round. Turns are sequential, not simultaneous: a creature that acts
   later sees every change made by creatures that acted before it, and
   offspring born this round first act next round.

3. Take-out / write-back. Each creature is taken out of the store for its
   turn so it can mutate the store (spawn, damage neighbours) while the
   store does not also hold it. Survivors are written back to their
   original slot; the dead have already released theirs.
"""

import logging
import random
import uuid
from typing import List, Optional

from genegame.config.simulation_config import SimulationConfig
from genegame.entities.creature import LifeState
from genegame.entity_ids import EntityHandle
from genegame.entity_store import EntityStore
from genegame.events import TickEvents
from genegame.genetics.interpreter import TurnContext
from genegame.simulation import diagnostics
from genegame.simulation.population import create_initial_population
from genegame.snapshots import StatsSnapshot
from genegame.world import World

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Headless gene game simulation.

    Attributes:
        config: Simulation configuration
        world: The tile grid
        store: Owner of every creature
        rng: Random source for every draw in the run
        round: Number of completed rounds
        totals: Running tally of births and deaths
        extinct: Set once a round finds no creature left

    Example:
        engine = SimulationEngine(SimulationConfig(width=64, height=64, initial_population=50))
        engine.setup()
        while engine.advance_round():
            ...
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the engine with an empty, fully stocked world.

        Args:
            config: Simulation configuration (defaults to SimulationConfig())
            rng: Shared random number generator
            seed: Optional seed, used if rng is not provided. Falls back to
                ``config.seed``; with neither, the run is unseeded.
        """
        self.config = config or SimulationConfig()
        self.config.validate()

        if rng is not None:
            self.rng: random.Random = rng
            self.seed = None
        else:
            self.seed = seed if seed is not None else self.config.seed
            self.rng = random.Random(self.seed)

        self.world = World(self.config.width, self.config.height, self.config.starting_food)
        self.store = EntityStore()

        self.round: int = 0
        self.totals = TickEvents()
        self.extinct: bool = False

        self.run_id: str = str(uuid.uuid4())
        logger.info(
            f"SimulationEngine initialized with run_id={self.run_id} "
            f"world={self.config.width}x{self.config.height} seed={self.seed}"
        )

    # =========================================================================
    # Setup
    # =========================================================================

    def setup(self) -> List[EntityHandle]:
        """Place the configured starting population."""
        return create_initial_population(
            self.world,
            self.store,
            self.config.initial_population,
            rng=self.rng,
        )

    # =========================================================================
    # Round driver
    # =========================================================================

    def active_handles(self) -> List[EntityHandle]:
        """Handles of every stored creature, in ascending slot order."""
        handles = []
        for index in range(self.store.count()):
            handle = self.store.handle_at(index)
            if handle is not None:
                handles.append(handle)
        return handles

    def advance_round(self) -> bool:
        """Give every living creature one turn.

        Returns:
            False if no creature was alive at the start of the round
            (simulation over), True otherwise.
        """
        active = self.active_handles()
        logger.debug(f"Round {self.round}, number of active creatures: {len(active)}")

        assert len(active) == self.world.living_occupant_count(), (
            f"{len(active)} stored creatures but "
            f"{self.world.living_occupant_count()} occupied tiles"
        )

        if not active:
            if not self.extinct:
                logger.info(f"Every creature died at round {self.round}")
            self.extinct = True
            return False

        events = TickEvents()
        ctx = TurnContext(world=self.world, store=self.store, rng=self.rng, events=events)

        for handle in active:
            creature = self.store.take(handle)
            if creature is None:
                # Killed earlier this round
                continue

            state = creature.simulate_one_tick(self.world, self.store, ctx)
            if state is LifeState.ALIVE:
                self.store.set(handle, creature)
            elif self.store.is_checked_out(handle):
                # Dead without passing through metabolism: vacate and release
                self.world.tile_at_mut(creature.x, creature.y).occupant = None
                self.store.deallocate(handle)

        self.totals.merge(events)
        self.round += 1
        return True

    def run(self, max_rounds: Optional[int] = None) -> int:
        """Advance rounds until extinction or ``max_rounds``.

        Args:
            max_rounds: Round bound; falls back to ``config.max_rounds``.
                ``None`` runs until extinction.

        Returns:
            Number of rounds completed by this call.
        """
        limit = max_rounds if max_rounds is not None else self.config.max_rounds
        interval = self.config.stats_interval
        completed = 0

        while limit is None or completed < limit:
            if not self.advance_round():
                break
            completed += 1
            if interval and self.round % interval == 0:
                logger.info(diagnostics.format_stats(self.get_stats()))

        return completed

    # =========================================================================
    # Queries
    # =========================================================================

    def population(self) -> int:
        return self.store.live_count()

    def get_stats(self) -> StatsSnapshot:
        """Population statistics for the current state."""
        return diagnostics.collect_stats(self)
