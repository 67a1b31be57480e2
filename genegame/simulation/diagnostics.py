"""Simulation diagnostics and reporting.

This module builds read-only snapshots of the simulation and formats them
as text. It separates "running the simulation" from "reporting on it": hosts
(renderers, the headless CLI, tile inspectors) only ever see the pydantic
models produced here, never live creatures.
"""

import logging
from typing import TYPE_CHECKING, Optional

from genegame.entities.creature import Creature, DietaryClass
from genegame.snapshots import CreatureSnapshot, HandleData, StatsSnapshot, TileSnapshot

if TYPE_CHECKING:
    from genegame.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)


def snapshot_creature(creature: Creature) -> CreatureSnapshot:
    """Detached copy of a creature's display attributes."""
    return CreatureSnapshot(
        handle=HandleData(**creature.handle.to_dict()),
        x=creature.x,
        y=creature.y,
        energy=creature.energy,
        dietary_class=creature.dietary_class.value,
        sensors=creature.sensors.as_dict(),
        genes=[gene.display_name for gene in creature.genes],
    )


def describe_tile(engine: "SimulationEngine", x: int, y: int) -> Optional[TileSnapshot]:
    """Inspect a tile and its occupant.

    Args:
        engine: The simulation engine instance
        x: Grid column
        y: Grid row

    Returns:
        The tile snapshot, or None if ``(x, y)`` lies off the grid.
    """
    if not engine.world.contains(x, y):
        return None

    tile = engine.world.tile_at(x, y)
    occupant = None
    if tile.occupant is not None:
        creature = engine.store.get(tile.occupant)
        if creature is not None:
            occupant = snapshot_creature(creature)

    return TileSnapshot(x=x, y=y, food=tile.food, occupant=occupant)


def format_tile_report(snapshot: TileSnapshot) -> str:
    """Multi-line text report for a tile snapshot."""
    lines = [f"X: {snapshot.x} Y: {snapshot.y}", f"Food: {snapshot.food}"]
    creature = snapshot.occupant
    if creature is not None:
        s = creature.sensors
        lines.append("==Creature==")
        lines.append(f"Type: {creature.dietary_class}")
        lines.append(
            f"Stats: Energy: {creature.energy} "
            f"E: {s['east']} W: {s['west']} N: {s['north']} S: {s['south']}"
        )
        lines.append(f"Genes({creature.gene_count}):")
        lines.extend(creature.genes)
        lines.append("============")
    return "\n".join(lines)


def collect_stats(engine: "SimulationEngine") -> StatsSnapshot:
    """Gather population statistics from the engine.

    Args:
        engine: The simulation engine instance

    Returns:
        A StatsSnapshot for the current round.
    """
    by_class = {dietary_class: 0 for dietary_class in DietaryClass}
    population = 0
    energy_sum = 0
    gene_sum = 0

    for creature in engine.store.iter_creatures():
        population += 1
        by_class[creature.dietary_class] += 1
        energy_sum += creature.energy
        gene_sum += len(creature.genes)

    return StatsSnapshot(
        round=engine.round,
        population=population,
        herbivores=by_class[DietaryClass.HERBIVORE],
        carnivores=by_class[DietaryClass.CARNIVORE],
        omnivores=by_class[DietaryClass.OMNIVORE],
        total_food=engine.world.total_food(),
        average_energy=energy_sum / population if population else 0.0,
        average_gene_count=gene_sum / population if population else 0.0,
        total_births=engine.totals.births,
        deaths_by_starvation=engine.totals.starvations,
        deaths_by_attack=engine.totals.kills,
        extinct=engine.extinct,
    )


def format_stats(stats: StatsSnapshot) -> str:
    """One-line summary used for periodic log output."""
    return (
        f"Round {stats.round}: population={stats.population} "
        f"(H/C/O {stats.herbivores}/{stats.carnivores}/{stats.omnivores}) "
        f"food={stats.total_food} births={stats.total_births} "
        f"starved={stats.deaths_by_starvation} killed={stats.deaths_by_attack}"
    )
