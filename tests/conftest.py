"""Pytest configuration and fixtures for gene game tests."""

import random
from typing import Iterable, List, Optional, Sequence

import pytest

from genegame.entity_store import EntityStore
from genegame.genetics.direction import Direction, Sensors
from genegame.genetics.interpreter import TurnContext
from genegame.genetics.opcodes import Opcode
from genegame.world import World


class ScriptedRng(random.Random):
    """RNG that replays a fixed script of integer draws.

    Only ``randint`` and ``randrange`` are scripted; each call pops the next
    value and checks it is inside the requested range.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        super().__init__(0)
        self._values: List[int] = list(values)

    def push(self, *values: int) -> None:
        self._values.extend(values)

    @property
    def remaining(self) -> int:
        return len(self._values)

    def _next(self, low: int, high: int) -> int:
        assert self._values, "ScriptedRng ran out of values"
        value = self._values.pop(0)
        assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
        return value

    def randint(self, a: int, b: int) -> int:
        return self._next(a, b)

    def randrange(self, start: int, stop: Optional[int] = None, step: int = 1) -> int:
        if stop is None:
            start, stop = 0, start
        return self._next(start, stop - 1)


def dice_for(direction: Direction, sensors: Sensors) -> int:
    """Smallest die value that selects ``direction`` for these registers."""
    east = sensors.east + 1
    west = sensors.west + 1
    north = sensors.north + 1
    return {
        Direction.EAST: 0,
        Direction.WEST: east,
        Direction.NORTH: east + west,
        Direction.SOUTH: east + west + north,
    }[direction]


def place_creature(
    world: World,
    store: EntityStore,
    x: int,
    y: int,
    genes: Sequence[Opcode] = (Opcode.NOP,),
    energy: Optional[int] = None,
):
    """Add a creature to the store and mark its tile occupied."""
    handle = store.add_creature(x, y, genes)
    world.tile_at_mut(x, y).occupant = handle
    creature = store.get(handle)
    if energy is not None:
        creature.energy = energy
    return creature


def assert_occupancy_consistent(world: World, store: EntityStore) -> None:
    """Every occupant resolves to a live creature standing on that tile."""
    seen = set()
    for x, y, tile in world.iter_tiles():
        if tile.occupant is None:
            continue
        creature = store.get(tile.occupant)
        assert creature is not None, f"tile ({x}, {y}) holds stale {tile.occupant}"
        assert creature.position == (x, y)
        assert tile.occupant not in seen
        seen.add(tile.occupant)
    assert len(seen) == store.live_count()


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def scripted_rng():
    """Provide an RNG whose draws are scripted by the test."""
    return ScriptedRng()


@pytest.fixture
def small_world():
    """A 5x4 world, deliberately not square."""
    return World(5, 4)


@pytest.fixture
def entity_store():
    return EntityStore()


@pytest.fixture
def turn(small_world, entity_store, scripted_rng):
    """Turn context over the small world with a scripted RNG."""
    return TurnContext(world=small_world, store=entity_store, rng=scripted_rng)
