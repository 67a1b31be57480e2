"""Gene Game: a toroidal grid of creatures driven by tiny gene programs.

The package is split into:
- ``entity_ids`` / ``entity_store``: generational handles and the slot allocator
- ``world``: the toroidal tile grid (food and occupancy)
- ``genetics``: opcodes, the direction selector, mutation and the interpreter
- ``entities``: the Creature and its per-tick metabolism
- ``simulation``: population seeding, the round driver and diagnostics
"""

from genegame.entity_ids import EntityHandle
from genegame.entity_store import EntityStore
from genegame.world import Tile, World, wrap_position

__all__ = [
    "EntityHandle",
    "EntityStore",
    "Tile",
    "World",
    "wrap_position",
]
