"""Generational entity handles.

A handle names a creature by the slot it lives in plus the generation
stamp it was allocated with. Slots are recycled; generations never are.

Why Generations?
----------------
Before (raw slot indices):
    victim = store[tile.occupant]  # Bug: the slot may now hold a newborn!

After (generational handles):
    victim = store.get(tile.occupant)  # None if the original creature died

Every allocation draws a fresh value from one process-wide counter, so two
handles with the same generation are always the same allocation. The slot
index is only a lookup accelerator; it is not part of the uniqueness
guarantee.

Usage:
------
    handle = EntityHandle(slot_index=3, generation=next_generation())

    # Hashable and comparable, usable as dict keys and in sets
    seen = {handle}

    # String representation includes both parts
    print(handle)  # "Creature#3@17"
"""

import itertools
from dataclasses import dataclass
from typing import Any, Dict, Iterator


# ============================================================================
# Generation Counter
# ============================================================================

# Shared by every EntityStore in the process; values are never reused.
_GENERATIONS: Iterator[int] = itertools.count()


def next_generation() -> int:
    """Return the next process-wide unique generation value."""
    return next(_GENERATIONS)


# ============================================================================
# Handle Type
# ============================================================================


@dataclass(frozen=True, order=True)
class EntityHandle:
    """Soft reference to a creature stored in an EntityStore.

    A handle is valid only while the slot at ``slot_index`` holds a creature
    stamped with the same ``generation``. Holders (tiles, renderers, the
    round driver) must always resolve it through the store and be prepared
    for the lookup to come back empty.

    Attributes:
        slot_index: Index of the slot in the store's dense array.
        generation: Unique allocation stamp from ``next_generation()``.
    """

    slot_index: int
    generation: int

    def __post_init__(self) -> None:
        """Validate the handle parts."""
        if not isinstance(self.slot_index, int) or not isinstance(self.generation, int):
            raise TypeError("EntityHandle parts must be ints")
        if self.slot_index < 0:
            raise ValueError(f"slot_index must be non-negative, got {self.slot_index}")
        if self.generation < 0:
            raise ValueError(f"generation must be non-negative, got {self.generation}")

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"Creature#{self.slot_index}@{self.generation}"

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form for snapshots and debugging output."""
        return {"slot_index": self.slot_index, "generation": self.generation}
