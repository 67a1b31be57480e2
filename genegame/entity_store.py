"""Generational slot allocator that owns every creature.

This module handles creature storage: allocation, deallocation, validated
lookup, and the take/put-back protocol the round driver uses.

Design Decisions:
-----------------
1. Storage is a dense list of optional slots plus a LIFO free list of
   reusable indices. Allocation pops the free list before growing the list.

2. Every allocation is stamped with a process-wide unique generation
   (see ``entity_ids.next_generation``). A lookup succeeds only when the
   stored creature carries the identical handle, so stale handles held by
   tiles or renderers resolve to ``None`` instead of a newer occupant.

3. All lookups are total. A stale handle is a routine event (a creature can
   die between the moment its handle was captured and the moment it is
   looked up), so nothing here raises for one.

4. Checked-out slots. While a creature takes its turn, the round driver
   ``take()``s it out of the store so the creature can mutate the store
   (spawn offspring, damage neighbours) without the store also holding it.
   The slot stays reserved for that handle: ``get()`` reports it absent,
   ``deallocate()`` still frees it (starvation mid-turn), and ``set()``
   writes it back.
"""

import logging
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Sequence

from genegame.entity_ids import EntityHandle, next_generation

if TYPE_CHECKING:
    from genegame.entities.creature import Creature
    from genegame.genetics.opcodes import Opcode


logger = logging.getLogger(__name__)


class EntityStore:
    """Owns all creatures and issues/validates their handles.

    Example:
        store = EntityStore()
        handle = store.add_creature(4, 2, [Opcode.EAT, Opcode.REPRODUCE])
        creature = store.get(handle)
        store.deallocate(handle)
        assert store.get(handle) is None
    """

    def __init__(self) -> None:
        self._slots: List[Optional["Creature"]] = []
        self._free: List[int] = []
        # slot index -> handle of the creature currently taken out for its turn
        self._checked_out: Dict[int, EntityHandle] = {}

    # =========================================================================
    # Allocation
    # =========================================================================

    def allocate(self) -> EntityHandle:
        """Reserve a slot and stamp it with a fresh generation.

        The slot stays empty until ``set()`` places a creature in it.
        """
        generation = next_generation()
        if self._free:
            index = self._free.pop()
        else:
            index = len(self._slots)
            self._slots.append(None)
        return EntityHandle(slot_index=index, generation=generation)

    def deallocate(self, handle: EntityHandle) -> bool:
        """Free the slot named by ``handle`` if it is still current.

        Returns:
            True if a creature (stored or checked out) was released,
            False for stale, empty or out-of-range handles.
        """
        index = handle.slot_index
        if index >= len(self._slots):
            return False

        creature = self._slots[index]
        if creature is not None and creature.handle == handle:
            self._slots[index] = None
        elif self._checked_out.get(index) == handle:
            del self._checked_out[index]
        else:
            logger.debug(f"Rejected stale deallocation of {handle}")
            return False

        self._free.append(index)
        return True

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, handle: EntityHandle) -> Optional["Creature"]:
        """Resolve a handle for reading. ``None`` if stale or absent."""
        index = handle.slot_index
        if index >= len(self._slots):
            return None
        creature = self._slots[index]
        if creature is None or creature.handle != handle:
            return None
        return creature

    def get_mut(self, handle: EntityHandle) -> Optional["Creature"]:
        """Resolve a handle for mutation. ``None`` if stale or absent.

        Same validation as ``get()``; kept separate so writers are easy to
        find.
        """
        return self.get(handle)

    def set(self, handle: EntityHandle, creature: "Creature") -> None:
        """Place ``creature`` into the slot named by ``handle``.

        Overwrites unconditionally once the index is in range. Used both for
        initial placement after ``allocate()`` and for write-back after a
        turn. Out-of-range handles are ignored.
        """
        index = handle.slot_index
        if index >= len(self._slots):
            return
        self._checked_out.pop(index, None)
        self._slots[index] = creature

    def take(self, handle: EntityHandle) -> Optional["Creature"]:
        """Move a creature out of the store for the duration of its turn.

        The slot remains reserved for ``handle`` until it is written back
        with ``set()`` or released with ``deallocate()``.

        Returns:
            The creature, or None if the handle is stale.
        """
        creature = self.get(handle)
        if creature is None:
            return None
        self._slots[handle.slot_index] = None
        self._checked_out[handle.slot_index] = handle
        return creature

    def is_checked_out(self, handle: EntityHandle) -> bool:
        """Whether ``handle`` is currently taken out via ``take()``."""
        return self._checked_out.get(handle.slot_index) == handle

    # =========================================================================
    # Enumeration
    # =========================================================================

    def count(self) -> int:
        """Number of slots (occupied or not). Upper bound for ``handle_at``."""
        return len(self._slots)

    def handle_at(self, index: int) -> Optional[EntityHandle]:
        """Handle of the creature stored at slot ``index``, if any."""
        if index < 0 or index >= len(self._slots):
            return None
        creature = self._slots[index]
        return creature.handle if creature is not None else None

    def handles(self) -> List[EntityHandle]:
        """Snapshot of all stored handles in ascending slot order."""
        return [creature.handle for creature in self._slots if creature is not None]

    def iter_creatures(self) -> Iterator["Creature"]:
        """Iterate stored creatures in ascending slot order."""
        for creature in self._slots:
            if creature is not None:
                yield creature

    def live_count(self) -> int:
        """Number of stored creatures (checked-out creatures excluded)."""
        return sum(1 for creature in self._slots if creature is not None)

    def free_slot_count(self) -> int:
        return len(self._free)

    # =========================================================================
    # Convenience
    # =========================================================================

    def add_creature(self, x: int, y: int, genes: Sequence["Opcode"]) -> EntityHandle:
        """Allocate a slot and store a newborn creature at ``(x, y)``.

        The caller is responsible for marking the tile occupied.
        """
        from genegame.entities.creature import Creature

        handle = self.allocate()
        self.set(handle, Creature(handle, x, y, genes))
        return handle
