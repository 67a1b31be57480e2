from genegame.entity_ids import EntityHandle
from genegame.entities.creature import Creature
from genegame.entity_store import EntityStore
from genegame.genetics.opcodes import Opcode


def _store_with(n):
    store = EntityStore()
    handles = [store.add_creature(i, 0, [Opcode.NOP]) for i in range(n)]
    return store, handles


def test_allocate_appends_new_slots():
    store = EntityStore()
    first = store.allocate()
    second = store.allocate()
    assert (first.slot_index, second.slot_index) == (0, 1)
    assert store.count() == 2
    # Allocation does not store anything yet
    assert store.get(first) is None
    assert store.handle_at(0) is None


def test_set_then_get_round_trip():
    store = EntityStore()
    handle = store.allocate()
    creature = Creature(handle, 2, 3, [Opcode.EAT])
    store.set(handle, creature)
    assert store.get(handle) is creature
    assert store.get_mut(handle) is creature
    assert store.handle_at(0) == handle


def test_generations_unique_across_slot_reuse():
    store = EntityStore()
    issued = []
    for _ in range(50):
        handle = store.add_creature(0, 0, [Opcode.NOP])
        issued.append(handle)
        store.deallocate(handle)
    assert {h.slot_index for h in issued} == {0}
    assert len({h.generation for h in issued}) == 50


def test_generations_unique_across_stores():
    a, b = EntityStore(), EntityStore()
    ha, hb = a.allocate(), b.allocate()
    assert ha.slot_index == hb.slot_index == 0
    assert ha.generation != hb.generation


def test_stale_handle_rejected_after_deallocate():
    store, (handle,) = _store_with(1)
    assert store.deallocate(handle) is True
    assert store.get(handle) is None
    assert store.get_mut(handle) is None
    assert store.deallocate(handle) is False


def test_stale_handle_does_not_resolve_to_slot_successor():
    store, (old,) = _store_with(1)
    store.deallocate(old)
    new = store.add_creature(4, 4, [Opcode.EAT])
    assert new.slot_index == old.slot_index
    assert store.get(old) is None
    assert store.deallocate(old) is False
    assert store.get(new) is not None


def test_free_list_reuses_most_recently_freed_slot():
    store, handles = _store_with(4)
    store.deallocate(handles[1])
    store.deallocate(handles[3])
    assert store.free_slot_count() == 2
    assert store.allocate().slot_index == 3
    assert store.allocate().slot_index == 1
    assert store.allocate().slot_index == 4
    assert store.free_slot_count() == 0


def test_out_of_range_lookups_are_absent():
    store, _ = _store_with(2)
    ghost = EntityHandle(99, 0)
    assert store.get(ghost) is None
    assert store.deallocate(ghost) is False
    assert store.handle_at(99) is None
    assert store.handle_at(-1) is None


def test_set_out_of_range_is_ignored():
    store = EntityStore()
    ghost = EntityHandle(5, 0)
    store.set(ghost, Creature(ghost, 0, 0, [Opcode.NOP]))
    assert store.count() == 0


def test_deallocate_empty_slot_is_rejected():
    store = EntityStore()
    handle = store.allocate()
    assert store.deallocate(handle) is False
    assert store.free_slot_count() == 0


def test_take_checks_creature_out():
    store, (handle,) = _store_with(1)
    creature = store.take(handle)
    assert creature is not None
    assert store.is_checked_out(handle)
    assert store.get(handle) is None
    assert store.handle_at(0) is None
    assert store.live_count() == 0
    # The slot stays reserved
    assert store.allocate().slot_index == 1


def test_set_writes_back_taken_creature():
    store, (handle,) = _store_with(1)
    creature = store.take(handle)
    creature.energy = 5
    store.set(handle, creature)
    assert not store.is_checked_out(handle)
    assert store.get(handle).energy == 5


def test_deallocate_releases_checked_out_slot():
    store, (handle,) = _store_with(1)
    store.take(handle)
    assert store.deallocate(handle) is True
    assert not store.is_checked_out(handle)
    assert store.allocate().slot_index == handle.slot_index


def test_take_stale_handle_returns_none():
    store, (handle,) = _store_with(1)
    store.deallocate(handle)
    assert store.take(handle) is None
    assert not store.is_checked_out(handle)


def test_enumeration_helpers():
    store, handles = _store_with(3)
    store.deallocate(handles[1])
    assert store.count() == 3
    assert store.handles() == [handles[0], handles[2]]
    assert [c.handle for c in store.iter_creatures()] == [handles[0], handles[2]]
    assert store.live_count() == 2
