import pytest

from conftest import dice_for, place_creature
from genegame.entities.creature import Creature, DietaryClass, LifeState, classify_diet
from genegame.entity_ids import EntityHandle
from genegame.exceptions import GeneticsError
from genegame.genetics.direction import Direction
from genegame.genetics.opcodes import MAX_GENES, Opcode


@pytest.mark.parametrize(
    "genes, expected",
    [
        ([Opcode.EAT, Opcode.REPRODUCE], DietaryClass.HERBIVORE),
        ([Opcode.NOP], DietaryClass.HERBIVORE),
        ([Opcode.ATTACK], DietaryClass.CARNIVORE),
        ([Opcode.MOVE, Opcode.ATTACK, Opcode.REPRODUCE], DietaryClass.CARNIVORE),
        ([Opcode.ATTACK, Opcode.EAT], DietaryClass.OMNIVORE),
    ],
)
def test_classify_diet(genes, expected):
    assert classify_diet(genes) is expected


def test_metabolism_costs():
    assert DietaryClass.HERBIVORE.metabolism == 1
    assert DietaryClass.CARNIVORE.metabolism == 5
    assert DietaryClass.OMNIVORE.metabolism == 10


def test_dietary_class_is_fixed_at_birth():
    creature = Creature(EntityHandle(0, 1), 0, 0, [Opcode.EAT])
    creature.genes[0] = Opcode.ATTACK
    assert creature.dietary_class is DietaryClass.HERBIVORE
    assert creature.metabolism == 1


def test_new_creature_defaults():
    creature = Creature(EntityHandle(0, 1), 3, 4, (Opcode.EAT, Opcode.REPRODUCE))
    assert creature.position == (3, 4)
    assert creature.energy == 100
    assert creature.sensors.as_dict() == {"east": 128, "west": 128, "north": 128, "south": 128}
    assert creature.genes == [Opcode.EAT, Opcode.REPRODUCE]


@pytest.mark.parametrize("genes", [[], [Opcode.NOP] * (MAX_GENES + 1), [Opcode.NOP, 3]])
def test_invalid_gene_programs_rejected(genes):
    with pytest.raises(GeneticsError):
        Creature(EntityHandle(0, 1), 0, 0, genes)


def test_starvation_deposits_energy_and_frees_slot(small_world, entity_store):
    creature = place_creature(small_world, entity_store, 1, 1, [Opcode.NOP], energy=1)
    handle = creature.handle
    entity_store.take(handle)

    state = creature.simulate_one_tick(small_world, entity_store)

    assert state is LifeState.DEAD
    assert creature.energy == 0
    assert small_world.tile_at(1, 1).food == 101
    assert small_world.tile_at(1, 1).occupant is None
    assert entity_store.get(handle) is None
    assert not entity_store.is_checked_out(handle)
    assert entity_store.free_slot_count() == 1


def test_starvation_when_energy_equals_cost(small_world, entity_store):
    creature = place_creature(small_world, entity_store, 0, 0, [Opcode.ATTACK], energy=5)
    entity_store.take(creature.handle)

    state = creature.simulate_one_tick(small_world, entity_store)

    assert state is LifeState.DEAD
    assert small_world.tile_at(0, 0).food == 105


def test_metabolism_moves_energy_to_tile(small_world, entity_store):
    creature = place_creature(
        small_world, entity_store, 2, 2, [Opcode.EAT, Opcode.ATTACK], energy=50
    )
    entity_store.take(creature.handle)

    state = creature.simulate_one_tick(small_world, entity_store)

    # Eat and Attack both roll; whatever they did, upkeep is 10
    assert state is LifeState.ALIVE
    assert creature.dietary_class is DietaryClass.OMNIVORE
    tile = small_world.tile_at(creature.x, creature.y)
    assert tile.food >= 10


def test_metabolism_exact_accounting(small_world, entity_store):
    creature = place_creature(small_world, entity_store, 2, 2, [Opcode.INVERT], energy=30)
    entity_store.take(creature.handle)

    state = creature.simulate_one_tick(small_world, entity_store)

    assert state is LifeState.ALIVE
    assert creature.energy == 29
    assert small_world.tile_at(2, 2).food == 101


def test_zero_energy_dies_without_running_genes(small_world, entity_store, turn):
    creature = place_creature(small_world, entity_store, 2, 2, [Opcode.MOVE], energy=0)
    entity_store.take(creature.handle)

    state = creature.simulate_one_tick(small_world, entity_store, turn)

    assert state is LifeState.DEAD
    assert creature.position == (2, 2)
    assert turn.rng.remaining == 0
    assert small_world.tile_at(2, 2).food == 100


def test_tick_runs_program_then_metabolism(small_world, entity_store, turn):
    creature = place_creature(small_world, entity_store, 2, 2, [Opcode.MOVE])
    entity_store.take(creature.handle)
    turn.rng.push(dice_for(Direction.EAST, creature.sensors))

    state = creature.simulate_one_tick(small_world, entity_store, turn)

    assert state is LifeState.ALIVE
    assert creature.position == (3, 2)
    # Upkeep lands on the tile it ended on
    assert small_world.tile_at(3, 2).food == 101
    assert small_world.tile_at(2, 2).food == 100


def test_creature_text_report():
    creature = Creature(EntityHandle(0, 1), 0, 0, [Opcode.LOOK_FOR_FOOD, Opcode.EAT])
    text = str(creature)
    assert text.splitlines() == [
        "==Creature==",
        "Type: Herbivore",
        "Stats: Energy: 100 E: 128 W: 128 N: 128 S: 128",
        "Genes(2):",
        "LookForFood",
        "Eat",
        "============",
    ]
