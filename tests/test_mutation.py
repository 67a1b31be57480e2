from conftest import ScriptedRng
from genegame.config.genes import MAX_GENES
from genegame.genetics.mutation import mutate_genes
from genegame.genetics.opcodes import Opcode

PARENT = [Opcode.EAT, Opcode.REPRODUCE]


def test_no_mutation_outside_mutation_chance():
    rng = ScriptedRng([10])
    child = mutate_genes(PARENT, rng)
    assert child == PARENT
    assert child is not PARENT
    assert rng.remaining == 0


def test_mutation_overwrites_random_gene():
    # mutate, new opcode MOVE, no append, overwrite index 1
    rng = ScriptedRng([9, int(Opcode.MOVE), 1, 1])
    child = mutate_genes(PARENT, rng)
    assert child == [Opcode.EAT, Opcode.MOVE]
    assert PARENT == [Opcode.EAT, Opcode.REPRODUCE]


def test_mutation_appends_on_new_gene_roll():
    rng = ScriptedRng([0, int(Opcode.ATTACK), 0])
    child = mutate_genes(PARENT, rng)
    assert child == [Opcode.EAT, Opcode.REPRODUCE, Opcode.ATTACK]


def test_full_program_never_grows():
    parent = [Opcode.NOP] * MAX_GENES
    rng = ScriptedRng([0, int(Opcode.INVERT), 0, 7])
    child = mutate_genes(parent, rng)
    assert len(child) == MAX_GENES
    assert child[7] is Opcode.INVERT
    assert child.count(Opcode.NOP) == MAX_GENES - 1


def test_mutated_lengths_stay_bounded(seeded_rng):
    genes = [Opcode.EAT]
    for _ in range(20000):
        genes = mutate_genes(genes, seeded_rng)
        assert 1 <= len(genes) <= MAX_GENES
    assert all(isinstance(gene, Opcode) for gene in genes)
