"""Gene mutation applied when a creature reproduces.

Two nested rolls decide what happens to the offspring's copy of the genes:

1. ``MUTATION_CHANCE`` percent of births mutate at all; the rest are exact
   clones.
2. A mutating birth draws a uniformly random opcode. With
   ``NEW_GENE_CHANCE`` percent it is appended (only while the program is
   shorter than ``MAX_GENES``); otherwise it overwrites a uniformly random
   existing gene.

Overall roughly 0.1% of births grow the program and 9.9% rewrite a gene.
"""

import random
from typing import List, Sequence

from genegame.config.genes import MAX_GENES, MUTATION_CHANCE, NEW_GENE_CHANCE
from genegame.genetics.opcodes import NUM_OPCODES, Opcode


def mutate_genes(genes: Sequence[Opcode], rng: random.Random) -> List[Opcode]:
    """Return the offspring's gene program, possibly mutated.

    The parent's sequence is never modified.

    Args:
        genes: Parent gene program (1..MAX_GENES opcodes)
        rng: Random source

    Returns:
        A new list of opcodes.
    """
    new_genes = list(genes)

    if rng.randrange(100) >= MUTATION_CHANCE:
        return new_genes

    new_opcode = Opcode(rng.randrange(NUM_OPCODES))
    append_roll = rng.randrange(100)

    if len(new_genes) < MAX_GENES and append_roll < NEW_GENE_CHANCE:
        new_genes.append(new_opcode)
    else:
        new_genes[rng.randrange(len(new_genes))] = new_opcode

    return new_genes
