"""Gene program and mutation constants."""

# Longest gene program a creature may carry
MAX_GENES = 16

# Percent chance that an offspring's genes mutate at all
MUTATION_CHANCE = 10

# Percent chance, inside a mutation, that the new opcode is appended
# rather than overwriting an existing gene
NEW_GENE_CHANCE = 1
