"""The gene instruction set.

The eight opcodes form a closed set: nothing registers new instructions at
runtime, so the interpreter dispatches over this enum with a fixed table.
Integer values matter: the mutation policy draws a random opcode by value.
"""

from enum import IntEnum

from genegame.config.genes import MAX_GENES


class Opcode(IntEnum):
    """One instruction of a creature's gene program."""

    NOP = 0
    LOOK_FOR_FOOD = 1
    LOOK_FOR_CREATURE = 2
    MOVE = 3
    EAT = 4
    ATTACK = 5
    REPRODUCE = 6
    INVERT = 7

    @property
    def display_name(self) -> str:
        """CamelCase name used in reports (e.g. ``LookForFood``)."""
        return "".join(part.capitalize() for part in self.name.split("_"))

    def __str__(self) -> str:
        return self.display_name


NUM_OPCODES = len(Opcode)

# Program every seeded creature starts with
STARTING_GENES = (Opcode.EAT, Opcode.REPRODUCE)

__all__ = ["MAX_GENES", "NUM_OPCODES", "Opcode", "STARTING_GENES"]
