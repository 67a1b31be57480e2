"""Gene programs: the instruction set, direction rolls, mutation and execution."""

from genegame.genetics.direction import CARDINALS, Direction, Sensors, choose_direction
from genegame.genetics.interpreter import TurnContext, execute, run_program
from genegame.genetics.mutation import mutate_genes
from genegame.genetics.opcodes import MAX_GENES, NUM_OPCODES, STARTING_GENES, Opcode

__all__ = [
    "CARDINALS",
    "Direction",
    "MAX_GENES",
    "NUM_OPCODES",
    "Opcode",
    "STARTING_GENES",
    "Sensors",
    "TurnContext",
    "choose_direction",
    "execute",
    "mutate_genes",
    "run_program",
]
