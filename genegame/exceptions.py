"""Gene Game exception hierarchy.

Routine outcomes (stale handles, blocked moves, failed attacks) are never
exceptions; they are modelled as ``None``/``False`` returns and no-ops.
These classes cover construction-time defects and bad host input.
"""


class GeneGameError(Exception):
    """Root of all Gene Game domain exceptions."""


class SimulationError(GeneGameError):
    """Errors during simulation execution (engine, store, creatures)."""


class GeneticsError(SimulationError):
    """Invalid gene sequence handed to a creature."""


class ConfigurationError(GeneGameError):
    """Invalid or missing configuration."""
