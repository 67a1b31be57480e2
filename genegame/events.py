"""Per-round event tally.

The interpreter and the metabolism step record births and deaths here so the
round driver can keep running totals without scanning the store.
"""

from dataclasses import dataclass, fields
from typing import Dict


@dataclass
class TickEvents:
    """Counts of lifecycle events observed while running creature turns."""

    births: int = 0
    kills: int = 0
    starvations: int = 0

    @property
    def deaths(self) -> int:
        return self.kills + self.starvations

    def merge(self, other: "TickEvents") -> None:
        """Add another tally into this one."""
        for field_ in fields(self):
            setattr(self, field_.name, getattr(self, field_.name) + getattr(other, field_.name))

    def to_dict(self) -> Dict[str, int]:
        return {field_.name: getattr(self, field_.name) for field_ in fields(self)}
