"""Navigation directions and edges."""

from enum import StrEnum


class Direction(StrEnum):
    """Which field to jump to, relative to the current one."""

    NEXT = "next"
    PREVIOUS = "previous"

    @property
    def step(self) -> int:
        """Index offset for this direction."""
        return 1 if self is Direction.NEXT else -1


class Edge(StrEnum):
    """Which end of a field's value to land on."""

    START = "start"
    END = "end"
