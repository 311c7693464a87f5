"""Cursor value object."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Cursor:
    """A cursor position: 1-indexed line, 0-indexed column."""

    line: int
    column: int = 0

    def to_text(self) -> str:
        """Serialize as ``LINE:COLUMN``."""
        return f"{self.line}:{self.column}"
