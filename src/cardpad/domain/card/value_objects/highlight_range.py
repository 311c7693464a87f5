"""Highlight range value object."""

from dataclasses import dataclass
from enum import StrEnum


class HighlightGroup(StrEnum):
    """Highlight group for a name before a colon."""

    HEADER = "header"
    FIELD_NAME = "field_name"


@dataclass(frozen=True)
class HighlightRange:
    """Columns ``[start_column, end_column)`` of a name on a 1-indexed line."""

    line: int
    start_column: int
    end_column: int
    group: HighlightGroup
