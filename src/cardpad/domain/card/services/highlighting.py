"""Highlight ranges for header and field names."""

from collections.abc import Sequence

from cardpad.domain.card.grammar import HEADER_NAME_PATTERN, HEADER_NAMES
from cardpad.domain.card.value_objects import HighlightGroup, HighlightRange


def highlight_ranges(lines: Sequence[str]) -> list[HighlightRange]:
    """Find the name before the first colon on every ``Name:`` line."""
    ranges: list[HighlightRange] = []
    for number, line in enumerate(lines, start=1):
        match = HEADER_NAME_PATTERN.match(line)
        if not match:
            continue
        indent, name = match.group(1), match.group(2)
        group = (
            HighlightGroup.HEADER
            if name.strip() in HEADER_NAMES
            else HighlightGroup.FIELD_NAME
        )
        ranges.append(HighlightRange(number, len(indent), len(indent) + len(name), group))
    return ranges
