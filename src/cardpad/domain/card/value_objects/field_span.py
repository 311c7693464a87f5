"""FieldSpan value object.

A FieldSpan is where one field lives in the current buffer text, by line
number (1-indexed, inclusive). Spans are recomputed from the live lines on
every request and never kept across edits.

For an empty field the value range collapses to a single line right after
the header: ``value_start == value_end == header_line + 1``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldSpan:
    """Line range of one field's header and value."""

    name: str
    header_line: int
    value_start: int
    value_end: int

    @property
    def is_collapsed(self) -> bool:
        """Whether the value occupies a single line (including the empty slot)."""
        return self.value_start == self.value_end

