"""Cursor navigation between and within fields."""

from collections.abc import Sequence

from cardpad.domain.card.value_objects import Cursor, Direction, Edge, FieldSpan
from cardpad.exceptions import NoFieldsFoundError


class FieldNavigator:
    """Stateless domain service mapping a cursor line to a target position.

    The current field is the one with the greatest header line at or above
    the cursor. A cursor above every header counts as sitting just before
    the first field, so ``next`` lands on the first field and ``previous``
    on the last. Movement wraps around in both directions.
    """

    @staticmethod
    def current_index(spans: Sequence[FieldSpan], cursor_line: int) -> int:
        """Index of the field holding ``cursor_line``, or -1 above all headers."""
        current = -1
        for index, span in enumerate(spans):
            if span.header_line > cursor_line:
                break
            current = index
        return current

    @staticmethod
    def target(
        span: FieldSpan,
        lines: Sequence[str],
        edge: Edge = Edge.START,
    ) -> Cursor:
        """
        Cursor at the start or end of a field's value.

        An empty field whose header is the last line has its value slot past
        the end of the buffer; the cursor then stops at the end of that header.
        """
        if span.value_start > len(lines):
            return Cursor(line=len(lines), column=len(lines[-1]) if lines else 0)
        if edge is Edge.END:
            return Cursor(line=span.value_end, column=len(lines[span.value_end - 1]))
        return Cursor(line=span.value_start, column=0)

    @classmethod
    def jump(
        cls,
        spans: Sequence[FieldSpan],
        lines: Sequence[str],
        cursor_line: int,
        direction: Direction,
        edge: Edge = Edge.START,
    ) -> Cursor:
        """
        Move to the next or previous field's value, wrapping around.

        Raises:
            NoFieldsFoundError: If ``spans`` is empty
        """
        if not spans:
            raise NoFieldsFoundError()
        current = cls.current_index(spans, cursor_line)
        if current < 0 and direction is Direction.NEXT:
            target_index = 0
        elif current < 0:
            target_index = len(spans) - 1
        else:
            target_index = (current + direction.step) % len(spans)
        return cls.target(spans[target_index], lines, edge)

    @classmethod
    def move_within_field(
        cls,
        spans: Sequence[FieldSpan],
        lines: Sequence[str],
        cursor_line: int,
        edge: Edge,
    ) -> Cursor:
        """
        Move to the start or end of the current field's value.

        Raises:
            NoFieldsFoundError: If ``spans`` is empty
        """
        if not spans:
            raise NoFieldsFoundError()
        current = max(cls.current_index(spans, cursor_line), 0)
        return cls.target(spans[current], lines, edge)
