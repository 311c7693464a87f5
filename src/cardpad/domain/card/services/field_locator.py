"""Locate field headers and value ranges in live buffer lines."""

from collections.abc import Sequence

from cardpad.domain.card.grammar import (
    FIELD_HEADER_PATTERN,
    FIELD_SCAN_START_LINE,
    is_blank,
    is_field_header,
)
from cardpad.domain.card.value_objects import FieldSpan


def locate_fields(lines: Sequence[str]) -> list[FieldSpan]:
    """
    Compute the span of every field in document order.

    Scanning starts at line 3, past the ``CardType``/``Deck`` headers. A
    field header is a ``Name:`` line with nothing after the colon. Its value
    starts at the first non-blank line below it and ends on the last
    non-blank line before the next header. When only blank lines (or
    nothing) separate it from the next header, the field is empty and its
    span collapses onto the line right after the header.

    Args:
        lines: Buffer lines (index 0 is line 1)

    Returns:
        FieldSpans with 1-indexed, inclusive line numbers
    """
    spans: list[FieldSpan] = []
    total = len(lines)
    # i is 1-indexed; lines[i - 1] is line i
    i = FIELD_SCAN_START_LINE
    while i <= total:
        match = FIELD_HEADER_PATTERN.match(lines[i - 1])
        if not match:
            i += 1
            continue

        header = i
        start = header + 1
        while start <= total and is_blank(lines[start - 1]):
            start += 1

        if start > total or is_field_header(lines[start - 1]):
            slot = header + 1
            spans.append(FieldSpan(match.group(1), header, slot, slot))
            i = start
            continue

        stop = start
        while stop <= total and not is_field_header(lines[stop - 1]):
            stop += 1
        end = stop - 1
        while end > start and is_blank(lines[end - 1]):
            end -= 1
        spans.append(FieldSpan(match.group(1), header, start, end))
        i = stop
    return spans
