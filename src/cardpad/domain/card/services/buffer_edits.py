"""Targeted rewrites of buffer lines that leave the rest of the text alone."""

import re
from collections.abc import Sequence

from cardpad.domain.card.grammar import CARD_TYPE_HEADER, header_line, split_value
from cardpad.domain.card.services.field_locator import locate_fields
from cardpad.exceptions import FieldIndexError


def replace_field_value(lines: Sequence[str], field_index: int, text: str) -> list[str]:
    """
    Replace the value of the ``field_index``-th field (1-indexed).

    The located value range is swapped for the lines of ``text``; an empty
    text leaves a single blank line. Spans are located on ``lines`` as given.

    Raises:
        FieldIndexError: If there is no such field
    """
    spans = locate_fields(lines)
    if not 1 <= field_index <= len(spans):
        raise FieldIndexError(field_index, len(spans))
    span = spans[field_index - 1]
    return [*lines[: span.value_start - 1], *split_value(text), *lines[span.value_end :]]


def set_header(lines: Sequence[str], name: str, value: str) -> list[str]:
    """
    Rewrite the first ``name:`` line as ``name: value``.

    When no such line exists, ``CardType`` is inserted on line 1 and any
    other header right below it.
    """
    pattern = re.compile(rf"^\s*{re.escape(name)}\s*:")
    updated = list(lines)
    for index, line in enumerate(updated):
        if pattern.match(line):
            updated[index] = header_line(name, value)
            return updated

    position = 0 if name == CARD_TYPE_HEADER else min(1, len(updated))
    updated.insert(position, header_line(name, value))
    return updated
