"""Serialize a card into buffer lines."""

from collections.abc import Sequence

from cardpad.domain.card.entities import CardDocument
from cardpad.domain.card.grammar import (
    CARD_TYPE_HEADER,
    DECK_HEADER,
    EMPTY_FIELD_PADDING,
    header_line,
    split_value,
)


def render_card(
    card_type: str | None,
    deck: str | None,
    field_names: Sequence[str],
    values: Sequence[str | None] | None = None,
) -> list[str]:
    """
    Render the canonical buffer layout for a card.

    Layout:
        line 1: ``CardType: <card_type>``
        line 2: ``Deck: <deck>``
        lines 3-4: blank
        then per field: ``<name>:`` followed by the value lines, or by three
        blank lines when the value is missing or empty.

    Args:
        card_type: Card type (note model) name, may be empty
        deck: Target deck name, may be empty
        field_names: Field names in schema order
        values: Optional values aligned with ``field_names`` by index

    Returns:
        The buffer lines, without trailing newlines
    """
    lines = [
        header_line(CARD_TYPE_HEADER, card_type or ""),
        header_line(DECK_HEADER, deck or ""),
        "",
        "",
    ]
    for index, name in enumerate(field_names):
        lines.append(header_line(name))
        value = values[index] if values is not None and index < len(values) else None
        if value:
            lines.extend(split_value(value))
        else:
            lines.extend([""] * EMPTY_FIELD_PADDING)
    return lines


def render_document(document: CardDocument) -> list[str]:
    """Render a parsed or reconciled document."""
    return render_card(
        document.card_type,
        document.deck,
        document.field_names,
        document.field_values,
    )
