"""Card editor operations over a text buffer."""

import structlog

from cardpad.application.protocols import (
    FlashcardServiceProtocol,
    PickerProtocol,
    TextBufferProtocol,
)
from cardpad.application.session_context import SessionContext
from cardpad.domain.card.entities import CardDocument
from cardpad.domain.card.grammar import CARD_TYPE_HEADER, DECK_HEADER
from cardpad.domain.card.services import (
    FieldNavigator,
    ModelReconciler,
    locate_fields,
    parse_card,
    render_card,
    render_document,
    replace_field_value,
    set_header,
)
from cardpad.domain.card.value_objects import Cursor, Direction, Edge
from cardpad.exceptions import CardValidationError

logger = structlog.get_logger(__name__)


class CardEditorService:
    """Service for composing and submitting notes in a text buffer.

    The buffer is the only document state: every operation re-reads its
    lines, and writes them back only once the whole operation succeeded.
    """

    def __init__(self, client: FlashcardServiceProtocol, session: SessionContext) -> None:
        """Initialize service with the flashcard service client and session context."""
        self.client = client
        self.session = session

    def open_new_card(
        self,
        buffer: TextBufferProtocol,
        model: str | None = None,
        deck: str | None = None,
        selection: str | None = None,
    ) -> Cursor:
        """
        Fill the buffer with an empty card of the given type.

        Args:
            buffer: Buffer to overwrite
            model: Card type; falls back to the last used one
            deck: Target deck; falls back to the last used one
            selection: Text to place in the first field

        Returns:
            The new cursor position

        Raises:
            CardValidationError: If a selection is given but no card type is known
        """
        model = model or self.session.last_model or ""
        deck = deck or self.session.last_deck or ""

        if selection and not model:
            raise CardValidationError(
                "cannot use selection as first field: no card type given or remembered",
                header=CARD_TYPE_HEADER,
            )

        field_names = self.client.model_field_names(model) if model else []
        lines = render_card(model, deck, field_names)
        if selection and field_names:
            lines = replace_field_value(lines, 1, selection)
        elif selection:
            logger.warning("selection_dropped", model=model, reason="card type has no fields")

        spans = locate_fields(lines)
        cursor = FieldNavigator.target(spans[0], lines) if spans else Cursor(line=1)

        buffer.set_lines(lines)
        buffer.cursor = cursor
        self.session.remember(model, deck)
        logger.info("card_opened", model=model, deck=deck, field_count=len(field_names))
        return cursor

    def submit(self, buffer: TextBufferProtocol, reset: bool = False) -> int:
        """
        Send the buffer's note to the flashcard service.

        Args:
            buffer: Buffer holding the card text
            reset: Re-render an empty card of the same type and deck afterwards

        Returns:
            The id of the created note

        Raises:
            CardValidationError: If the CardType or Deck header is empty
        """
        document = parse_card(buffer.get_lines())
        if not document.card_type:
            raise CardValidationError(
                "CardType not set in buffer (line 'CardType: ...')", header=CARD_TYPE_HEADER
            )
        if not document.deck:
            raise CardValidationError(
                "Deck not set in buffer (line 'Deck: ...')", header=DECK_HEADER
            )

        note_id = self.client.add_note(
            deck_name=document.deck,
            model_name=document.card_type,
            fields=document.as_mapping(),
            tags=[],
        )
        self.session.remember(document.card_type, document.deck)

        if reset:
            field_names = self.client.model_field_names(document.card_type)
            lines = render_card(document.card_type, document.deck, field_names)
            buffer.set_lines(lines)
            spans = locate_fields(lines)
            buffer.cursor = FieldNavigator.target(spans[0], lines) if spans else Cursor(line=1)

        return note_id

    def jump(
        self,
        buffer: TextBufferProtocol,
        direction: Direction,
        edge: Edge = Edge.START,
    ) -> Cursor:
        """Move the cursor to the next or previous field's value."""
        lines = buffer.get_lines()
        cursor = FieldNavigator.jump(
            locate_fields(lines), lines, buffer.cursor.line, direction, edge
        )
        buffer.cursor = cursor
        return cursor

    def move_within_field(self, buffer: TextBufferProtocol, edge: Edge) -> Cursor:
        """Move the cursor to the start or end of the current field's value."""
        lines = buffer.get_lines()
        cursor = FieldNavigator.move_within_field(
            locate_fields(lines), lines, buffer.cursor.line, edge
        )
        buffer.cursor = cursor
        return cursor

    def pick_deck(self, buffer: TextBufferProtocol, picker: PickerProtocol) -> str | None:
        """Let the user choose a deck and rewrite only the Deck header."""
        chosen = picker.pick("Anki decks", self.client.deck_names())
        if chosen is None:
            return None
        self.change_deck(buffer, chosen)
        return chosen

    def change_deck(self, buffer: TextBufferProtocol, deck: str) -> None:
        """Rewrite the Deck header, leaving the rest of the buffer untouched."""
        buffer.set_lines(set_header(buffer.get_lines(), DECK_HEADER, deck))
        self.session.remember(deck=deck)
        logger.info("card_deck_changed", deck=deck)

    def pick_model(self, buffer: TextBufferProtocol, picker: PickerProtocol) -> str | None:
        """Let the user choose a card type and carry the field values over to it."""
        chosen = picker.pick("Anki models (card types)", self.client.model_names())
        if chosen is None:
            return None
        self.change_model(buffer, chosen)
        return chosen

    def change_model(self, buffer: TextBufferProtocol, model: str) -> None:
        """Re-render the buffer for another card type, keeping field values."""
        document = parse_card(buffer.get_lines())
        deck = document.deck or self.session.last_deck or ""
        new_field_names = self.client.model_field_names(model)

        values = ModelReconciler.reconcile(
            new_field_names, document.field_names, document.as_mapping()
        )
        buffer.set_lines(
            render_document(CardDocument.create(model, deck, new_field_names, values))
        )
        self.session.remember(model, deck)
        logger.info(
            "card_model_changed",
            old_model=document.card_type,
            new_model=model,
            field_count=len(new_field_names),
        )
