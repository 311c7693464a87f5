"""Tests for CardEditorService."""

from unittest.mock import MagicMock, patch

import pytest

from cardpad.application import CardEditorService, SessionContext
from cardpad.domain.card.services import render_card
from cardpad.domain.card.value_objects import Cursor, Direction, Edge
from cardpad.exceptions import CardValidationError, NoFieldsFoundError, TransportError
from cardpad.infrastructure import InMemoryBuffer


class TestOpenNewCard:
    """Test suite for opening a new card."""

    def test_renders_fields_of_the_card_type(
        self,
        service: CardEditorService,
        fake_client: MagicMock,
        basic_lines: list[str],
    ) -> None:
        buffer = InMemoryBuffer()

        cursor = service.open_new_card(buffer, "Basic", "Default")

        assert buffer.get_lines() == basic_lines
        assert cursor == Cursor(6, 0)
        assert buffer.cursor == cursor
        fake_client.model_field_names.assert_called_once_with("Basic")

    def test_remembers_type_and_deck(
        self, service: CardEditorService, session: SessionContext
    ) -> None:
        service.open_new_card(InMemoryBuffer(), "Cloze", "Languages")

        assert session.last_model == "Cloze"
        assert session.last_deck == "Languages"

    def test_falls_back_to_last_used(
        self, service: CardEditorService, session: SessionContext, basic_lines: list[str]
    ) -> None:
        session.remember("Basic", "Default")
        buffer = InMemoryBuffer()

        service.open_new_card(buffer)

        assert buffer.get_lines() == basic_lines

    def test_without_type_renders_headers_only(
        self, service: CardEditorService, fake_client: MagicMock
    ) -> None:
        buffer = InMemoryBuffer()

        cursor = service.open_new_card(buffer)

        assert buffer.get_lines() == ["CardType: ", "Deck: ", "", ""]
        assert cursor == Cursor(1, 0)
        fake_client.model_field_names.assert_not_called()

    def test_selection_goes_into_first_field(self, service: CardEditorService) -> None:
        buffer = InMemoryBuffer()

        service.open_new_card(buffer, "Basic", "Default", selection="line one\nline two")

        assert buffer.get_lines()[4:8] == ["Front:", "line one", "line two", ""]

    def test_selection_for_type_without_fields_is_reported(
        self, service: CardEditorService, fake_client: MagicMock
    ) -> None:
        fake_client.model_field_names.side_effect = None
        fake_client.model_field_names.return_value = []
        buffer = InMemoryBuffer()

        with patch("cardpad.application.card_editor_service.logger") as logger:
            service.open_new_card(buffer, "Empty", "Default", selection="lost text")

        assert buffer.get_lines() == ["CardType: Empty", "Deck: Default", "", ""]
        logger.warning.assert_called_once()
        assert logger.warning.call_args.args[0] == "selection_dropped"

    def test_selection_without_type_is_rejected(self, service: CardEditorService) -> None:
        buffer = InMemoryBuffer(["untouched"])

        with pytest.raises(CardValidationError):
            service.open_new_card(buffer, selection="text")

        assert buffer.get_lines() == ["untouched"]

    def test_transport_failure_leaves_buffer_alone(
        self, service: CardEditorService, fake_client: MagicMock
    ) -> None:
        fake_client.model_field_names.side_effect = TransportError("unreachable")
        buffer = InMemoryBuffer(["untouched"])

        with pytest.raises(TransportError):
            service.open_new_card(buffer, "Basic", "Default")

        assert buffer.get_lines() == ["untouched"]


class TestSubmit:
    """Test suite for submitting a card."""

    def test_adds_note_with_parsed_fields(
        self, service: CardEditorService, fake_client: MagicMock
    ) -> None:
        buffer = InMemoryBuffer(
            render_card("Basic", "Default", ["Front", "Back"], ["Q", "A\nmore"])
        )

        note_id = service.submit(buffer)

        assert note_id == 1496198395707
        fake_client.add_note.assert_called_once_with(
            deck_name="Default",
            model_name="Basic",
            fields={"Front": "Q", "Back": "A\nmore"},
            tags=[],
        )

    def test_buffer_is_kept_without_reset(self, service: CardEditorService) -> None:
        lines = render_card("Basic", "Default", ["Front", "Back"], ["Q", "A"])
        buffer = InMemoryBuffer(lines)

        service.submit(buffer)

        assert buffer.get_lines() == lines

    def test_reset_renders_empty_card(
        self, service: CardEditorService, basic_lines: list[str]
    ) -> None:
        buffer = InMemoryBuffer(render_card("Basic", "Default", ["Front", "Back"], ["Q", "A"]))

        service.submit(buffer, reset=True)

        assert buffer.get_lines() == basic_lines
        assert buffer.cursor == Cursor(6, 0)

    def test_remembers_type_and_deck(
        self, service: CardEditorService, session: SessionContext
    ) -> None:
        service.submit(InMemoryBuffer(render_card("Cloze", "Languages", ["Text"], ["x"])))

        assert session.last_model == "Cloze"
        assert session.last_deck == "Languages"

    @pytest.mark.parametrize(
        ("lines", "header"),
        [
            (["CardType: ", "Deck: Default", "", "Front:", "x"], "CardType"),
            (["CardType: Basic", "Deck:", "", "Front:", "x"], "Deck"),
            ([], "CardType"),
        ],
    )
    def test_missing_header_is_rejected(
        self,
        service: CardEditorService,
        fake_client: MagicMock,
        lines: list[str],
        header: str,
    ) -> None:
        with pytest.raises(CardValidationError) as exc_info:
            service.submit(InMemoryBuffer(lines))

        assert exc_info.value.header == header
        fake_client.add_note.assert_not_called()

    def test_failed_add_does_not_remember(
        self, service: CardEditorService, fake_client: MagicMock, session: SessionContext
    ) -> None:
        fake_client.add_note.side_effect = TransportError("unreachable")

        with pytest.raises(TransportError):
            service.submit(InMemoryBuffer(render_card("Basic", "Default", ["Front"], ["Q"])))

        assert session.last_model is None


class TestNavigation:
    """Test suite for cursor movement through the service."""

    def test_jump_updates_buffer_cursor(
        self, service: CardEditorService, buffer: InMemoryBuffer
    ) -> None:
        buffer.cursor = Cursor(6, 0)

        cursor = service.jump(buffer, Direction.NEXT)

        assert cursor == Cursor(10, 0)
        assert buffer.cursor == cursor

    def test_jump_to_end(self, service: CardEditorService) -> None:
        lines = render_card("Basic", "Default", ["Front", "Back"], ["Q", "Answer"])
        buffer = InMemoryBuffer(lines, Cursor(6, 0))

        assert service.jump(buffer, Direction.NEXT, Edge.END) == Cursor(8, 6)

    def test_move_within_field(self, service: CardEditorService) -> None:
        lines = render_card("Basic", "Default", ["Front", "Back"], ["one\ntwo", "x"])
        buffer = InMemoryBuffer(lines, Cursor(6, 2))

        assert service.move_within_field(buffer, Edge.END) == Cursor(7, 3)

    def test_no_fields_keeps_cursor(self, service: CardEditorService) -> None:
        buffer = InMemoryBuffer(["CardType: Basic", "Deck: Default"], Cursor(2, 3))

        with pytest.raises(NoFieldsFoundError):
            service.jump(buffer, Direction.NEXT)

        assert buffer.cursor == Cursor(2, 3)


class TestPickers:
    """Test suite for interactive deck and card type changes."""

    def test_pick_deck_rewrites_header_only(
        self,
        service: CardEditorService,
        session: SessionContext,
    ) -> None:
        lines = render_card("Basic", "Default", ["Front", "Back"], ["Q", "A"])
        buffer = InMemoryBuffer(lines)
        picker = MagicMock()
        picker.pick.return_value = "Languages::Spanish"

        assert service.pick_deck(buffer, picker) == "Languages::Spanish"

        assert buffer.get_lines() == [lines[0], "Deck: Languages::Spanish", *lines[2:]]
        assert session.last_deck == "Languages::Spanish"
        picker.pick.assert_called_once()
        assert "Languages::Spanish" in picker.pick.call_args.args[1]

    def test_cancelled_pick_changes_nothing(
        self, service: CardEditorService, buffer: InMemoryBuffer, basic_lines: list[str]
    ) -> None:
        picker = MagicMock()
        picker.pick.return_value = None

        assert service.pick_deck(buffer, picker) is None
        assert service.pick_model(buffer, picker) is None
        assert buffer.get_lines() == basic_lines

    def test_pick_model_carries_values_over(
        self,
        service: CardEditorService,
        session: SessionContext,
    ) -> None:
        buffer = InMemoryBuffer(
            render_card("Basic", "Default", ["Front", "Back"], ["hola", "hello"])
        )
        picker = MagicMock()
        picker.pick.return_value = "Vocab"

        assert service.pick_model(buffer, picker) == "Vocab"

        assert buffer.get_lines() == render_card(
            "Vocab", "Default", ["Word", "Meaning", "Example"], ["hola", "hello", ""]
        )
        assert session.last_model == "Vocab"
        assert session.last_deck == "Default"

    def test_change_model_keeps_matching_names(self, service: CardEditorService) -> None:
        buffer = InMemoryBuffer(
            render_card("Basic", "Default", ["Front", "Back"], ["Q", "A"])
        )

        service.change_model(buffer, "Basic (and reversed card)")

        assert buffer.get_lines() == render_card(
            "Basic (and reversed card)", "Default", ["Front", "Back"], ["Q", "A"]
        )

    def test_change_model_uses_last_deck_when_missing(
        self, service: CardEditorService, session: SessionContext
    ) -> None:
        session.remember(deck="Languages")
        buffer = InMemoryBuffer(["CardType: Basic", "Deck:", "", "Front:", "Q"])

        service.change_model(buffer, "Cloze")

        assert buffer.get_lines()[:2] == ["CardType: Cloze", "Deck: Languages"]
        assert buffer.get_lines()[4:6] == ["Text:", "Q"]
