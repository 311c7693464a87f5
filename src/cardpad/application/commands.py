"""Dispatch raw editor command lines to the card editor service.

An editor integration forwards what the user typed, for example::

    new Basic "My Deck"
    send true
    jump next ending
    jump end
    deck
    model "Basic (and reversed card)"

The line is tokenized with quote handling and mapped onto one service call.
Failures come back as notifications so the editing session carries on.
"""

from dataclasses import dataclass
from typing import Final, Literal

import structlog

from cardpad.application.card_editor_service import CardEditorService
from cardpad.application.completion import (
    complete_decks,
    complete_jump,
    complete_models,
    complete_words,
)
from cardpad.application.protocols import PickerProtocol, TextBufferProtocol
from cardpad.domain.card.value_objects import Direction, Edge
from cardpad.domain.common import tokenize
from cardpad.exceptions import CardpadError

logger = structlog.get_logger(__name__)

DIRECTION_ALIASES: Final[dict[str, Direction]] = {
    "next": Direction.NEXT,
    "n": Direction.NEXT,
    "previous": Direction.PREVIOUS,
    "prev": Direction.PREVIOUS,
    "p": Direction.PREVIOUS,
    "precedent": Direction.PREVIOUS,
}

EDGE_ALIASES: Final[dict[str, Edge]] = {
    "beginning": Edge.START,
    "start": Edge.START,
    "b": Edge.START,
    "ending": Edge.END,
    "end": Edge.END,
    "e": Edge.END,
}

COMMANDS: Final[tuple[str, ...]] = ("new", "send", "jump", "deck", "model")


@dataclass(frozen=True)
class Notification:
    """Message for the user after a command."""

    level: Literal["info", "warning", "error"]
    message: str

    @property
    def ok(self) -> bool:
        return self.level != "error"


class CommandDispatcher:
    """Maps editor command lines onto CardEditorService operations."""

    def __init__(self, service: CardEditorService, picker: PickerProtocol) -> None:
        self.service = service
        self.picker = picker

    def dispatch(
        self,
        command_line: str,
        buffer: TextBufferProtocol,
        selection: str | None = None,
    ) -> Notification:
        """Run one command line against ``buffer``."""
        tokens = tokenize(command_line)
        if not tokens:
            return Notification("error", "empty command")

        name, args = tokens[0].lower(), tokens[1:]
        if name not in COMMANDS:
            return Notification("error", f"unknown command '{tokens[0]}'")

        try:
            if name == "new":
                return self._run_new(buffer, args, selection)
            if name == "send":
                return self._run_send(buffer, args)
            if name == "jump":
                return self._run_jump(buffer, args)
            if name == "deck":
                return self._run_deck(buffer, args)
            return self._run_model(buffer, args)
        except CardpadError as e:
            logger.info("command_failed", command=name, error=e.message)
            return Notification(e.level, e.message)

    def _run_new(
        self,
        buffer: TextBufferProtocol,
        args: list[str],
        selection: str | None,
    ) -> Notification:
        model = args[0] if len(args) >= 1 and args[0] else None
        deck = args[1] if len(args) >= 2 and args[1] else None
        self.service.open_new_card(buffer, model, deck, selection)
        session = self.service.session
        return Notification(
            "info",
            f"opened editor for model '{session.last_model or ''}' "
            f"(deck: {session.last_deck or ''})",
        )

    def _run_send(self, buffer: TextBufferProtocol, args: list[str]) -> Notification:
        reset = bool(args) and args[0].lower() == "true"
        note_id = self.service.submit(buffer, reset=reset)
        return Notification("info", f"note added (id: {note_id})")

    def _run_jump(self, buffer: TextBufferProtocol, args: list[str]) -> Notification:
        words = [arg.lower() for arg in args]
        direction = DIRECTION_ALIASES.get(words[0]) if words else None
        edge_word = words[1] if direction is not None and len(words) > 1 else None
        if direction is None and words:
            edge_word = words[0]

        edge = Edge.START
        if edge_word is not None:
            if edge_word not in EDGE_ALIASES:
                return Notification("error", f"unknown jump argument '{edge_word}'")
            edge = EDGE_ALIASES[edge_word]

        if direction is None:
            cursor = self.service.move_within_field(buffer, edge)
        else:
            cursor = self.service.jump(buffer, direction, edge)
        return Notification("info", f"cursor at {cursor.to_text()}")

    def _run_deck(self, buffer: TextBufferProtocol, args: list[str]) -> Notification:
        if args:
            self.service.change_deck(buffer, args[0])
            deck: str | None = args[0]
        else:
            deck = self.service.pick_deck(buffer, self.picker)
        if deck is None:
            return Notification("info", "deck unchanged")
        return Notification("info", f"deck set to {deck}")

    def _run_model(self, buffer: TextBufferProtocol, args: list[str]) -> Notification:
        if args:
            self.service.change_model(buffer, args[0])
            model: str | None = args[0]
        else:
            model = self.service.pick_model(buffer, self.picker)
        if model is None:
            return Notification("info", "model unchanged")
        return Notification("info", f"changed model to {model}")

    def complete(self, command_line: str, arg_lead: str = "") -> list[str]:
        """
        Completion candidates for the argument being typed.

        ``command_line`` is everything typed so far, command name included;
        ``arg_lead`` is the partial argument under the cursor.
        """
        tokens = tokenize(command_line)
        if not tokens:
            return complete_words(COMMANDS, arg_lead)
        position = len(tokens) - 1 if arg_lead else len(tokens)
        if position == 0:
            return complete_words(COMMANDS, arg_lead)

        name = tokens[0].lower()
        client = self.service.client
        try:
            if name == "new" and position == 1:
                return complete_models(client.model_names(), arg_lead)
            if name == "new" and position == 2:
                return complete_decks(client.deck_names(), arg_lead)
            if name == "model" and position == 1:
                return complete_models(client.model_names(), arg_lead)
            if name == "deck" and position == 1:
                return complete_decks(client.deck_names(), arg_lead)
        except CardpadError as e:
            logger.debug("completion_unavailable", command=name, error=e.message)
            return []

        if name == "jump":
            return complete_jump(arg_lead, position)
        if name == "send" and position == 1:
            return complete_words(("true", "false"), arg_lead)
        return []
