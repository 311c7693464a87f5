"""
Command line entry point for cardpad.

Each command treats a card file as the editor buffer, so any editor can
shell out to it:

    cardpad new card.txt Basic "My Deck"     # write an empty card
    cardpad jump card.txt --line 5 --direction next
    cardpad send card.txt --reset            # add the note, start over
    cardpad run card.txt 'jump next ending' --line 5
"""

import functools
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click
import structlog
from rich.console import Console
from rich.text import Text

from cardpad import __version__
from cardpad.application import (
    CardEditorService,
    CommandDispatcher,
    Notification,
    SessionContext,
)
from cardpad.application.completion import complete_decks, complete_models
from cardpad.config import Settings, configure_logging, get_settings
from cardpad.domain.card.services import highlight_ranges
from cardpad.domain.card.value_objects import Cursor, Direction, Edge, HighlightGroup
from cardpad.exceptions import CardpadError
from cardpad.infrastructure import AnkiConnectClient, FileBuffer, RichPicker

logger = structlog.get_logger(__name__)

# Messages go to stderr; stdout carries only command results
console = Console(stderr=True)

HIGHLIGHT_STYLES: dict[HighlightGroup, str] = {
    HighlightGroup.HEADER: "bold magenta",
    HighlightGroup.FIELD_NAME: "bold cyan",
}

NOTIFICATION_STYLES: dict[str, str] = {
    "info": "bold blue",
    "warning": "bold yellow",
    "error": "bold red",
}

F = TypeVar("F", bound=Callable[..., Any])


class CLIContext:
    """Settings, session context and lazily created service client."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.session = SessionContext.load(settings.STATE_FILE)
        self._client: AnkiConnectClient | None = None

    @property
    def client(self) -> AnkiConnectClient:
        if self._client is None:
            self._client = AnkiConnectClient(
                self.settings.ANKICONNECT_URL,
                api_version=self.settings.ANKICONNECT_API_VERSION,
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        return self._client

    @property
    def service(self) -> CardEditorService:
        return CardEditorService(self.client, self.session)

    def save_session(self) -> None:
        self.session.save(self.settings.STATE_FILE)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()


def print_notification(notification: Notification) -> None:
    """Print a notification with a style matching its level."""
    style = NOTIFICATION_STYLES[notification.level]
    console.print(f"[{style}]{notification.level.capitalize()}:[/{style}] {notification.message}")


def reports_errors(command: F) -> F:
    """Turn cardpad errors into a printed message and exit status 1."""

    @functools.wraps(command)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return command(*args, **kwargs)
        except CardpadError as e:
            logger.debug("command_failed", error=e.message)
            print_notification(Notification(e.level, e.message))  # type: ignore[arg-type]
            raise click.exceptions.Exit(1) from e

    return wrapper  # type: ignore[return-value]


def _complete_with(
    fetch: Callable[[AnkiConnectClient], list[str]],
    formatter: Callable[[list[str], str], list[str]],
) -> Callable[[click.Context, click.Parameter, str], list[str]]:
    """Build a shell completion callback that asks the running service."""

    def complete(ctx: click.Context, param: click.Parameter, incomplete: str) -> list[str]:
        settings = get_settings()
        try:
            with AnkiConnectClient(
                settings.ANKICONNECT_URL,
                api_version=settings.ANKICONNECT_API_VERSION,
                timeout=settings.REQUEST_TIMEOUT,
            ) as client:
                return formatter(fetch(client), incomplete)
        except CardpadError:
            return []

    return complete


card_file_argument = click.argument(
    "card_file",
    type=click.Path(dir_okay=False, path_type=Path),
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.version_option(version=__version__, prog_name="cardpad")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Compose Anki notes as plain text and send them through AnkiConnect."""
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.LOG_LEVEL, settings.LOG_FORMAT)
    cli_context = CLIContext(settings)
    ctx.obj = cli_context
    ctx.call_on_close(cli_context.close)


@main.command("new")
@card_file_argument
@click.argument(
    "card_type",
    required=False,
    shell_complete=_complete_with(lambda c: c.model_names(), complete_models),
)
@click.argument(
    "deck",
    required=False,
    shell_complete=_complete_with(lambda c: c.deck_names(), complete_decks),
)
@click.option(
    "--selection-file",
    type=click.File("r", encoding="utf-8"),
    help="Text to place in the first field ('-' for stdin)",
)
@click.pass_obj
@reports_errors
def new_card(
    obj: CLIContext,
    card_file: Path,
    card_type: str | None,
    deck: str | None,
    selection_file: Any,
) -> None:
    """Write an empty card of CARD_TYPE for DECK into CARD_FILE."""
    selection = selection_file.read().rstrip("\n") if selection_file else None
    buffer = FileBuffer(card_file)
    cursor = obj.service.open_new_card(buffer, card_type, deck, selection)
    obj.save_session()
    print_notification(
        Notification(
            "info",
            f"opened editor for model '{obj.session.last_model or ''}' "
            f"(deck: {obj.session.last_deck or ''})",
        )
    )
    click.echo(cursor.to_text())


@main.command("send")
@card_file_argument
@click.option("--reset/--no-reset", default=False, help="Start an empty card afterwards")
@click.pass_obj
@reports_errors
def send_card(obj: CLIContext, card_file: Path, reset: bool) -> None:
    """Add the note in CARD_FILE to Anki."""
    note_id = obj.service.submit(FileBuffer(card_file), reset=reset)
    obj.save_session()
    if not reset:
        print_notification(Notification("info", f"note added (id: {note_id})"))
    click.echo(str(note_id))


@main.command("jump")
@card_file_argument
@click.option("--line", type=click.IntRange(min=1), required=True, help="Current cursor line")
@click.option("--column", type=click.IntRange(min=0), default=0, help="Current cursor column")
@click.option(
    "--direction",
    type=click.Choice([d.value for d in Direction]),
    help="Field to move to; omit to stay in the current field",
)
@click.option(
    "--edge",
    type=click.Choice(["beginning", "ending"]),
    default="beginning",
    show_default=True,
    help="Land on the start or the end of the value",
)
@click.pass_obj
@reports_errors
def jump(
    obj: CLIContext,
    card_file: Path,
    line: int,
    column: int,
    direction: str | None,
    edge: str,
) -> None:
    """Print the LINE:COLUMN to move the cursor to."""
    buffer = FileBuffer(card_file, Cursor(line=line, column=column))
    target_edge = Edge.END if edge == "ending" else Edge.START
    if direction is None:
        cursor = obj.service.move_within_field(buffer, target_edge)
    else:
        cursor = obj.service.jump(buffer, Direction(direction), target_edge)
    click.echo(cursor.to_text())


@main.command("pick-deck")
@card_file_argument
@click.pass_obj
@reports_errors
def pick_deck(obj: CLIContext, card_file: Path) -> None:
    """Choose the deck of CARD_FILE interactively."""
    deck = obj.service.pick_deck(FileBuffer(card_file), RichPicker(console))
    if deck is None:
        print_notification(Notification("info", "deck unchanged"))
        return
    obj.save_session()
    print_notification(Notification("info", f"deck set to {deck}"))


@main.command("pick-model")
@card_file_argument
@click.pass_obj
@reports_errors
def pick_model(obj: CLIContext, card_file: Path) -> None:
    """Choose the card type of CARD_FILE interactively, keeping field values."""
    model = obj.service.pick_model(FileBuffer(card_file), RichPicker(console))
    if model is None:
        print_notification(Notification("info", "model unchanged"))
        return
    obj.save_session()
    print_notification(Notification("info", f"changed model to {model}"))


@main.command("show")
@click.argument("card_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def show(card_file: Path) -> None:
    """Print CARD_FILE with header and field names highlighted."""
    lines = FileBuffer(card_file).get_lines()
    texts = [Text(line) for line in lines]
    for highlight in highlight_ranges(lines):
        texts[highlight.line - 1].stylize(
            HIGHLIGHT_STYLES[highlight.group], highlight.start_column, highlight.end_column
        )
    Console().print(Text("\n").join(texts))


@main.command("run")
@card_file_argument
@click.argument("command_line")
@click.option("--line", type=click.IntRange(min=1), default=1, help="Current cursor line")
@click.option("--column", type=click.IntRange(min=0), default=0, help="Current cursor column")
@click.option(
    "--selection-file",
    type=click.File("r", encoding="utf-8"),
    help="Selected text for 'new' ('-' for stdin)",
)
@click.pass_obj
def run(
    obj: CLIContext,
    card_file: Path,
    command_line: str,
    line: int,
    column: int,
    selection_file: Any,
) -> None:
    """Run an editor COMMAND_LINE such as 'new Basic "My Deck"' on CARD_FILE."""
    selection = selection_file.read().rstrip("\n") if selection_file else None
    buffer = FileBuffer(card_file, Cursor(line=line, column=column))
    dispatcher = CommandDispatcher(obj.service, RichPicker(console))

    notification = dispatcher.dispatch(command_line, buffer, selection)
    print_notification(notification)
    if not notification.ok:
        raise click.exceptions.Exit(1)
    obj.save_session()
    click.echo(buffer.cursor.to_text())


@main.command("models")
@click.pass_obj
@reports_errors
def list_models(obj: CLIContext) -> None:
    """List card types known to Anki."""
    for name in obj.client.model_names():
        click.echo(name)


@main.command("decks")
@click.pass_obj
@reports_errors
def list_decks(obj: CLIContext) -> None:
    """List decks known to Anki."""
    for name in obj.client.deck_names():
        click.echo(name)


if __name__ == "__main__":
    main()
