"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cardpad.application import CardEditorService, SessionContext
from cardpad.config import get_settings
from cardpad.infrastructure import AnkiConnectClient, InMemoryBuffer

MODEL_FIELDS: dict[str, list[str]] = {
    "Basic": ["Front", "Back"],
    "Basic (and reversed card)": ["Front", "Back"],
    "Cloze": ["Text", "Back Extra"],
    "Vocab": ["Word", "Meaning", "Example"],
}

DECKS: list[str] = ["Default", "Languages", "Languages::Spanish", "Languages::French", "My Deck"]


@pytest.fixture
def basic_lines() -> list[str]:
    """The canonical buffer for an empty Basic card in the Default deck."""
    return [
        "CardType: Basic",
        "Deck: Default",
        "",
        "",
        "Front:",
        "",
        "",
        "",
        "Back:",
        "",
        "",
        "",
    ]


@pytest.fixture
def fake_client() -> MagicMock:
    """A flashcard service client answering from MODEL_FIELDS and DECKS."""
    client = MagicMock(spec=AnkiConnectClient)
    client.model_field_names.side_effect = lambda name: list(MODEL_FIELDS[name])
    client.model_names.return_value = list(MODEL_FIELDS)
    client.deck_names.return_value = list(DECKS)
    client.add_note.return_value = 1496198395707
    return client


@pytest.fixture
def session() -> SessionContext:
    return SessionContext()


@pytest.fixture
def service(fake_client: MagicMock, session: SessionContext) -> CardEditorService:
    return CardEditorService(fake_client, session)


@pytest.fixture
def buffer(basic_lines: list[str]) -> InMemoryBuffer:
    return InMemoryBuffer(basic_lines)


@pytest.fixture
def state_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Point settings at a temporary session state file."""
    path = tmp_path / "state" / "session.json"
    monkeypatch.setenv("CARDPAD_STATE_FILE", str(path))
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()
