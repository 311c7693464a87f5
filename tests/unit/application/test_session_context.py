"""Tests for SessionContext."""

from pathlib import Path

from cardpad.application import SessionContext


class TestSessionContext:
    """Test suite for SessionContext."""

    def test_remember_overwrites_given_values(self) -> None:
        session = SessionContext(last_model="Basic", last_deck="Default")
        session.remember(model="Cloze")

        assert session.last_model == "Cloze"
        assert session.last_deck == "Default"

    def test_remember_accepts_empty_strings(self) -> None:
        session = SessionContext(last_model="Basic")
        session.remember(model="", deck="")

        assert session.last_model == ""
        assert session.last_deck == ""

    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "session.json"
        SessionContext(last_model="Basic", last_deck="My Deck").save(path)

        loaded = SessionContext.load(path)

        assert loaded == SessionContext(last_model="Basic", last_deck="My Deck")

    def test_load_missing_file(self, tmp_path: Path) -> None:
        assert SessionContext.load(tmp_path / "missing.json") == SessionContext()

    def test_load_corrupt_file(self, tmp_path: Path) -> None:
        path = tmp_path / "session.json"
        path.write_text("{not json", encoding="utf-8")

        assert SessionContext.load(path) == SessionContext()
