"""Text buffers backing a card editor session."""

from pathlib import Path

from cardpad.domain.card.value_objects import Cursor


class InMemoryBuffer:
    """A scratch buffer holding its lines and cursor in memory."""

    def __init__(self, lines: list[str] | None = None, cursor: Cursor | None = None) -> None:
        self._lines = list(lines or [])
        self.cursor = cursor or Cursor(line=1)

    def get_lines(self) -> list[str]:
        return list(self._lines)

    def set_lines(self, lines: list[str]) -> None:
        self._lines = list(lines)


class FileBuffer:
    """A card file on disk; the cursor is supplied by the caller.

    A missing file reads as an empty buffer. Lines break on ``\\n`` only, as in
    an editor; a ``\\r`` before it is dropped. Writes replace the whole file.
    """

    def __init__(self, path: Path, cursor: Cursor | None = None) -> None:
        self.path = path
        self.cursor = cursor or Cursor(line=1)

    def get_lines(self) -> list[str]:
        if not self.path.exists():
            return []
        # newline="" keeps \r and other separators inside lines; only \n breaks a line
        with self.path.open(encoding="utf-8", newline="") as f:
            text = f.read()
        if not text:
            return []
        text = text.removesuffix("\n")
        return [line.removesuffix("\r") for line in text.split("\n")]

    def set_lines(self, lines: list[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("\n".join(lines) + "\n", encoding="utf-8", newline="")
