from typing import Protocol

from cardpad.domain.card.value_objects import Cursor


class TextBufferProtocol(Protocol):
    cursor: Cursor

    def get_lines(self) -> list[str]: ...

    def set_lines(self, lines: list[str]) -> None: ...
