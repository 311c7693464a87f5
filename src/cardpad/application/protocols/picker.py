from collections.abc import Sequence
from typing import Protocol


class PickerProtocol(Protocol):
    def pick(self, title: str, choices: Sequence[str]) -> str | None: ...
