from typing import Protocol


class FlashcardServiceProtocol(Protocol):
    def model_field_names(self, model_name: str) -> list[str]: ...

    def model_names(self) -> list[str]: ...

    def deck_names(self) -> list[str]: ...

    def add_note(
        self,
        deck_name: str,
        model_name: str,
        fields: dict[str, str],
        tags: list[str] | None = None,
    ) -> int: ...
