"""
In-memory representation of one note being edited.

A CardDocument is transient: it is either built from a field-name lookup
for a fresh card, or parsed back out of the buffer text right before it is
submitted or re-typed. The buffer stays the single source of truth.
"""

from dataclasses import dataclass, field


@dataclass
class FieldEntry:
    """One named field; the value may span several lines."""

    name: str
    value: str = ""


@dataclass
class CardDocument:
    """
    A card type, a target deck and the ordered fields of one note.

    Business Rules:
    - Field names are unique; setting an existing name replaces its value
      but keeps the position where the name first appeared
    - Field order is the order of the card type's schema for fresh cards,
      and the order found in the buffer for parsed ones
    """

    card_type: str = ""
    deck: str = ""
    fields: list[FieldEntry] = field(default_factory=list)

    @property
    def field_names(self) -> list[str]:
        """Field names in document order."""
        return [entry.name for entry in self.fields]

    @property
    def field_values(self) -> list[str]:
        """Field values aligned with ``field_names``."""
        return [entry.value for entry in self.fields]

    def as_mapping(self) -> dict[str, str]:
        """Field name to value, as sent to the flashcard service."""
        return {entry.name: entry.value for entry in self.fields}

    def get(self, name: str) -> str | None:
        """Value of the named field, or None when absent."""
        for entry in self.fields:
            if entry.name == name:
                return entry.value
        return None

    def set_field(self, name: str, value: str) -> None:
        """Set a field value, appending the field when the name is new."""
        for entry in self.fields:
            if entry.name == name:
                entry.value = value
                return
        self.fields.append(FieldEntry(name=name, value=value))

    @classmethod
    def create(
        cls,
        card_type: str | None,
        deck: str | None,
        field_names: list[str],
        values: list[str] | None = None,
    ) -> "CardDocument":
        """Build a document from a field-name list and optional aligned values."""
        document = cls(card_type=card_type or "", deck=deck or "")
        for index, name in enumerate(field_names):
            value = values[index] if values is not None and index < len(values) else ""
            document.set_field(name, value or "")
        return document
