"""Card entities."""

from .card_document import CardDocument, FieldEntry

__all__ = ["CardDocument", "FieldEntry"]
