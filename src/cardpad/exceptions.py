"""Custom exception hierarchy for cardpad."""


class CardpadError(Exception):
    """Base exception for all cardpad errors."""

    level = "error"

    def __init__(self, message: str) -> None:
        """Initialize exception with a user-facing message."""
        self.message = message
        super().__init__(self.message)


class TransportError(CardpadError):
    """The flashcard service could not be reached or sent nothing back."""


class ProtocolError(CardpadError):
    """The flashcard service replied with something other than a valid result."""

    def __init__(self, message: str, action: str | None = None) -> None:
        """Initialize with message and the action that failed."""
        self.action = action
        super().__init__(message)


class CardValidationError(CardpadError):
    """The card cannot be submitted or opened as requested."""

    def __init__(self, message: str, header: str | None = None) -> None:
        """Initialize with message and the offending header name."""
        self.header = header
        super().__init__(message)


class NoFieldsFoundError(CardpadError):
    """Navigation was requested in a buffer with no field headers."""

    level = "warning"

    def __init__(self, message: str = "no fields found") -> None:
        """Initialize with default message."""
        super().__init__(message)


class FieldIndexError(CardpadError, IndexError):
    """A field index does not exist in the current buffer."""

    def __init__(self, field_index: int, field_count: int) -> None:
        """Initialize with requested index and the number of located fields."""
        self.field_index = field_index
        self.field_count = field_count
        super().__init__(f"field index {field_index} out of range (found {field_count} fields)")
