"""Value objects describing positions in a card buffer."""

from .cursor import Cursor
from .field_span import FieldSpan
from .highlight_range import HighlightGroup, HighlightRange
from .navigation import Direction, Edge

__all__ = [
    "Cursor",
    "Direction",
    "Edge",
    "FieldSpan",
    "HighlightGroup",
    "HighlightRange",
]
