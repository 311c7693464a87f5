from .flashcard_service import FlashcardServiceProtocol
from .picker import PickerProtocol
from .text_buffer import TextBufferProtocol

__all__ = ["FlashcardServiceProtocol", "PickerProtocol", "TextBufferProtocol"]
