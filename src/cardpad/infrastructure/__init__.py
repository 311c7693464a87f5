"""Adapters to the outside world: the flashcard service, buffers and pickers."""

from .ankiconnect_client import AnkiConnectClient
from .picker import RichPicker
from .text_buffer import FileBuffer, InMemoryBuffer

__all__ = ["AnkiConnectClient", "FileBuffer", "InMemoryBuffer", "RichPicker"]
