"""Compose Anki notes as plain text and submit them through AnkiConnect."""

__version__ = "0.1.0"
