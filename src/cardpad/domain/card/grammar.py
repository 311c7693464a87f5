"""Line grammar of the card text format.

A card buffer looks like::

    CardType: Basic
    Deck: Default

    <blank>
    Front:
    ...value lines...
    Back:
    ...value lines...

Every function that reads or writes the format goes through these patterns.
"""

import re
from typing import Final

CARD_TYPE_HEADER: Final = "CardType"
DECK_HEADER: Final = "Deck"
HEADER_NAMES: Final[tuple[str, str]] = (CARD_TYPE_HEADER, DECK_HEADER)

# The locator starts scanning at this 1-indexed line (just past the two headers)
FIELD_SCAN_START_LINE: Final = 3
# Blank lines emitted under a header whose value is empty
EMPTY_FIELD_PADDING: Final = 3

CARD_TYPE_PATTERN: Final = re.compile(r"^\s*CardType:\s*(.*)$")
DECK_PATTERN: Final = re.compile(r"^\s*Deck:\s*(.*)$")

# "Name: optional first value line" - starts a field while parsing
FIELD_START_PATTERN: Final = re.compile(r"^\s*([^:]+):\s*(.*)$")
# "Name:" with nothing after the colon - a field header for the locator
FIELD_HEADER_PATTERN: Final = re.compile(r"^\s*([^:]+):\s*$")
# "Name:" prefix of any header-like line, with its indentation captured
HEADER_NAME_PATTERN: Final = re.compile(r"^(\s*)([^:]+):")

BLANK_PATTERN: Final = re.compile(r"^\s*$")


def is_blank(line: str) -> bool:
    """Whether a line holds only whitespace."""
    return BLANK_PATTERN.match(line) is not None


def is_field_header(line: str) -> bool:
    """Whether a line is a bare ``Name:`` field header."""
    return FIELD_HEADER_PATTERN.match(line) is not None


def header_line(name: str, value: str | None = None) -> str:
    """Format a ``Name: value`` line, or a bare ``Name:`` when value is None."""
    if value is None:
        return f"{name}:"
    return f"{name}: {value}"


def split_value(text: str | None) -> list[str]:
    """Split a field value into buffer lines; empty text is a single blank line."""
    if not text:
        return [""]
    return text.split("\n")
