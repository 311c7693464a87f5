"""Parse buffer lines back into a CardDocument."""

from collections.abc import Sequence

from cardpad.domain.card.entities import CardDocument
from cardpad.domain.card.grammar import (
    CARD_TYPE_PATTERN,
    DECK_PATTERN,
    FIELD_START_PATTERN,
    is_blank,
)


def _parse_headers(lines: Sequence[str], document: CardDocument) -> int:
    """Read header lines until the first blank line; return the next index."""
    for index, line in enumerate(lines):
        if is_blank(line):
            return index + 1
        if match := CARD_TYPE_PATTERN.match(line):
            document.card_type = match.group(1)
        elif match := DECK_PATTERN.match(line):
            document.deck = match.group(1)
    return len(lines)


def parse_card(lines: Sequence[str]) -> CardDocument:
    """
    Rebuild a CardDocument from buffer lines.

    Header phase runs until the first blank line, which is consumed. Every
    ``Name: rest`` line afterwards starts a field; ``rest`` (when non-empty)
    is the first value line and every following line up to the next field
    start is appended verbatim. A value made only of whitespace lines parses
    as empty: such a value (``"   "``, ``"\\n"``) cannot be told apart from the
    padding under an empty field, so it does not survive a render and parse.

    Header values keep trailing whitespace; leading whitespace after the
    colon is dropped.

    Field names keep everything before the first ``:`` except leading
    whitespace. A repeated name keeps its first position and its last value.

    Never raises; lines before the first field are ignored.
    """
    document = CardDocument()
    index = _parse_headers(lines, document)

    name: str | None = None
    value_lines: list[str] = []

    def flush() -> None:
        if name is None:
            return
        has_content = any(not is_blank(line) for line in value_lines)
        document.set_field(name, "\n".join(value_lines) if has_content else "")

    for line in lines[index:]:
        match = FIELD_START_PATTERN.match(line)
        if match:
            flush()
            name, rest = match.group(1), match.group(2)
            value_lines = [rest] if rest else []
        elif name is not None:
            value_lines.append(line)
    flush()
    return document
