"""Split a raw command argument string into tokens.

Quoting rules:
- tokens are separated by runs of whitespace outside quotes
- a token starting with ``"`` or ``'`` runs until the matching quote
- inside quotes, ``\\<quote>`` is a literal quote and does not close the token
- an unterminated quote runs to the end of the input
"""

from typing import Final

QUOTE_CHARS: Final[frozenset[str]] = frozenset({'"', "'"})


def _read_quoted(raw: str, start: int, quote: str) -> tuple[str, int]:
    """Read a quoted token whose opening quote sits just before ``start``.

    Returns the token text and the index just past the closing quote.
    """
    chars: list[str] = []
    i = start
    while i < len(raw):
        ch = raw[i]
        if ch == "\\" and i + 1 < len(raw):
            nxt = raw[i + 1]
            # Only an escaped quote of the same kind collapses; other escapes stay as written
            chars.append(nxt if nxt == quote else ch + nxt)
            i += 2
        elif ch == quote:
            return "".join(chars), i + 1
        else:
            chars.append(ch)
            i += 1
    return "".join(chars), i


def tokenize(raw: str | None) -> list[str]:
    """Split ``raw`` into tokens, honoring single and double quotes.

    Never raises: malformed quoting degrades to whatever was accumulated.

    Examples:
        >>> tokenize('Simple "My Deck Name"')
        ['Simple', 'My Deck Name']
        >>> tokenize("a 'b\\\\'c' d")
        ['a', "b'c", 'd']
    """
    if not raw:
        return []

    tokens: list[str] = []
    i = 0
    length = len(raw)
    while i < length:
        while i < length and raw[i].isspace():
            i += 1
        if i >= length:
            break

        if raw[i] in QUOTE_CHARS:
            token, i = _read_quoted(raw, i + 1, raw[i])
        else:
            end = i
            while end < length and not raw[end].isspace():
                end += 1
            token, i = raw[i:end], end
        tokens.append(token)
    return tokens
