"""Completion candidates for editor command arguments."""

import re
from collections.abc import Iterable, Sequence

from cardpad.domain.card.value_objects import Direction, Edge

DIRECTION_WORDS: tuple[str, ...] = (Direction.NEXT.value, Direction.PREVIOUS.value)
EDGE_WORDS: tuple[str, ...] = ("beginning", "ending")

_SEPARATOR_RUN = re.compile(r":+")


def escape_for_quote(text: str, quote: str) -> str:
    """Backslash-escape every occurrence of ``quote`` in ``text``."""
    return text.replace(quote, "\\" + quote)


def quote_candidate(text: str, preferred_quote: str | None = None) -> str:
    """Wrap ``text`` in quotes, picking ``'`` when it only contains ``"``."""
    quote = preferred_quote
    if quote is None:
        quote = "'" if '"' in text and "'" not in text else '"'
    return f"{quote}{escape_for_quote(text, quote)}{quote}"


def _needs_quotes(text: str) -> bool:
    return any(ch.isspace() for ch in text) or '"' in text or "'" in text


class _Lead:
    """What the user typed so far, split into opening quote and search text."""

    def __init__(self, arg_lead: str | None) -> None:
        lead = arg_lead or ""
        self.quote = lead[0] if lead[:1] in ('"', "'") else None
        self.search = (lead[1:] if self.quote else lead).lower()

    def format(self, candidate: str) -> str:
        if self.quote:
            # The opening quote is already typed
            return escape_for_quote(candidate, self.quote)
        return quote_candidate(candidate) if _needs_quotes(candidate) else candidate


def _dedupe(candidates: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(candidates))


def complete_models(names: Sequence[str], arg_lead: str | None) -> list[str]:
    """Card type names starting with the typed lead, case-insensitively."""
    lead = _Lead(arg_lead)
    return [lead.format(name) for name in names if name.lower().startswith(lead.search)]


def complete_decks(names: Sequence[str], arg_lead: str | None) -> list[str]:
    """
    Deck names for the typed lead.

    Decks nest with ``::``. Without a separator in the lead, top-level deck
    names are offered alongside full names whose path or last segment
    matches; with one, only full paths with that prefix are offered.
    """
    lead = _Lead(arg_lead)
    prefix = _SEPARATOR_RUN.sub("::", lead.search)
    candidates: list[str] = []

    for deck in names:
        lowered = deck.lower()
        top = deck.split("::", 1)[0]
        last = deck.rsplit("::", 1)[-1].lower()

        if "::" in prefix:
            if lowered.startswith(prefix):
                candidates.append(lead.format(deck))
        elif not prefix:
            candidates.append(lead.format(top))
        else:
            if top.lower().startswith(prefix):
                candidates.append(lead.format(top))
            if lowered.startswith(prefix) or last.startswith(prefix):
                candidates.append(lead.format(deck))

    return _dedupe(candidates)


def complete_words(words: Sequence[str], arg_lead: str | None) -> list[str]:
    """Fixed keywords starting with the typed lead."""
    search = (arg_lead or "").lower()
    return [word for word in words if word.startswith(search)]


def complete_jump(arg_lead: str | None, position: int) -> list[str]:
    """Directions for the first ``jump`` argument, edges for the second."""
    if position == 1:
        return complete_words(DIRECTION_WORDS, arg_lead)
    if position == 2:
        return complete_words(EDGE_WORDS, arg_lead)
    return []
