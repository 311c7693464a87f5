"""Tests for command argument completion."""

import pytest

from cardpad.application.completion import (
    DIRECTION_WORDS,
    EDGE_WORDS,
    complete_decks,
    complete_jump,
    complete_models,
    complete_words,
    quote_candidate,
)

MODELS = ["Basic", "Basic (and reversed card)", "Cloze", "Vocab"]
DECKS = ["Default", "Languages", "Languages::Spanish", "Languages::French", "My Deck"]


class TestQuoteCandidate:
    """Test suite for quoting completion candidates."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("My Deck", '"My Deck"'),
            ('say "hi"', "'say \"hi\"'"),
            ("it's", '"it\'s"'),
            ("a\"b'c", '"a\\"b\'c"'),
        ],
    )
    def test_quote_choice(self, text: str, expected: str) -> None:
        assert quote_candidate(text) == expected

    def test_preferred_quote_is_escaped(self) -> None:
        assert quote_candidate("it's", "'") == "'it\\'s'"


class TestCompleteModels:
    """Test suite for card type completion."""

    def test_case_insensitive_prefix(self) -> None:
        assert complete_models(MODELS, "basic") == [
            "Basic",
            '"Basic (and reversed card)"',
        ]

    def test_empty_lead_lists_everything(self) -> None:
        assert len(complete_models(MODELS, "")) == len(MODELS)

    def test_typed_quote_is_not_repeated(self) -> None:
        assert complete_models(MODELS, '"basic (') == ["Basic (and reversed card)"]


class TestCompleteDecks:
    """Test suite for deck completion."""

    def test_empty_lead_offers_top_level_decks(self) -> None:
        assert complete_decks(DECKS, "") == ["Default", "Languages", '"My Deck"']

    def test_prefix_offers_parent_and_children(self) -> None:
        assert complete_decks(DECKS, "lang") == [
            "Languages",
            "Languages::Spanish",
            "Languages::French",
        ]

    def test_last_segment_match(self) -> None:
        assert complete_decks(DECKS, "span") == ["Languages::Spanish"]

    @pytest.mark.parametrize("lead", ["languages::f", "Languages:F"])
    def test_separator_restricts_to_full_paths(self, lead: str) -> None:
        assert complete_decks(DECKS, lead) == ["Languages::French"]

    def test_quoted_lead(self) -> None:
        assert complete_decks(DECKS, "'my") == ["My Deck"]

    def test_no_match(self) -> None:
        assert complete_decks(DECKS, "zzz") == []


class TestCompleteWords:
    """Test suite for keyword completion."""

    def test_directions(self) -> None:
        assert complete_words(DIRECTION_WORDS, "p") == ["previous"]

    def test_edges(self) -> None:
        assert complete_words(EDGE_WORDS, None) == ["beginning", "ending"]

    @pytest.mark.parametrize(
        ("lead", "position", "expected"),
        [
            ("", 1, ["next", "previous"]),
            ("n", 1, ["next"]),
            ("", 2, ["beginning", "ending"]),
            ("e", 2, ["ending"]),
            ("", 3, []),
        ],
    )
    def test_jump_arguments(self, lead: str, position: int, expected: list[str]) -> None:
        assert complete_jump(lead, position) == expected
