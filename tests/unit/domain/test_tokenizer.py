"""Tests for the command argument tokenizer."""

import pytest

from cardpad.domain.common import tokenize


class TestTokenize:
    """Test suite for tokenize."""

    def test_double_quoted_token_keeps_spaces(self) -> None:
        assert tokenize('Simple "My Deck Name"') == ["Simple", "My Deck Name"]

    def test_escaped_quote_inside_single_quotes(self) -> None:
        assert tokenize("a 'b\\'c' d") == ["a", "b'c", "d"]

    @pytest.mark.parametrize("raw", ["", "   ", " \t \n", None])
    def test_blank_input_gives_no_tokens(self, raw: str | None) -> None:
        assert tokenize(raw) == []

    def test_runs_of_whitespace_separate_tokens(self) -> None:
        assert tokenize("  a   b\tc  ") == ["a", "b", "c"]

    def test_unterminated_quote_runs_to_end(self) -> None:
        """An unterminated quote is not an error."""
        assert tokenize('new "My Deck') == ["new", "My Deck"]

    def test_other_escapes_are_kept_verbatim(self) -> None:
        assert tokenize('"a\\nb"') == ["a\\nb"]

    def test_other_quote_kind_is_literal(self) -> None:
        assert tokenize("'say \"hi\"'") == ['say "hi"']

    def test_empty_quotes_give_empty_token(self) -> None:
        assert tokenize('x "" y') == ["x", "", "y"]

    def test_closing_quote_ends_token(self) -> None:
        assert tokenize('"ab"cd') == ["ab", "cd"]

    def test_quote_inside_bare_token_is_literal(self) -> None:
        assert tokenize("it's fine") == ["it's", "fine"]
