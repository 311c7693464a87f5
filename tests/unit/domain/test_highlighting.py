"""Tests for header and field name highlighting."""

from cardpad.domain.card.services import highlight_ranges
from cardpad.domain.card.value_objects import HighlightGroup, HighlightRange


class TestHighlightRanges:
    """Test suite for highlight_ranges."""

    def test_headers_and_fields(self, basic_lines: list[str]) -> None:
        assert highlight_ranges(basic_lines) == [
            HighlightRange(1, 0, 8, HighlightGroup.HEADER),
            HighlightRange(2, 0, 4, HighlightGroup.HEADER),
            HighlightRange(5, 0, 5, HighlightGroup.FIELD_NAME),
            HighlightRange(9, 0, 4, HighlightGroup.FIELD_NAME),
        ]

    def test_indented_name(self) -> None:
        assert highlight_ranges(["  Front: text"]) == [
            HighlightRange(1, 2, 7, HighlightGroup.FIELD_NAME)
        ]

    def test_lines_without_colon(self) -> None:
        assert highlight_ranges(["plain text", "", ":leading colon"]) == []
