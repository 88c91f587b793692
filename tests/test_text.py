"""
Tests for studio/text.py - highlight_segments and parse_tools.
"""

from studio.catalog import PROJECT_DETAILS, ProjectId
from studio.text import highlight_segments, parse_tools


class TestHighlightSegments:
    """Phrase splitting."""

    def test_no_phrases(self):
        assert highlight_segments("abc", []) == [("abc", False)]

    def test_single_phrase(self):
        assert highlight_segments("one two three", ["two"]) == [
            ("one ", False), ("two", True), (" three", False),
        ]

    def test_phrase_at_edges_drops_empty_runs(self):
        assert highlight_segments("xx-yy", ["xx", "yy"]) == [("xx", True), ("-", False), ("yy", True)]

    def test_repeated_phrase(self):
        assert highlight_segments("a b a", ["a"]) == [("a", True), (" b ", False), ("a", True)]

    def test_highlighted_run_not_resplit(self):
        """A later phrase inside an earlier highlight stays whole."""
        assert highlight_segments("big cat", ["big cat", "cat"]) == [("big cat", True)]

    def test_missing_phrase(self):
        assert highlight_segments("abc", ["zzz"]) == [("abc", False)]

    def test_catalog_highlights_present(self):
        """Every configured highlight phrase occurs in its context text."""
        for pid in ProjectId:
            detail = PROJECT_DETAILS[pid]
            marked = [run for run, hl in highlight_segments(detail.context, detail.highlights) if hl]
            assert set(marked) == set(detail.highlights)
            joined = "".join(run for run, _ in highlight_segments(detail.context, detail.highlights))
            assert joined == detail.context


class TestParseTools:
    """Tool string to badges."""

    def test_known_and_unknown(self):
        assert parse_tools("Figma, Cafe24") == [("Figma", "🎨"), ("Cafe24", "•")]

    def test_strips_whitespace(self):
        assert parse_tools(" Notion ,HTML/CSS") == [("Notion", "📒"), ("HTML/CSS", "{;}")]
