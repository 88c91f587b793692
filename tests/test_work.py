"""
Tests for studio/sections/work.py - context highlight markup.
"""

from studio.catalog import PROJECT_DETAILS, ProjectId
from studio.sections.work import _context_html
from studio.theme import ACCENTS, HIGHLIGHT


class TestContextHtml:
    """Highlighted phrases use the studio yellow underline."""

    def test_highlight_colour_is_fixed(self):
        html = _context_html("one two three", ["two"])
        assert html == (f'one <span class="hl" style="color:{HIGHLIGHT};'
                        f'text-decoration-color:{HIGHLIGHT}">two</span> three')
        assert HIGHLIGHT == "#F6FF6B"

    def test_project_accent_not_used(self):
        """Every project highlights in the same colour."""
        for pid in ProjectId:
            project = PROJECT_DETAILS[pid]
            html = _context_html(project.context, project.highlights)
            assert f"color:{HIGHLIGHT}" in html
            assert not any(a["ring"] in html for a in ACCENTS.values())

    def test_plain_runs_escaped(self):
        assert _context_html("a < b", ["b"]).startswith("a &lt; ")
