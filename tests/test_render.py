"""
Tests for studio/render.py - matplotlib board and constellation figures.
"""

import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from studio.catalog import get_board
from studio.render import STAR_POSITIONS, board_figure, constellation_figure


class TestBoardFigure:
    """One stone per cell, glyphs as text."""

    def test_stone_and_glyph_counts(self):
        fig = board_figure("zigzag", active=False)
        ax = fig.axes[0]
        stones = [p for p in ax.patches if isinstance(p, Circle)]
        assert len(stones) == 50
        assert sorted(t.get_text() for t in ax.texts) == sorted("ZIGZAG")
        plt.close(fig)

    def test_active_adds_glow(self):
        idle = board_figure("travel", active=False)
        hot = board_figure("travel", active=True)
        assert len(hot.axes[0].patches) > len(idle.axes[0].patches)
        plt.close(idle); plt.close(hot)


class TestConstellationFigure:
    """Three labelled stars."""

    def test_labels(self):
        fig = constellation_figure("web")
        labels = [t.get_text() for t in fig.axes[0].texts]
        assert labels == ["BRAND CORE", "WEB EXPERIENCE", "VISUAL SYSTEMS"]
        assert len(STAR_POSITIONS) == 3
        plt.close(fig)


class TestBoardLayout:
    """Stones sit on the grid row by row."""

    def test_glyphs_at_their_placements(self):
        fig = board_figure("zigzag", active=False)
        drawn = {tuple(t.get_position()): t.get_text() for t in fig.axes[0].texts}
        expected = {(p.col, p.row): p.glyph for p in get_board("zigzag").placements}
        assert drawn == expected
        plt.close(fig)
