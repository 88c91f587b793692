"""
Tests for studio/board.py - render_board.
"""

import pytest

from studio.board import Cell, Placement, board_rows, render_board, spell
from studio.catalog import BOARDS


class TestRenderBoard:
    """Totality, ordering and overwrite rules."""

    @pytest.mark.parametrize("h,w", [(1, 1), (5, 10), (3, 7)])
    def test_exact_cell_count(self, h, w):
        """H×W cells for any size."""
        assert len(render_board(h, w, [])) == h * w

    def test_row_major_order(self):
        """Row 0 left to right, then row 1."""
        cells = render_board(2, 3, [])
        assert [(c.row, c.col) for c in cells] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]

    def test_zi_example(self):
        """5×10 board with Z and I: two glyph cells, 48 fillers."""
        cells = render_board(5, 10, [Placement(1, 2, "Z"), Placement(1, 3, "I")])
        by_pos = {(c.row, c.col): c for c in cells}
        assert by_pos[(1, 2)].glyph == "Z"
        assert by_pos[(1, 3)].glyph == "I"
        fillers = [c for c in cells if not c.is_glyph]
        assert len(fillers) == 48

    def test_last_write_wins(self):
        """Two placements on (0, 0): the later one is kept."""
        cells = render_board(2, 2, [Placement(0, 0, "A"), Placement(0, 0, "B")])
        assert cells[0] == Cell(0, 0, "B")

    def test_pure_and_repeatable(self):
        """Input untouched, same output on repeat calls."""
        placements = [Placement(0, 1, "X")]
        first = render_board(3, 3, placements)
        second = render_board(3, 3, placements)
        assert first == second
        assert placements == [Placement(0, 1, "X")]

    def test_accepts_generator(self):
        """Placements may be any iterable."""
        cells = render_board(1, 3, (p for p in spell(0, 0, "AB")))
        assert [c.glyph for c in cells] == ["A", "B", None]


class TestHelpers:
    """board_rows and spell."""

    def test_board_rows(self):
        rows = board_rows(render_board(5, 10, []), 10)
        assert len(rows) == 5
        assert all(len(r) == 10 for r in rows)
        assert rows[3][0] == Cell(3, 0)

    def test_spell(self):
        assert spell(2, 3, "GO") == [Placement(2, 3, "G"), Placement(2, 4, "O")]


class TestCatalogBoards:
    """The three project boards spell their names inside the 5×10 grid."""

    def test_placements_in_bounds(self):
        for board in BOARDS:
            for p in board.placements:
                assert 0 <= p.row < 5 and 0 <= p.col < 10

    def test_gmarket_two_words(self):
        board = next(b for b in BOARDS if b.project.value == "gmarket")
        rows = board_rows(render_board(5, 10, board.placements), 10)
        assert "".join(c.glyph for c in rows[1] if c.is_glyph) == "GMARKET"
        assert "".join(c.glyph for c in rows[2] if c.is_glyph) == "RAKUTEN"
