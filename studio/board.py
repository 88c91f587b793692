# studio/board.py — go-board tile renderer
# ----------------------------------------------------------------
# A board is a fixed H×W grid. Placements are sparse (row, col, glyph);
# the renderer expands them into the full row-major cell sequence.
# ----------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple


@dataclass(frozen=True)
class Placement:
    row: int
    col: int
    glyph: str


@dataclass(frozen=True)
class Cell:
    row: int
    col: int
    glyph: Optional[str] = None

    @property
    def is_glyph(self) -> bool:
        return self.glyph is not None


def render_board(height: int, width: int, placements: Iterable[Placement]) -> List[Cell]:
    """Expand sparse placements into exactly ``height * width`` cells, row-major.

    Preconditions (not checked): ``height, width >= 1`` and every placement
    inside ``[0, height) x [0, width)``. When two placements share a
    coordinate the later one wins.
    """
    glyphs: Dict[Tuple[int, int], str] = {}
    for p in placements:
        glyphs[(p.row, p.col)] = p.glyph
    return [
        Cell(row, col, glyphs.get((row, col)))
        for row in range(height)
        for col in range(width)
    ]


def board_rows(cells: List[Cell], width: int) -> List[List[Cell]]:
    """Regroup a row-major cell list into rows of ``width``."""
    return [cells[i:i + width] for i in range(0, len(cells), width)]


def spell(row: int, start_col: int, word: str) -> List[Placement]:
    """Placements writing ``word`` left-to-right on ``row`` from ``start_col``."""
    return [Placement(row, start_col + i, ch) for i, ch in enumerate(word)]
