# studio/render.py — matplotlib renderers (board tiles, constellation map)
# ----------------------------------------------------------------

from __future__ import annotations
import io
from typing import Tuple

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, FancyBboxPatch
import streamlit as st

from studio import config
from studio.board import board_rows, render_board
from studio.catalog import MODES, ModeId, get_board
from studio.theme import ACCENTS

BLACK_STONE = "#101018"
WHITE_STONE = "#e9e9f0"
BOARD_BG = "#171717"


def _to_png(fig, dpi: int = 200) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, transparent=True, bbox_inches="tight", pad_inches=0.02)
    plt.close(fig)
    return buf.getvalue()


def board_figure(project_id: str, active: bool):
    """Go-board tile: glyph cells as black stones, filler cells as white stones."""
    spec = get_board(project_id)
    rows, cols = config.GRID_ROWS, config.GRID_COLS
    cells = render_board(rows, cols, spec.placements)
    accent = ACCENTS[spec.accent]

    fig, ax = plt.subplots(figsize=(cols * 0.42, rows * 0.42 + 0.3))
    fig.patch.set_alpha(0.0)
    ax.set_xlim(-0.7, cols - 0.3); ax.set_ylim(rows - 0.3, -0.7)
    ax.set_aspect("equal"); ax.axis("off")

    frame = FancyBboxPatch((-0.6, -0.6), cols + 0.2, rows + 0.2, boxstyle="round,pad=0.02,rounding_size=0.25",
                           facecolor=BOARD_BG, edgecolor=accent["ring"] if active else "#757575",
                           linewidth=2.2 if active else 1.0)
    ax.add_patch(frame)
    if active:
        for lw, a in [(10, 0.06), (7, 0.10), (4, 0.16)]:
            ax.add_patch(FancyBboxPatch((-0.6, -0.6), cols + 0.2, rows + 0.2,
                                        boxstyle="round,pad=0.02,rounding_size=0.25",
                                        fill=False, edgecolor=accent["ring"], linewidth=lw, alpha=a))

    ax.hlines(np.arange(rows), 0, cols - 1, colors="#3f3f46", linewidth=0.6, zorder=1)
    ax.vlines(np.arange(cols), 0, rows - 1, colors="#3f3f46", linewidth=0.6, zorder=1)
    for y, line in enumerate(board_rows(cells, cols)):
        for x, cell in enumerate(line):
            if cell.is_glyph:
                ax.add_patch(Circle((x, y), 0.44, facecolor=BLACK_STONE, edgecolor="#ffffff59", linewidth=0.8, zorder=2))
                ax.text(x, y, cell.glyph, ha="center", va="center", fontsize=9, color="#fafafa",
                        fontweight="medium", zorder=3)
            else:
                ax.add_patch(Circle((x, y), 0.40, facecolor=WHITE_STONE, edgecolor="none", alpha=0.7, zorder=2))
    return fig


@st.cache_data(show_spinner=False)
def board_png(project_id: str, active: bool) -> bytes:
    return _to_png(board_figure(project_id, active))


# Fixed star positions for the three modes (x, y), left to right.
STAR_POSITIONS: Tuple[Tuple[float, float], ...] = ((0.12, 0.35), (0.5, 0.7), (0.88, 0.4))


def constellation_figure(active_mode: str, size_px: int = 720):
    """Three linked stars, the active mode glowing."""
    active = ModeId(active_mode)
    dpi = 200
    fig = plt.figure(figsize=(size_px / dpi, size_px / dpi * 0.38), dpi=dpi)
    ax = fig.add_axes([0, 0, 1, 1])
    fig.patch.set_alpha(0.0); ax.set_facecolor("none"); ax.axis("off")
    ax.set_xlim(0, 1); ax.set_ylim(0, 1)

    pts = np.array(STAR_POSITIONS)
    ax.plot(pts[:, 0], pts[:, 1], linestyle="dotted", linewidth=0.8, color="#9ca3af", alpha=0.6)
    for (x, y), mode_id in zip(STAR_POSITIONS, MODES):
        mode = MODES[mode_id]
        on = mode_id is active
        if on:
            for s, a in [(900, 0.06), (600, 0.10), (350, 0.16)]:
                ax.scatter([x], [y], s=s, color=mode.accent_color, alpha=a, linewidths=0)
        ax.scatter([x], [y], s=70 if on else 36, color=mode.accent_color, alpha=1.0 if on else 0.55,
                   edgecolors="white" if on else "none", linewidths=0.6)
        label_y = y - 0.2 if y > 0.5 else y + 0.18
        ax.text(x, label_y, mode.tab_label, ha="center", va="center", fontsize=5.5,
                color="#fafafa" if on else "#a1a1aa")
    return fig


@st.cache_data(show_spinner=False)
def constellation_png(active_mode: str) -> bytes:
    return _to_png(constellation_figure(active_mode))
