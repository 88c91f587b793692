"""Presentation tokens derived from modes / projects. Never read by the state machine."""

from __future__ import annotations
from typing import Dict

from studio.catalog import ProjectId, get_board, get_mode

ACCENTS: Dict[str, Dict[str, str]] = {
    "emerald": {"ring": "#34d399", "glow": "rgba(34,197,94,0.45)", "text": "#6ee7b7", "title": "#d1fae5"},
    "sky":     {"ring": "#38bdf8", "glow": "rgba(56,189,248,0.5)", "text": "#7dd3fc", "title": "#e0f2fe"},
    "amber":   {"ring": "#fcd34d", "glow": "rgba(252,211,77,0.55)", "text": "#fde68a", "title": "#fef3c7"},
}

INACTIVE_BORDER = "#3F3F46"

# Context highlight: fixed studio yellow, whatever the project accent.
HIGHLIGHT = "#F6FF6B"

LAB_KIND_DOT = {"freelance": "#34d399", "proposal": "#38bdf8", "report": "#fcd34d"}


def project_accent(project_id) -> Dict[str, str]:
    return ACCENTS[get_board(ProjectId(project_id)).accent]


def mode_card_style(mode_id, active: bool) -> str:
    if not active:
        return f"background:rgba(0,0,0,0.6);border-color:{INACTIVE_BORDER};"
    color = get_mode(mode_id).accent_color
    return f"background:rgba(0,0,0,0.3);border-color:{color};box-shadow:0 0 26px {color}99;"
