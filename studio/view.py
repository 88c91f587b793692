"""Derived, read-only view of a showcase snapshot for the Streamlit sections."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from studio.catalog import (
    BOARDS, ModeConfig, ProjectDetail, ProjectId, VisualAsset,
    get_mode, get_mode_bullets, get_project, get_visuals,
)
from studio.showcase import DetailView, ShowcaseState

TOGGLE_LABELS = {
    DetailView.CASE: ("프로젝트 보기", "→"),
    DetailView.VISUAL: ("설명 보기", "←"),
}


@dataclass(frozen=True)
class ShowcaseView:
    mode: ModeConfig
    mode_bullets: Tuple[str, ...]
    project: Optional[ProjectDetail]
    show_case: bool
    show_gallery: bool
    visuals: Tuple[VisualAsset, ...]
    zoomed: Optional[VisualAsset]
    toggle_label: str
    toggle_arrow: str
    board_active: Dict[ProjectId, bool]


def build_view(state: ShowcaseState) -> ShowcaseView:
    project = get_project(state.active_project) if state.active_project else None
    # a "visual" sub-view without an open project is inert
    gallery = project is not None and state.detail_view is DetailView.VISUAL
    label, arrow = TOGGLE_LABELS[state.detail_view]
    return ShowcaseView(
        mode=get_mode(state.active_mode),
        mode_bullets=get_mode_bullets(state.active_mode),
        project=project,
        show_case=project is not None and not gallery,
        show_gallery=gallery,
        visuals=get_visuals(state.active_project) if project else (),
        zoomed=state.zoomed_visual,
        toggle_label=label,
        toggle_arrow=arrow,
        board_active={b.project: b.project is state.active_project for b in BOARDS},
    )
