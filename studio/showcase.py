# studio/showcase.py — showcase state machine
# ----------------------------------------------------------------
# Four pieces of state (mode, open project, detail sub-view, zoomed visual)
# owned by one object and changed only through six commands.
# Switching or closing a project always clears the sub-view and the zoom.
# ----------------------------------------------------------------

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Mapping, Optional, Sequence

from studio.catalog import PROJECT_VISUALS, ModeId, ProjectId, VisualAsset

logger = logging.getLogger(__name__)


class DetailView(str, Enum):
    """Sub-views of an open project."""
    CASE = "case"
    VISUAL = "visual"


@dataclass(frozen=True)
class ShowcaseState:
    """Read-only snapshot handed to the presentation layer."""
    active_mode: ModeId = ModeId.BRAND
    active_project: Optional[ProjectId] = None
    detail_view: DetailView = DetailView.CASE
    zoomed_visual: Optional[VisualAsset] = None


Listener = Callable[[ShowcaseState, ShowcaseState], None]


class Showcase:
    """Owner of :class:`ShowcaseState`.

    ``visuals`` is the project -> assets table used to check that a zoomed
    asset belongs to the open project. Listeners are called with
    ``(previous, current)`` after a change is committed; they observe only.
    """

    def __init__(self, visuals: Mapping[ProjectId, Sequence[VisualAsset]] = PROJECT_VISUALS,
                 initial_mode=ModeId.BRAND):
        self._visuals = visuals
        self._state = ShowcaseState(active_mode=ModeId(initial_mode))
        self._listeners: List[Listener] = []

    @property
    def state(self) -> ShowcaseState:
        return self._state

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    # -----------------------------
    # Commands
    # -----------------------------
    def select_mode(self, mode) -> None:
        self._commit(replace(self._state, active_mode=ModeId(mode)), "select_mode")

    def select_project(self, project) -> None:
        pid = ProjectId(project)
        if self._state.active_project is pid:
            # re-selecting keeps it open, view and zoom untouched
            return
        self._commit(
            replace(self._state, active_project=pid, detail_view=DetailView.CASE, zoomed_visual=None),
            "select_project",
        )

    def close_project(self) -> None:
        self._commit(
            replace(self._state, active_project=None, detail_view=DetailView.CASE, zoomed_visual=None),
            "close_project",
        )

    def toggle_detail_view(self) -> None:
        if self._state.active_project is None:
            logger.warning("toggle_detail_view ignored: no project open")
            return
        nxt = DetailView.CASE if self._state.detail_view is DetailView.VISUAL else DetailView.VISUAL
        self._commit(replace(self._state, detail_view=nxt), "toggle_detail_view")

    def open_visual(self, visual: VisualAsset) -> None:
        project = self._state.active_project
        if project is None:
            logger.warning("open_visual ignored: no project open")
            return
        if visual not in self._visuals[project]:
            logger.warning("open_visual ignored: %r does not belong to %s", visual, project.value)
            return
        self._commit(replace(self._state, zoomed_visual=visual), "open_visual")

    def close_visual(self) -> None:
        self._commit(replace(self._state, zoomed_visual=None), "close_visual")

    # -----------------------------
    # Internals
    # -----------------------------
    def _commit(self, new: ShowcaseState, event: str) -> None:
        old = self._state
        if new == old:
            return
        self._state = new
        logger.debug("%s: %s -> %s", event, old, new)
        for listener in list(self._listeners):
            listener(old, new)
