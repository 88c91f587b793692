# studio/session.py — one Showcase per browser session
# ----------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Optional

import streamlit as st

from studio import config
from studio.showcase import Showcase, ShowcaseState

logger = logging.getLogger(__name__)

STATE_KEY = "showcase"
ZOOM_ENTRANCE_KEY = "zoom_entrance"
PENDING_JUMP_KEY = "pending_jump"


def _on_transition(old: ShowcaseState, new: ShowcaseState) -> None:
    # entrance effect only for the render right after a visual opens
    if old.zoomed_visual is None and new.zoomed_visual is not None:
        st.session_state[ZOOM_ENTRANCE_KEY] = True


def get_showcase() -> Showcase:
    if STATE_KEY not in st.session_state:
        showcase = Showcase(initial_mode=config.DEFAULT_MODE)
        showcase.subscribe(_on_transition)
        st.session_state[STATE_KEY] = showcase
        logger.info("new showcase session (mode=%s)", config.DEFAULT_MODE)
    return st.session_state[STATE_KEY]


def consume_zoom_entrance() -> bool:
    return bool(st.session_state.pop(ZOOM_ENTRANCE_KEY, False))


def set_pending_jump(anchor_id: str):
    st.session_state[PENDING_JUMP_KEY] = anchor_id


def consume_pending_jump() -> Optional[str]:
    return st.session_state.pop(PENDING_JUMP_KEY, None)
