"""
Tests for studio/session.py - zoom entrance flag raised by the transition observer.
"""

from studio.catalog import PROJECT_VISUALS, ProjectId
from studio.showcase import ShowcaseState
from studio.session import _on_transition, consume_zoom_entrance, ZOOM_ENTRANCE_KEY


class FakeState(dict):
    """Stand-in for st.session_state."""


def test_flag_set_only_when_zoom_opens(monkeypatch):
    import studio.session as session
    fake = FakeState()
    monkeypatch.setattr(session.st, "session_state", fake)
    asset = PROJECT_VISUALS[ProjectId.ZIGZAG][0]

    closed = ShowcaseState(active_project=ProjectId.ZIGZAG)
    opened = ShowcaseState(active_project=ProjectId.ZIGZAG, zoomed_visual=asset)

    _on_transition(opened, closed)
    assert ZOOM_ENTRANCE_KEY not in fake
    _on_transition(closed, opened)
    assert fake[ZOOM_ENTRANCE_KEY] is True
    assert consume_zoom_entrance() is True
    assert consume_zoom_entrance() is False
