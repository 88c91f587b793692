"""
Tests for streamlit_repo/app.py - page smoke tests through streamlit's AppTest.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from studio.catalog import ModeId, ProjectId
from studio.session import STATE_KEY
from studio.showcase import DetailView


@pytest.fixture
def app(app_path):
    at = AppTest.from_file(app_path, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def state(at):
    return at.session_state[STATE_KEY].state


class TestPage:
    """User gestures flow through the showcase commands."""

    def test_initial_render(self, app):
        s = state(app)
        assert s.active_mode is ModeId.BRAND
        assert s.active_project is None
        assert "MODE" in [m.label for m in app.metric]

    def test_mode_tab(self, app):
        app.button(key="mode_tab_web").click().run()
        assert state(app).active_mode is ModeId.WEB
        assert "Desert → Web Experience" in [m.value for m in app.metric]

    def test_board_click_opens_detail(self, app):
        app.button(key="board_zigzag").click().run()
        assert state(app).active_project is ProjectId.ZIGZAG
        assert any("Context & Problem" in m.value for m in app.markdown)

    def test_gallery_zoom_and_switch(self, app):
        app.button(key="board_zigzag").click().run()
        app.button(key="toggle_detail").click().run()
        assert state(app).detail_view is DetailView.VISUAL
        app.button(key="zoom_1").click().run()
        assert state(app).zoomed_visual is not None
        app.button(key="board_gmarket").click().run()
        s = state(app)
        assert s.active_project is ProjectId.GMARKET
        assert s.detail_view is DetailView.CASE
        assert s.zoomed_visual is None
        assert not app.exception

    def test_close_project(self, app):
        app.button(key="board_travel").click().run()
        app.button(key="close_project").click().run()
        assert state(app).active_project is None

    def test_zoom_dialog_close_button(self, app):
        """The zoom viewer opens as a dialog and its close button clears the zoom."""
        app.button(key="board_zigzag").click().run()
        app.button(key="toggle_detail").click().run()
        app.button(key="zoom_0").click().run()
        assert state(app).zoomed_visual is not None
        app.button(key="close_visual").click().run()
        s = state(app)
        assert s.zoomed_visual is None
        assert s.active_project is ProjectId.ZIGZAG
        assert s.detail_view is DetailView.VISUAL
        assert not app.exception


def test_no_deprecated_container_width(app_path):
    """Widgets size themselves with width="stretch"."""
    root = Path(app_path).parent.parent
    sources = [Path(app_path), *sorted((root / "studio" / "sections").glob("*.py"))]
    for path in sources:
        assert "use_container_width" not in path.read_text(encoding="utf-8"), path.name
