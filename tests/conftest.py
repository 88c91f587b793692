"""Fixtures for the studio showcase tests."""

from pathlib import Path

import pytest

from studio.catalog import PROJECT_VISUALS, ProjectId
from studio.showcase import Showcase

APP_PATH = Path(__file__).resolve().parent.parent / "streamlit_repo" / "app.py"


@pytest.fixture
def showcase():
    """Fresh showcase in its initial state."""
    return Showcase()


@pytest.fixture
def zigzag_open(showcase):
    """Showcase with zigzag open, gallery view, second visual zoomed."""
    showcase.select_project("zigzag")
    showcase.toggle_detail_view()
    showcase.open_visual(PROJECT_VISUALS[ProjectId.ZIGZAG][1])
    return showcase


@pytest.fixture
def app_path():
    return str(APP_PATH)
