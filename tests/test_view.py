"""
Tests for studio/view.py - derived view model.
"""

from studio.catalog import PROJECT_VISUALS, ModeId, ProjectId
from studio.showcase import DetailView, ShowcaseState
from studio.view import build_view


class TestBuildView:
    """Read-only projection of a snapshot."""

    def test_initial(self, showcase):
        view = build_view(showcase.state)
        assert view.mode.id is ModeId.BRAND
        assert len(view.mode_bullets) == 3
        assert view.project is None
        assert not view.show_case and not view.show_gallery
        assert view.visuals == ()
        assert view.zoomed is None
        assert not any(view.board_active.values())

    def test_case_view(self, showcase):
        showcase.select_project("gmarket")
        view = build_view(showcase.state)
        assert view.project.id is ProjectId.GMARKET
        assert view.show_case and not view.show_gallery
        assert view.toggle_label == "프로젝트 보기" and view.toggle_arrow == "→"
        assert view.board_active == {ProjectId.ZIGZAG: False, ProjectId.GMARKET: True, ProjectId.TRAVEL: False}

    def test_gallery_view(self, zigzag_open):
        view = build_view(zigzag_open.state)
        assert view.show_gallery and not view.show_case
        assert view.visuals == PROJECT_VISUALS[ProjectId.ZIGZAG]
        assert view.zoomed == PROJECT_VISUALS[ProjectId.ZIGZAG][1]
        assert view.toggle_label == "설명 보기" and view.toggle_arrow == "←"

    def test_visual_view_inert_without_project(self):
        """A detached 'visual' sub-view shows nothing."""
        view = build_view(ShowcaseState(ModeId.WEB, None, DetailView.VISUAL, None))
        assert not view.show_gallery
        assert not view.show_case
        assert view.visuals == ()
        assert view.mode.heading == "Site & Funnel Design"
