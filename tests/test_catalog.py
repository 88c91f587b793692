"""
Tests for studio/catalog.py - lookups over the closed identifier sets.
"""

import pytest

from studio.catalog import (
    BOARDS, LAB_ITEMS, MODES, PROJECT_DETAILS, PROJECT_VISUALS, ModeId, ProjectId,
    get_board, get_mode, get_mode_bullets, get_project, get_visuals,
)


class TestLookups:
    """Total over the enumerated ids."""

    @pytest.mark.parametrize("mode", list(ModeId))
    def test_modes_total(self, mode):
        assert get_mode(mode).id is mode
        assert get_mode(mode.value) is MODES[mode]
        assert len(get_mode_bullets(mode)) == 3

    @pytest.mark.parametrize("project", list(ProjectId))
    def test_projects_total(self, project):
        detail = get_project(project.value)
        assert detail.id is project
        assert detail.goals and detail.process and detail.outcome
        assert get_visuals(project) is PROJECT_VISUALS[project]
        assert get_board(project).project is project

    def test_visual_counts(self):
        assert [len(PROJECT_VISUALS[p]) for p in ProjectId] == [6, 3, 3]

    def test_unknown_id_raises(self):
        with pytest.raises(ValueError):
            get_project("nope")

    def test_tables_read_only(self):
        with pytest.raises(TypeError):
            PROJECT_DETAILS[ProjectId.ZIGZAG] = None


class TestStaticContent:
    """Shape of the remaining tables."""

    def test_one_board_per_project(self):
        assert [b.project for b in BOARDS] == list(ProjectId)

    def test_lab_footer_labels(self):
        assert [i.footer_label for i in LAB_ITEMS] == ["Client work", "Client work", "Deck / Proposal"]

    def test_lab_links_passed_through(self):
        assert LAB_ITEMS[2].href == "/lab/routeworld_josun-palace.pdf"
