"""Unit tests for Project and ProjectItem."""

import pytest

from pim.domain.exceptions import ValidationError
from pim.domain.model.project import Project, ProjectStatus
from pim.domain.model.project_item import ProjectItem, PullStatus


class TestProject:

    def test_new_project_is_active(self):
        project = Project.create("Smith Residence", "Alice Smith")
        assert project.status == ProjectStatus.ACTIVE

    def test_client_required(self):
        with pytest.raises(ValidationError, match="Client name is required"):
            Project.create("Smith Residence", "")

    def test_archive(self):
        project = Project.create("Smith Residence", "Alice Smith")
        project.archive()
        assert project.status == ProjectStatus.ARCHIVED

    def test_archive_twice_rejected(self):
        project = Project.create("Smith Residence", "Alice Smith", status="archived")
        with pytest.raises(ValidationError, match="already archived"):
            project.archive()

    def test_invalid_status_rejected(self):
        with pytest.raises(ValidationError, match="Invalid project status"):
            Project.create("Loft", "Mark", status="paused")

    def test_apply_changes(self):
        project = Project.create("Loft", "Mark")
        project.apply_changes({"name": "Downtown Loft", "status": "archived"})
        assert project.name == "Downtown Loft"
        assert project.status == ProjectStatus.ARCHIVED


class TestPullStatus:

    def test_every_status_is_classified(self):
        assert {s: s.holds_stock for s in PullStatus} == {
            PullStatus.PULLED: True,
            PullStatus.INSTALLED: True,
            PullStatus.RETURNED: False,
        }

    def test_parse_is_case_insensitive(self):
        assert PullStatus.parse("Returned") is PullStatus.RETURNED

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError, match="Invalid status 'lost'") as info:
            PullStatus.parse("lost")
        assert info.value.field == "status"


class TestProjectItem:

    def test_defaults(self):
        line = ProjectItem.create(project_id=1, item_id=2)
        assert line.quantity.value == 1
        assert line.status is PullStatus.PULLED
        assert line.notes is None

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            ProjectItem.create(project_id=1, item_id=2, quantity=0)

    def test_committed_quantity(self):
        line = ProjectItem.create(project_id=1, item_id=2, quantity=3)
        assert line.committed_quantity == 3
        line.status = PullStatus.RETURNED
        assert line.committed_quantity == 0
