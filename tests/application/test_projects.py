"""Integration tests for project use cases, including cascade delete."""

import pytest

from pim.application.add_project_item import AddProjectItemHandler
from pim.application.create_project import CreateProjectHandler
from pim.application.delete_project import DeleteProjectHandler
from pim.application.show_projects import ListProjectsHandler, ShowProjectHandler
from pim.application.update_project import ArchiveProjectHandler, UpdateProjectHandler
from pim.application.update_project_item import UpdateProjectItemHandler
from pim.domain.exceptions import EntityNotFoundError, ValidationError
from pim.domain.model.item import Item
from pim.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork


def _setup(stock: int = 10) -> FakeUnitOfWork:
    return FakeUnitOfWork(items=[
        Item(id=1, name="Wool Area Rug 8x10", vendor="Loloi", category="Decor",
             cost=Money.of("320.00"), price=Money.of("650.00"), quantity=stock),
    ])


def _stock(uow: FakeUnitOfWork) -> int:
    return uow.items.get_by_id(1).quantity


class TestCreateAndShowProject:

    def test_create_defaults_to_active(self):
        uow = _setup()
        dto = CreateProjectHandler(uow).handle("Smith Residence", "Alice Smith")
        assert dto.id == 1
        assert dto.status == "active"

    def test_create_requires_name(self):
        with pytest.raises(ValidationError, match="Name is required"):
            CreateProjectHandler(_setup()).handle("", "Alice Smith")

    def test_show_embeds_items(self):
        uow = _setup()
        project = CreateProjectHandler(uow).handle("Smith Residence", "Alice Smith")
        AddProjectItemHandler(uow).handle(project.id, item_id=1, quantity=2, notes="Hallway")

        detail = ShowProjectHandler(uow).handle(project.id)

        assert len(detail.items) == 1
        assert detail.items[0].item.name == "Wool Area Rug 8x10"
        assert detail.items[0].item.quantity == 8
        assert detail.items[0].notes == "Hallway"

    def test_show_missing_project(self):
        with pytest.raises(EntityNotFoundError):
            ShowProjectHandler(_setup()).handle(5)

    def test_list(self):
        uow = _setup()
        CreateProjectHandler(uow).handle("A", "Client A")
        CreateProjectHandler(uow).handle("B", "Client B")
        assert {p.name for p in ListProjectsHandler(uow).handle()} == {"A", "B"}


class TestUpdateProject:

    def test_partial_update(self):
        uow = _setup()
        project = CreateProjectHandler(uow).handle("Loft", "Mark")
        dto = UpdateProjectHandler(uow).handle(project.id, {"client_name": "Mark Johnson"})
        assert dto.client_name == "Mark Johnson"
        assert dto.name == "Loft"

    def test_archive(self):
        uow = _setup()
        project = CreateProjectHandler(uow).handle("Loft", "Mark")
        assert ArchiveProjectHandler(uow).handle(project.id).status == "archived"

    def test_update_missing_project(self):
        with pytest.raises(EntityNotFoundError):
            UpdateProjectHandler(_setup()).handle(3, {"name": "X"})


class TestDeleteProject:

    def _project_with_lines(self):
        uow = _setup(stock=10)
        project = CreateProjectHandler(uow).handle("Loft", "Mark")
        add = AddProjectItemHandler(uow)
        add.handle(project.id, item_id=1, quantity=2)
        add.handle(project.id, item_id=1, quantity=3, status="installed")
        returned = add.handle(project.id, item_id=1, quantity=1)
        UpdateProjectItemHandler(uow).handle(returned.id, {"status": "returned"})
        assert _stock(uow) == 5
        return uow, project

    def test_cascade_deletes_lines_without_restoring_stock(self):
        uow, project = self._project_with_lines()

        DeleteProjectHandler(uow).handle(project.id)

        assert uow.projects.get_by_id(project.id) is None
        assert uow.project_items.list_for_project(project.id) == []
        assert _stock(uow) == 5

    def test_release_stock_option_restores_committed_units(self):
        uow, project = self._project_with_lines()

        DeleteProjectHandler(uow).handle(project.id, release_stock=True)

        assert uow.project_items.list_for_project(project.id) == []
        assert _stock(uow) == 10

    def test_other_projects_untouched(self):
        uow, project = self._project_with_lines()
        other = CreateProjectHandler(uow).handle("Smith", "Alice")
        AddProjectItemHandler(uow).handle(other.id, item_id=1, quantity=1)

        DeleteProjectHandler(uow).handle(project.id)

        assert len(uow.project_items.list_for_project(other.id)) == 1
