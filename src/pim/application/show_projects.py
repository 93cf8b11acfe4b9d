"""Application service: project queries."""

from __future__ import annotations

from pim.application.dto import (
    ProjectDetailDTO,
    ProjectDTO,
    project_item_to_dto,
    project_to_dto,
)
from pim.domain.exceptions import EntityNotFoundError
from pim.domain.repository.unit_of_work import UnitOfWork


class ListProjectsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ProjectDTO]:
        with self._uow as uow:
            return [project_to_dto(p) for p in uow.projects.list_all()]


class ShowProjectHandler:
    """Return a project together with its pull list.

    Each line embeds the catalog item it references.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, project_id: int) -> ProjectDetailDTO:
        with self._uow as uow:
            project = uow.projects.get_by_id(project_id)
            if project is None:
                raise EntityNotFoundError(f"Project #{project_id} not found")

            lines = [
                project_item_to_dto(line, uow.items.get_by_id(line.item_id))
                for line in uow.project_items.list_for_project(project_id)
            ]

        return ProjectDetailDTO(
            id=project.id,  # type: ignore[arg-type]
            name=project.name,
            client_name=project.client_name,
            status=project.status.value,
            created_at=project.created_at,
            items=lines,
        )
