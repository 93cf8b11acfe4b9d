"""Application service: Create Project use case."""

from __future__ import annotations

from pim.application.dto import ProjectDTO, project_to_dto
from pim.domain.model.project import Project, ProjectStatus
from pim.domain.repository.unit_of_work import UnitOfWork


class CreateProjectHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        client_name: str,
        status: str | None = None,
    ) -> ProjectDTO:
        project = Project.create(
            name=name,
            client_name=client_name,
            status=status or ProjectStatus.ACTIVE,
        )
        with self._uow as uow:
            uow.projects.save(project)
            uow.commit()
        return project_to_dto(project)
