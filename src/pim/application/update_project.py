"""Application service: Update / Archive Project use cases."""

from __future__ import annotations

from pim.application.dto import ProjectDTO, project_to_dto
from pim.domain.exceptions import EntityNotFoundError
from pim.domain.repository.unit_of_work import UnitOfWork


class UpdateProjectHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, project_id: int, changes: dict) -> ProjectDTO:
        """Apply a partial edit of name, client name and/or status."""
        with self._uow as uow:
            project = uow.projects.get_by_id(project_id)
            if project is None:
                raise EntityNotFoundError(f"Project #{project_id} not found")
            project.apply_changes(changes)
            uow.projects.save(project)
            uow.commit()
        return project_to_dto(project)


class ArchiveProjectHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, project_id: int) -> ProjectDTO:
        with self._uow as uow:
            project = uow.projects.get_by_id(project_id)
            if project is None:
                raise EntityNotFoundError(f"Project #{project_id} not found")
            project.archive()
            uow.projects.save(project)
            uow.commit()
        return project_to_dto(project)
