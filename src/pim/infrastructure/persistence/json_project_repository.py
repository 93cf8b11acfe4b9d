"""JSON-document-backed implementation of ProjectRepository."""

from __future__ import annotations

from datetime import datetime

from pim.domain.model.project import Project, ProjectStatus
from pim.domain.repository.project_repository import ProjectRepository


class JsonProjectRepository(ProjectRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- ProjectRepository interface ------------------------------------------

    def get_by_id(self, project_id: int) -> Project | None:
        for raw in self._records:
            if raw["id"] == project_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Project]:
        projects = [self._to_domain(raw) for raw in self._records]
        return sorted(projects, key=lambda p: (p.created_at, p.id), reverse=True)

    def save(self, project: Project) -> None:
        if project.id is None:
            project.id = max((r["id"] for r in self._records), default=0) + 1

        for i, raw in enumerate(self._records):
            if raw["id"] == project.id:
                self._records[i] = self._to_raw(project)
                return
        self._records.append(self._to_raw(project))

    def delete(self, project_id: int) -> None:
        self._records[:] = [r for r in self._records if r["id"] != project_id]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(project: Project) -> dict:
        return {
            "id": project.id,
            "name": project.name,
            "client_name": project.client_name,
            "status": project.status.value,
            "created_at": project.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Project:
        return Project(
            id=raw["id"],
            name=raw["name"],
            client_name=raw["client_name"],
            status=ProjectStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
