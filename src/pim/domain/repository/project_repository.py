"""Abstract repository for the Project aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pim.domain.model.project import Project


class ProjectRepository(ABC):

    @abstractmethod
    def get_by_id(self, project_id: int) -> Project | None:
        """Return a project by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Project]:
        """Return every project, newest first."""

    @abstractmethod
    def save(self, project: Project) -> None:
        """Persist a new or updated project. New projects get an ID assigned."""

    @abstractmethod
    def delete(self, project_id: int) -> None:
        """Remove a project record. Missing IDs are ignored."""
