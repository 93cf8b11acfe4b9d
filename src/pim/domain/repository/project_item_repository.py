"""Abstract repository for pull-list lines (ProjectItem)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pim.domain.model.project_item import ProjectItem


class ProjectItemRepository(ABC):

    @abstractmethod
    def get_by_id(self, line_id: int) -> ProjectItem | None:
        """Return a pull-list line by its ID, or None if not found."""

    @abstractmethod
    def list_for_project(self, project_id: int) -> list[ProjectItem]:
        """Return a project's pull list in insertion order."""

    @abstractmethod
    def list_for_item(self, item_id: int) -> list[ProjectItem]:
        """Return every line, across projects, that references an item."""

    @abstractmethod
    def save(self, line: ProjectItem) -> None:
        """Persist a new or updated line. New lines get an ID assigned."""

    @abstractmethod
    def delete(self, line_id: int) -> None:
        """Remove a line. Missing IDs are ignored."""
