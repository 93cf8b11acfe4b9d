"""Abstract unit of work — one transaction over every repository.

A pull-list change writes two aggregates (the line and the catalog item
whose stock it moves). Both writes go through the same unit of work so
they are persisted together on ``commit()`` or not at all. Leaving the
``with`` block without committing discards every staged change.

Implementations must also isolate concurrent units of work from each
other for the whole read-modify-write, so two simultaneous stock
adjustments can never overwrite each other.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pim.domain.repository.expense_repository import ExpenseRepository
from pim.domain.repository.item_repository import ItemRepository
from pim.domain.repository.project_item_repository import ProjectItemRepository
from pim.domain.repository.project_repository import ProjectRepository


class UnitOfWork(ABC):

    items: ItemRepository
    projects: ProjectRepository
    project_items: ProjectItemRepository
    expenses: ExpenseRepository

    def __enter__(self) -> UnitOfWork:
        self._begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.rollback()
        finally:
            self._end()

    @abstractmethod
    def commit(self) -> None:
        """Persist every change staged since the unit of work began."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard changes that have not been committed."""

    @abstractmethod
    def _begin(self) -> None:
        """Acquire isolation and load the repositories."""

    @abstractmethod
    def _end(self) -> None:
        """Release whatever ``_begin`` acquired."""
