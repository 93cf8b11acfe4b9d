"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy

from pim.domain.model.expense import Expense
from pim.domain.model.item import Item
from pim.domain.model.project import Project
from pim.domain.model.project_item import ProjectItem
from pim.domain.repository.expense_repository import ExpenseRepository
from pim.domain.repository.item_repository import ItemRepository
from pim.domain.repository.project_item_repository import ProjectItemRepository
from pim.domain.repository.project_repository import ProjectRepository
from pim.domain.repository.unit_of_work import UnitOfWork


class _FakeStore:

    def __init__(self, entities=None) -> None:
        self._store: dict = {}
        self._next_id = 1
        for entity in entities or []:
            self.save(entity)

    def get_by_id(self, entity_id):
        return self._store.get(entity_id)

    def save(self, entity) -> None:
        if entity.id is None:
            entity.id = self._next_id
        self._next_id = max(self._next_id, entity.id + 1)
        self._store[entity.id] = entity

    def delete(self, entity_id) -> None:
        self._store.pop(entity_id, None)


class FakeItemRepository(_FakeStore, ItemRepository):

    def list_all(self, search: str | None = None) -> list[Item]:
        items = sorted(self._store.values(), key=lambda i: i.id, reverse=True)
        if search:
            items = [i for i in items if i.matches(search)]
        return items


class FakeProjectRepository(_FakeStore, ProjectRepository):

    def list_all(self) -> list[Project]:
        return sorted(
            self._store.values(), key=lambda p: (p.created_at, p.id), reverse=True
        )


class FakeProjectItemRepository(_FakeStore, ProjectItemRepository):

    def list_for_project(self, project_id: int) -> list[ProjectItem]:
        return [l for l in self._store.values() if l.project_id == project_id]

    def list_for_item(self, item_id: int) -> list[ProjectItem]:
        return [l for l in self._store.values() if l.item_id == item_id]


class FakeExpenseRepository(_FakeStore, ExpenseRepository):

    def list_all(self) -> list[Expense]:
        return sorted(
            self._store.values(), key=lambda e: (e.purchase_date, e.id), reverse=True
        )


class FakeUnitOfWork(UnitOfWork):
    """Transactional in-memory unit of work.

    Entering snapshots every store; leaving without ``commit()`` puts the
    snapshot back, so tests can observe rollbacks.
    """

    def __init__(
        self,
        items: list[Item] | None = None,
        projects: list[Project] | None = None,
        project_items: list[ProjectItem] | None = None,
        expenses: list[Expense] | None = None,
    ) -> None:
        self.items = FakeItemRepository(items)
        self.projects = FakeProjectRepository(projects)
        self.project_items = FakeProjectItemRepository(project_items)
        self.expenses = FakeExpenseRepository(expenses)
        self.commits = 0
        self._snapshot: dict | None = None

    def _repos(self) -> dict:
        return {
            "items": self.items,
            "projects": self.projects,
            "project_items": self.project_items,
            "expenses": self.expenses,
        }

    def _take_snapshot(self) -> dict:
        return {
            name: (copy.deepcopy(repo._store), repo._next_id)
            for name, repo in self._repos().items()
        }

    def _begin(self) -> None:
        self._snapshot = self._take_snapshot()

    def commit(self) -> None:
        self._snapshot = self._take_snapshot()
        self.commits += 1

    def rollback(self) -> None:
        if self._snapshot is None:
            return
        for name, repo in self._repos().items():
            store, next_id = self._snapshot[name]
            repo._store = copy.deepcopy(store)
            repo._next_id = next_id

    def _end(self) -> None:
        self._snapshot = None
