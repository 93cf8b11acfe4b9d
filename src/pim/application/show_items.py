"""Application service: catalog queries."""

from __future__ import annotations

from pim.application.dto import ItemAssignmentDTO, ItemDTO, item_to_dto
from pim.domain.exceptions import EntityNotFoundError
from pim.domain.repository.unit_of_work import UnitOfWork


class ListItemsHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, search: str | None = None) -> list[ItemDTO]:
        with self._uow as uow:
            return [item_to_dto(i) for i in uow.items.list_all(search or None)]


class ShowItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, item_id: int) -> ItemDTO:
        with self._uow as uow:
            item = uow.items.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Item #{item_id} not found")
        return item_to_dto(item)


class ShowItemAssignmentsHandler:
    """Where is this item right now?

    Lists the pull-list lines that still hold units of the item (pulled or
    installed), with the name of the project each belongs to.
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, item_id: int) -> list[ItemAssignmentDTO]:
        assignments: list[ItemAssignmentDTO] = []
        with self._uow as uow:
            for line in uow.project_items.list_for_item(item_id):
                if not line.status.holds_stock:
                    continue
                project = uow.projects.get_by_id(line.project_id)
                assignments.append(
                    ItemAssignmentDTO(
                        project_id=line.project_id,
                        project_name=project.name if project else f"#{line.project_id}",
                        quantity=line.quantity.value,
                        status=line.status.value,
                        added_at=line.added_at,
                    )
                )
        return assignments
