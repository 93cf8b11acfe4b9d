"""Application service: Update Item use case.

A direct catalog edit. Setting ``quantity`` here overrides the on-hand
stock (e.g. after a physical count); it does not touch any pull list.
"""

from __future__ import annotations

from pim.application.dto import ItemDTO, item_to_dto
from pim.domain.exceptions import EntityNotFoundError
from pim.domain.repository.unit_of_work import UnitOfWork


class UpdateItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, item_id: int, changes: dict) -> ItemDTO:
        with self._uow as uow:
            item = uow.items.get_by_id(item_id)
            if item is None:
                raise EntityNotFoundError(f"Item #{item_id} not found")
            item.apply_changes(changes)
            uow.items.save(item)
            uow.commit()
        return item_to_dto(item)
