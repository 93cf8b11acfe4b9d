"""Application service: Add Project Item use case.

Puts a catalog item on a project's pull list. The line insert and the
stock deduction are committed together in one unit of work.
"""

from __future__ import annotations

import logging

from pim.application.dto import ProjectItemDTO, project_item_to_dto
from pim.domain.exceptions import EntityNotFoundError
from pim.domain.model.project_item import ProjectItem
from pim.domain.repository.unit_of_work import UnitOfWork
from pim.domain.service.stock_reservation_service import StockReservationService

logger = logging.getLogger(__name__)


class AddProjectItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        project_id: int,
        item_id: int,
        quantity: int | None = None,
        status: str | None = None,
        notes: str | None = None,
    ) -> ProjectItemDTO:
        with self._uow as uow:
            if uow.projects.get_by_id(project_id) is None:
                raise EntityNotFoundError(f"Project #{project_id} not found")

            line = ProjectItem.create(
                project_id=project_id,
                item_id=item_id,
                quantity=quantity,
                status=status,
                notes=notes,
            )
            svc = StockReservationService(uow.items, uow.project_items)
            svc.add_line(line)
            uow.commit()

        logger.info(
            "Added item #%s x%s to project #%s as line #%s",
            item_id, line.quantity, project_id, line.id,
        )
        return project_item_to_dto(line)
