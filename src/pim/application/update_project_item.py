"""Application service: Update Project Item use case.

Accepts any subset of ``quantity``, ``status`` and ``notes``. The
project and item a line belongs to are fixed at creation; attempts to
change them are rejected.
"""

from __future__ import annotations

from pim.application.dto import ProjectItemDTO, project_item_to_dto
from pim.domain.exceptions import EntityNotFoundError
from pim.domain.repository.unit_of_work import UnitOfWork
from pim.domain.service.stock_reservation_service import StockReservationService


class UpdateProjectItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        line_id: int,
        changes: dict,
        project_id: int | None = None,
    ) -> ProjectItemDTO:
        """Update a pull-list line.

        When *project_id* is given the line must belong to that project,
        otherwise it is reported as not found.
        """
        with self._uow as uow:
            if project_id is not None:
                existing = uow.project_items.get_by_id(line_id)
                if existing is not None and existing.project_id != project_id:
                    raise EntityNotFoundError(
                        f"Project item #{line_id} not found in project #{project_id}"
                    )

            svc = StockReservationService(uow.items, uow.project_items)
            line = svc.update_line(line_id, changes)
            uow.commit()

        return project_item_to_dto(line)
