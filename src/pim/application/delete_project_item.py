"""Application service: Delete Project Item use case.

Takes a line off a pull list. Units that were still out (pulled or
installed) go back into stock. Deleting a missing line succeeds quietly.
"""

from __future__ import annotations

from pim.domain.repository.unit_of_work import UnitOfWork
from pim.domain.service.stock_reservation_service import StockReservationService


class DeleteProjectItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, line_id: int, project_id: int | None = None) -> None:
        with self._uow as uow:
            if project_id is not None:
                existing = uow.project_items.get_by_id(line_id)
                if existing is not None and existing.project_id != project_id:
                    return

            svc = StockReservationService(uow.items, uow.project_items)
            svc.remove_line(line_id)
            uow.commit()
