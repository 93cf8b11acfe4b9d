"""Application service: Delete Project use case.

Deleting a project removes its whole pull list. By default the lines are
dropped as-is: units still held by pulled or installed lines are NOT
returned to stock. Pass ``release_stock=True`` to run the per-line
removal rule first, which puts those units back.
"""

from __future__ import annotations

import logging

from pim.domain.repository.unit_of_work import UnitOfWork
from pim.domain.service.stock_reservation_service import StockReservationService

logger = logging.getLogger(__name__)


class DeleteProjectHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, project_id: int, release_stock: bool = False) -> None:
        with self._uow as uow:
            lines = uow.project_items.list_for_project(project_id)

            if release_stock:
                svc = StockReservationService(uow.items, uow.project_items)
                for line in lines:
                    svc.remove_line(line.id)  # type: ignore[arg-type]
            else:
                held = [line for line in lines if line.status.holds_stock]
                if held:
                    logger.warning(
                        "Deleting project #%s drops %d line(s) still holding "
                        "%d unit(s) without restoring stock",
                        project_id,
                        len(held),
                        sum(line.quantity.value for line in held),
                    )
                for line in lines:
                    uow.project_items.delete(line.id)  # type: ignore[arg-type]

            uow.projects.delete(project_id)
            uow.commit()
