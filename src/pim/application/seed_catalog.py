"""Application service: Seed Catalog use case.

Fills an empty store with a small showroom catalog, two projects and a
few pull-list lines so a fresh install has something to look at. The
lines go through the reservation service, so their units are deducted
from stock like any other pull.
"""

from __future__ import annotations

import logging

from pim.domain.model.item import Item
from pim.domain.model.project import Project
from pim.domain.model.project_item import ProjectItem
from pim.domain.model.value_objects import Money
from pim.domain.repository.unit_of_work import UnitOfWork
from pim.domain.service.stock_reservation_service import StockReservationService

logger = logging.getLogger(__name__)

SAMPLE_ITEMS = [
    ("Brass Table Lamp", "Arteriors", "Lighting", "150.00", "285.00", "210.00",
     "Modern brass table lamp with linen shade."),
    ("Velvet Accent Chair", "Four Hands", "Furniture", "450.00", "895.00", "675.00",
     "Navy blue velvet chair with gold legs."),
    ("Wool Area Rug 8x10", "Loloi", "Decor", "320.00", "650.00", "490.00",
     "Hand-tufted wool rug, neutral tones."),
    ("Ceramic Vase Set", "Global Views", "Accessories", "45.00", "95.00", "75.00",
     "Set of 3 white ceramic vases."),
    ("Marble Coffee Table", "Bernhardt", "Furniture", "680.00", "1250.00", "940.00",
     "Carrara marble top with iron base."),
]

SAMPLE_PROJECTS = [
    ("Smith Residence Living Room", "Alice Smith"),
    ("Downtown Loft Renovation", "Mark Johnson"),
]

# (project index, item index, quantity, status, notes)
SAMPLE_LINES = [
    (0, 0, 2, "pulled", "Place on side tables"),
    (0, 1, 1, "installed", None),
    (1, 2, 1, "pulled", None),
]

DEFAULT_STOCK = 5


class SeedCatalogHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, stock: int = DEFAULT_STOCK) -> bool:
        """Seed the store. Returns False (and does nothing) if the catalog
        already has items."""
        with self._uow as uow:
            if uow.items.list_all():
                logger.info("Catalog not empty; skipping seed")
                return False

            items: list[Item] = []
            for name, vendor, category, cost, price, bwd, description in SAMPLE_ITEMS:
                item = Item.create(
                    name=name,
                    vendor=vendor,
                    category=category,
                    cost=Money.of(cost),
                    price=Money.of(price),
                    bwd_price=Money.of(bwd),
                    quantity=stock,
                    description=description,
                )
                uow.items.save(item)
                items.append(item)

            projects: list[Project] = []
            for name, client in SAMPLE_PROJECTS:
                project = Project.create(name=name, client_name=client)
                uow.projects.save(project)
                projects.append(project)

            svc = StockReservationService(uow.items, uow.project_items)
            for p_idx, i_idx, qty, status, notes in SAMPLE_LINES:
                svc.add_line(
                    ProjectItem.create(
                        project_id=projects[p_idx].id,  # type: ignore[arg-type]
                        item_id=items[i_idx].id,  # type: ignore[arg-type]
                        quantity=qty,
                        status=status,
                        notes=notes,
                    )
                )

            uow.commit()

        logger.info(
            "Seeded %d items, %d projects, %d pull-list lines",
            len(SAMPLE_ITEMS), len(SAMPLE_PROJECTS), len(SAMPLE_LINES),
        )
        return True
