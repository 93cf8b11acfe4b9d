"""Application service: Add Item use case."""

from __future__ import annotations

from pim.application.dto import ItemDTO, item_to_dto
from pim.domain.model.item import Item
from pim.domain.model.value_objects import Money
from pim.domain.repository.unit_of_work import UnitOfWork


class AddItemHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        name: str,
        vendor: str,
        category: str,
        cost: str,
        price: str,
        bwd_price: str | None = None,
        quantity: int = 0,
        description: str | None = None,
        image_url: str | None = None,
    ) -> ItemDTO:
        """Add a new item to the catalog."""
        item = Item.create(
            name=name,
            vendor=vendor,
            category=category,
            cost=Money.of(cost, "cost"),
            price=Money.of(price, "price"),
            bwd_price=Money.of(bwd_price, "bwd_price") if bwd_price is not None else None,
            quantity=quantity,
            description=description,
            image_url=image_url,
        )
        with self._uow as uow:
            uow.items.save(item)
            uow.commit()
        return item_to_dto(item)
