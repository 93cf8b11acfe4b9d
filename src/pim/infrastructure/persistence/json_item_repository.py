"""JSON-document-backed implementation of ItemRepository."""

from __future__ import annotations

from decimal import Decimal

from pim.domain.model.item import Item
from pim.domain.model.value_objects import Money
from pim.domain.repository.item_repository import ItemRepository


class JsonItemRepository(ItemRepository):
    """Reads and writes the ``items`` array of an open JSON document."""

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    # --- ItemRepository interface ---------------------------------------------

    def get_by_id(self, item_id: int) -> Item | None:
        for raw in self._records:
            if raw["id"] == item_id:
                return self._to_domain(raw)
        return None

    def list_all(self, search: str | None = None) -> list[Item]:
        items = [self._to_domain(raw) for raw in self._records]
        if search:
            items = [i for i in items if i.matches(search)]
        return sorted(items, key=lambda i: i.id, reverse=True)

    def save(self, item: Item) -> None:
        if item.id is None:
            item.id = max((r["id"] for r in self._records), default=0) + 1

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(self._records):
            if raw["id"] == item.id:
                self._records[i] = self._to_raw(item)
                return
        self._records.append(self._to_raw(item))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: Item) -> dict:
        return {
            "id": item.id,
            "name": item.name,
            "vendor": item.vendor,
            "category": item.category,
            "cost": item.cost.to_string(),
            "price": item.price.to_string(),
            "bwd_price": item.bwd_price.to_string(),
            "quantity": item.quantity,
            "description": item.description,
            "image_url": item.image_url,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Item:
        return Item(
            id=raw["id"],
            name=raw["name"],
            vendor=raw["vendor"],
            category=raw["category"],
            cost=Money(Decimal(raw["cost"])),
            price=Money(Decimal(raw["price"])),
            bwd_price=Money(Decimal(raw.get("bwd_price", "0.00"))),
            quantity=raw.get("quantity", 0),
            description=raw.get("description"),
            image_url=raw.get("image_url"),
        )
