"""Item aggregate — a catalog entry and its on-hand stock.

``quantity`` is the number of units physically in the warehouse. It is
changed directly by catalog edits and, as a side effect, by the stock
reservation engine whenever a pull-list line is added, changed or removed.
"""

from __future__ import annotations

from dataclasses import dataclass

from pim.domain.exceptions import ValidationError
from pim.domain.model.value_objects import Money

# Fields a catalog edit may change.
MUTABLE_FIELDS = frozenset({
    "name",
    "vendor",
    "category",
    "description",
    "image_url",
    "cost",
    "price",
    "bwd_price",
    "quantity",
})


@dataclass
class Item:
    """Aggregate root for the master catalog.

    Invariant: ``quantity`` is never negative.
    """

    id: int | None
    name: str
    vendor: str
    category: str
    cost: Money
    price: Money  # client price
    bwd_price: Money = Money.zero()  # internal price
    quantity: int = 0
    description: str | None = None
    image_url: str | None = None

    # --- Factory (used for NEW items only) ------------------------------------

    @staticmethod
    def create(
        name: str,
        vendor: str,
        category: str,
        cost: Money,
        price: Money,
        bwd_price: Money | None = None,
        quantity: int = 0,
        description: str | None = None,
        image_url: str | None = None,
    ) -> Item:
        item = Item(
            id=None,
            name=_required(name, "name"),
            vendor=_required(vendor, "vendor"),
            category=_required(category, "category"),
            cost=cost,
            price=price,
            bwd_price=bwd_price if bwd_price is not None else Money.zero(),
            quantity=_stock_level(quantity),
            description=description,
            image_url=image_url,
        )
        return item

    # --- Catalog edits --------------------------------------------------------

    def apply_changes(self, changes: dict) -> None:
        """Apply a partial catalog edit. Unknown fields are rejected."""
        for key in changes:
            if key not in MUTABLE_FIELDS:
                raise ValidationError(f"Unknown item field '{key}'", key)

        for key, value in changes.items():
            if key in ("name", "vendor", "category"):
                value = _required(value, key)
            elif key in ("cost", "price", "bwd_price"):
                value = value if isinstance(value, Money) else Money.of(value, key)
            elif key == "quantity":
                value = _stock_level(value)
            setattr(self, key, value)

    # --- Stock movements ------------------------------------------------------

    def adjust_stock(self, delta: int) -> int:
        """Move stock by *delta*, clamping the result at zero.

        Returns the new quantity.
        """
        self.quantity = max(0, self.quantity + delta)
        return self.quantity

    # --- Queries --------------------------------------------------------------

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match over name, category and vendor."""
        needle = search.lower()
        return any(
            needle in field.lower()
            for field in (self.name, self.category, self.vendor)
        )


def _required(value: str | None, field: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"Item {field} is required", field)
    return str(value).strip()


def _stock_level(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Item quantity must be an integer", "quantity")
    if value < 0:
        raise ValidationError("Item quantity cannot be negative", "quantity")
    return value
