"""Expense ledger entries and their derived summary.

The ledger is independent of stock: recording an expense never changes
an Item's quantity, even when the expense is linked to one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal

from pim.domain.exceptions import ValidationError
from pim.domain.model.value_objects import CENTS, Money, Quantity

MUTABLE_FIELDS = frozenset({
    "description",
    "vendor",
    "category",
    "quantity",
    "unit_cost",
    "total_cost",
    "purchase_date",
    "invoice_number",
    "notes",
    "item_id",
    "project_id",
})


@dataclass
class Expense:
    id: int | None
    description: str
    vendor: str
    category: str
    quantity: Quantity
    unit_cost: Money
    total_cost: Money
    purchase_date: datetime
    invoice_number: str | None = None
    notes: str | None = None
    item_id: int | None = None
    project_id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def record(
        description: str,
        vendor: str,
        category: str,
        unit_cost: Money,
        purchase_date: datetime,
        quantity: int = 1,
        total_cost: Money | None = None,
        invoice_number: str | None = None,
        notes: str | None = None,
        item_id: int | None = None,
        project_id: int | None = None,
    ) -> Expense:
        """Create a new ledger entry.

        When ``total_cost`` is omitted it is ``unit_cost * quantity``.
        """
        qty = Quantity(quantity)
        if not isinstance(purchase_date, datetime):
            raise ValidationError("Purchase date is required", "purchase_date")
        return Expense(
            id=None,
            description=_required(description, "description"),
            vendor=_required(vendor, "vendor"),
            category=_required(category, "category"),
            quantity=qty,
            unit_cost=unit_cost,
            total_cost=total_cost if total_cost is not None else _line_total(unit_cost, qty),
            purchase_date=as_utc(purchase_date),
            invoice_number=invoice_number,
            notes=notes,
            item_id=item_id,
            project_id=project_id,
        )

    def apply_changes(self, changes: dict) -> None:
        for key in changes:
            if key not in MUTABLE_FIELDS:
                raise ValidationError(f"Unknown expense field '{key}'", key)

        for key, value in changes.items():
            if key in ("description", "vendor", "category"):
                value = _required(value, key)
            elif key == "quantity":
                value = Quantity(value)
            elif key in ("unit_cost", "total_cost"):
                value = value if isinstance(value, Money) else Money.of(value, key)
            elif key == "purchase_date":
                if not isinstance(value, datetime):
                    raise ValidationError("Purchase date must be a datetime", key)
                value = as_utc(value)
            setattr(self, key, value)


@dataclass(frozen=True)
class ExpenseSummary:
    """Ledger totals. The spend is a plain Decimal since the sum of many
    entries may exceed what a single Money amount holds."""

    total_spend: Decimal
    expense_count: int
    avg_unit_cost: Money

    @staticmethod
    def of(expenses: list[Expense]) -> ExpenseSummary:
        total = sum((e.total_cost.amount for e in expenses), Decimal("0"))
        return ExpenseSummary(
            total_spend=total.quantize(CENTS),
            expense_count=len(expenses),
            avg_unit_cost=Money.mean([e.unit_cost for e in expenses]),
        )


def _line_total(unit_cost: Money, quantity: Quantity) -> Money:
    try:
        return unit_cost * quantity.value
    except ValidationError as exc:
        raise ValidationError(str(exc), "total_cost") from exc


def _required(value: str | None, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"Expense {field_name} is required", field_name)
    return str(value).strip()


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so ledger dates stay comparable."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
