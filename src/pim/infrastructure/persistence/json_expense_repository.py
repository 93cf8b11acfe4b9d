"""JSON-document-backed implementation of ExpenseRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pim.domain.model.expense import Expense
from pim.domain.model.value_objects import Money, Quantity
from pim.domain.repository.expense_repository import ExpenseRepository


class JsonExpenseRepository(ExpenseRepository):

    def __init__(self, records: list[dict]) -> None:
        self._records = records

    def get_by_id(self, expense_id: int) -> Expense | None:
        for raw in self._records:
            if raw["id"] == expense_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Expense]:
        expenses = [self._to_domain(raw) for raw in self._records]
        return sorted(expenses, key=lambda e: (e.purchase_date, e.id), reverse=True)

    def save(self, expense: Expense) -> None:
        if expense.id is None:
            expense.id = max((r["id"] for r in self._records), default=0) + 1

        for i, raw in enumerate(self._records):
            if raw["id"] == expense.id:
                self._records[i] = self._to_raw(expense)
                return
        self._records.append(self._to_raw(expense))

    def delete(self, expense_id: int) -> None:
        self._records[:] = [r for r in self._records if r["id"] != expense_id]

    @staticmethod
    def _to_raw(expense: Expense) -> dict:
        return {
            "id": expense.id,
            "description": expense.description,
            "vendor": expense.vendor,
            "category": expense.category,
            "quantity": expense.quantity.value,
            "unit_cost": expense.unit_cost.to_string(),
            "total_cost": expense.total_cost.to_string(),
            "purchase_date": expense.purchase_date.isoformat(),
            "invoice_number": expense.invoice_number,
            "notes": expense.notes,
            "item_id": expense.item_id,
            "project_id": expense.project_id,
            "created_at": expense.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Expense:
        return Expense(
            id=raw["id"],
            description=raw["description"],
            vendor=raw["vendor"],
            category=raw["category"],
            quantity=Quantity(raw.get("quantity", 1)),
            unit_cost=Money(Decimal(raw["unit_cost"])),
            total_cost=Money(Decimal(raw["total_cost"])),
            purchase_date=datetime.fromisoformat(raw["purchase_date"]),
            invoice_number=raw.get("invoice_number"),
            notes=raw.get("notes"),
            item_id=raw.get("item_id"),
            project_id=raw.get("project_id"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
