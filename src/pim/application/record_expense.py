"""Application services: expense ledger commands.

The ledger never touches catalog stock, even for expenses linked to an
item or a project.
"""

from __future__ import annotations

from datetime import datetime

from pim.application.dto import ExpenseDTO, expense_to_dto
from pim.domain.exceptions import EntityNotFoundError
from pim.domain.model.expense import Expense
from pim.domain.model.value_objects import Money
from pim.domain.repository.unit_of_work import UnitOfWork


class RecordExpenseHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        description: str,
        vendor: str,
        category: str,
        unit_cost: str,
        purchase_date: datetime,
        quantity: int = 1,
        total_cost: str | None = None,
        invoice_number: str | None = None,
        notes: str | None = None,
        item_id: int | None = None,
        project_id: int | None = None,
    ) -> ExpenseDTO:
        expense = Expense.record(
            description=description,
            vendor=vendor,
            category=category,
            unit_cost=Money.of(unit_cost, "unit_cost"),
            purchase_date=purchase_date,
            quantity=quantity,
            total_cost=Money.of(total_cost, "total_cost") if total_cost is not None else None,
            invoice_number=invoice_number,
            notes=notes,
            item_id=item_id,
            project_id=project_id,
        )
        with self._uow as uow:
            uow.expenses.save(expense)
            uow.commit()
        return expense_to_dto(expense)


class UpdateExpenseHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, expense_id: int, changes: dict) -> ExpenseDTO:
        with self._uow as uow:
            expense = uow.expenses.get_by_id(expense_id)
            if expense is None:
                raise EntityNotFoundError(f"Expense #{expense_id} not found")
            expense.apply_changes(changes)
            uow.expenses.save(expense)
            uow.commit()
        return expense_to_dto(expense)


class DeleteExpenseHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, expense_id: int) -> None:
        with self._uow as uow:
            if uow.expenses.get_by_id(expense_id) is None:
                raise EntityNotFoundError(f"Expense #{expense_id} not found")
            uow.expenses.delete(expense_id)
            uow.commit()
