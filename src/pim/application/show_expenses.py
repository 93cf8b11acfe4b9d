"""Application service: expense ledger queries."""

from __future__ import annotations

from pim.application.dto import (
    ExpenseDTO,
    ExpenseSummaryDTO,
    expense_to_dto,
    summary_to_dto,
)
from pim.domain.model.expense import ExpenseSummary
from pim.domain.repository.unit_of_work import UnitOfWork


class ListExpensesHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[ExpenseDTO]:
        with self._uow as uow:
            return [expense_to_dto(e) for e in uow.expenses.list_all()]


class ExpenseSummaryHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> ExpenseSummaryDTO:
        with self._uow as uow:
            summary = ExpenseSummary.of(uow.expenses.list_all())
        return summary_to_dto(summary)
