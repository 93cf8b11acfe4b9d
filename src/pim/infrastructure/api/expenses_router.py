"""Expense ledger endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from pim.application.record_expense import (
    DeleteExpenseHandler,
    RecordExpenseHandler,
    UpdateExpenseHandler,
)
from pim.application.show_expenses import ExpenseSummaryHandler, ListExpensesHandler
from pim.domain.repository.unit_of_work import UnitOfWork
from pim.infrastructure.api.dependencies import get_uow
from pim.infrastructure.api.schemas import (
    ExpenseCreate,
    ExpenseOut,
    ExpenseSummaryOut,
    ExpenseUpdate,
)

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


@router.get("", response_model=List[ExpenseOut])
def list_expenses(uow: UnitOfWork = Depends(get_uow)):
    return ListExpensesHandler(uow).handle()


@router.get("/summary", response_model=ExpenseSummaryOut)
def expense_summary(uow: UnitOfWork = Depends(get_uow)):
    return ExpenseSummaryHandler(uow).handle()


@router.post("", response_model=ExpenseOut, status_code=status.HTTP_201_CREATED)
def create_expense(body: ExpenseCreate, uow: UnitOfWork = Depends(get_uow)):
    return RecordExpenseHandler(uow).handle(**body.model_dump())


@router.patch("/{expense_id}", response_model=ExpenseOut)
def update_expense(
    expense_id: int, body: ExpenseUpdate, uow: UnitOfWork = Depends(get_uow)
):
    return UpdateExpenseHandler(uow).handle(expense_id, body.changes())


@router.delete("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_expense(expense_id: int, uow: UnitOfWork = Depends(get_uow)):
    DeleteExpenseHandler(uow).handle(expense_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
