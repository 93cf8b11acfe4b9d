"""Integration tests for the expense ledger use cases."""

from datetime import datetime, timezone

import pytest

from pim.application.record_expense import (
    DeleteExpenseHandler,
    RecordExpenseHandler,
    UpdateExpenseHandler,
)
from pim.application.show_expenses import ExpenseSummaryHandler, ListExpensesHandler
from pim.domain.exceptions import EntityNotFoundError
from pim.domain.model.item import Item
from pim.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork


def _record(uow, unit_cost="45.00", quantity=1, day=1, **extra):
    return RecordExpenseHandler(uow).handle(
        description="Ceramic Vase Set",
        vendor="Global Views",
        category="Accessories",
        unit_cost=unit_cost,
        quantity=quantity,
        purchase_date=datetime(2026, 2, day, tzinfo=timezone.utc),
        **extra,
    )


class TestRecordExpense:

    def test_total_computed(self):
        dto = _record(FakeUnitOfWork(), unit_cost="45.00", quantity=3)
        assert dto.total_cost == "135.00"
        assert dto.unit_cost == "45.00"

    def test_linked_item_stock_untouched(self):
        uow = FakeUnitOfWork(items=[
            Item(id=1, name="Vases", vendor="Global Views", category="Accessories",
                 cost=Money.of("45"), price=Money.of("95"), quantity=4),
        ])
        _record(uow, quantity=10, item_id=1)
        assert uow.items.get_by_id(1).quantity == 4

    def test_list_newest_purchase_first(self):
        uow = FakeUnitOfWork()
        _record(uow, day=1)
        _record(uow, day=9)
        dates = [e.purchase_date.day for e in ListExpensesHandler(uow).handle()]
        assert dates == [9, 1]


class TestUpdateAndDelete:

    def test_update(self):
        uow = FakeUnitOfWork()
        dto = _record(uow)
        updated = UpdateExpenseHandler(uow).handle(dto.id, {"invoice_number": "INV-7"})
        assert updated.invoice_number == "INV-7"

    def test_update_missing(self):
        with pytest.raises(EntityNotFoundError, match="Expense #5 not found"):
            UpdateExpenseHandler(FakeUnitOfWork()).handle(5, {"notes": "x"})

    def test_delete(self):
        uow = FakeUnitOfWork()
        dto = _record(uow)
        DeleteExpenseHandler(uow).handle(dto.id)
        assert ListExpensesHandler(uow).handle() == []

    def test_delete_missing(self):
        with pytest.raises(EntityNotFoundError):
            DeleteExpenseHandler(FakeUnitOfWork()).handle(5)


class TestSummary:

    def test_summary(self):
        uow = FakeUnitOfWork()
        _record(uow, unit_cost="45.00", quantity=3)
        _record(uow, unit_cost="150.00", quantity=2)

        summary = ExpenseSummaryHandler(uow).handle()

        assert summary.total_spend == "435.00"
        assert summary.expense_count == 2
        assert summary.avg_unit_cost == "97.50"

    def test_empty(self):
        summary = ExpenseSummaryHandler(FakeUnitOfWork()).handle()
        assert (summary.total_spend, summary.expense_count, summary.avg_unit_cost) == (
            "0.00", 0, "0.00",
        )
