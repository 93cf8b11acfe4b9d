"""Abstract repository for expense ledger entries."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pim.domain.model.expense import Expense


class ExpenseRepository(ABC):

    @abstractmethod
    def get_by_id(self, expense_id: int) -> Expense | None:
        """Return an expense by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Expense]:
        """Return every expense, most recent purchase first."""

    @abstractmethod
    def save(self, expense: Expense) -> None:
        """Persist a new or updated expense. New entries get an ID assigned."""

    @abstractmethod
    def delete(self, expense_id: int) -> None:
        """Remove an expense. Missing IDs are ignored."""
