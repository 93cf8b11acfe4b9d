"""Abstract repository for the Item aggregate (the master catalog).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pim.domain.model.item import Item


class ItemRepository(ABC):

    @abstractmethod
    def get_by_id(self, item_id: int) -> Item | None:
        """Return a catalog item by its ID, or None if not found."""

    @abstractmethod
    def list_all(self, search: str | None = None) -> list[Item]:
        """Return catalog items, newest first.

        With *search*, only items whose name, category or vendor contain it
        (case-insensitive).
        """

    @abstractmethod
    def save(self, item: Item) -> None:
        """Persist a new or updated item. New items get an ID assigned."""
