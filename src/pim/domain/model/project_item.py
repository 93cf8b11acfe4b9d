"""ProjectItem — a single line on a project's pull list.

A line commits ``quantity`` units of one catalog item to one project.
Its ``status`` decides whether those units are currently held out of the
warehouse (``pulled``/``installed``) or have come back (``returned``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pim.domain.exceptions import ValidationError
from pim.domain.model.value_objects import Quantity


class PullStatus(Enum):
    PULLED = "pulled"
    INSTALLED = "installed"
    RETURNED = "returned"

    @property
    def holds_stock(self) -> bool:
        """True while the line's units are out of the warehouse."""
        return _HOLDS_STOCK[self]

    @staticmethod
    def parse(raw: str | PullStatus) -> PullStatus:
        if isinstance(raw, PullStatus):
            return raw
        try:
            return PullStatus(str(raw).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in PullStatus)
            raise ValidationError(
                f"Invalid status '{raw}' (expected one of: {allowed})", "status"
            ) from exc


_HOLDS_STOCK: dict[PullStatus, bool] = {
    PullStatus.PULLED: True,
    PullStatus.INSTALLED: True,
    PullStatus.RETURNED: False,
}

# Line fields that can never change after creation.
IMMUTABLE_FIELDS = frozenset({"project_id", "item_id"})
MUTABLE_FIELDS = frozenset({"quantity", "status", "notes"})


@dataclass
class ProjectItem:
    """Pull-list line owned by a Project, referencing (not owning) an Item."""

    id: int | None
    project_id: int
    item_id: int
    quantity: Quantity
    status: PullStatus = PullStatus.PULLED
    notes: str | None = None
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        project_id: int,
        item_id: int,
        quantity: int | None = None,
        status: str | PullStatus | None = None,
        notes: str | None = None,
    ) -> ProjectItem:
        """Build a new line. ``quantity`` defaults to 1, ``status`` to pulled."""
        if item_id is None:
            raise ValidationError("Item ID is required", "item_id")
        return ProjectItem(
            id=None,
            project_id=project_id,
            item_id=item_id,
            quantity=Quantity(1 if quantity is None else quantity),
            status=PullStatus.PULLED if status is None else PullStatus.parse(status),
            notes=notes,
        )

    @property
    def committed_quantity(self) -> int:
        """Units this line currently keeps out of the warehouse."""
        return self.quantity.value if self.status.holds_stock else 0
