"""Domain service: Stock Reservation.

Keeps the catalog's on-hand quantity consistent with the pull lists.
For every Item, at any point in time:

    item.quantity == physical stock - sum(line.quantity for non-returned lines)

(modulo the zero floor: stock is clamped at 0 and never goes negative).

The service mutates one pull-list line and its catalog item per call.
It does not commit anything itself: callers run it inside a unit of work
so the line write and the stock write are persisted together.
"""

from __future__ import annotations

import logging
from enum import Enum

from pim.domain.exceptions import EntityNotFoundError, ValidationError
from pim.domain.model.item import Item
from pim.domain.model.project_item import (
    IMMUTABLE_FIELDS,
    MUTABLE_FIELDS,
    ProjectItem,
    PullStatus,
)
from pim.domain.model.value_objects import Quantity
from pim.domain.repository.item_repository import ItemRepository
from pim.domain.repository.project_item_repository import ProjectItemRepository

logger = logging.getLogger(__name__)


class StatusTransition(Enum):
    """Effect of a status change on the line's committed units."""

    RELEASE = "release"  # units come back into the warehouse
    RECOMMIT = "recommit"  # previously released units go out again
    NONE = "none"


def classify_transition(old: PullStatus, new: PullStatus) -> StatusTransition:
    if old.holds_stock and not new.holds_stock:
        return StatusTransition.RELEASE
    if not old.holds_stock and new.holds_stock:
        return StatusTransition.RECOMMIT
    return StatusTransition.NONE


class StockReservationService:

    def __init__(
        self,
        item_repo: ItemRepository,
        line_repo: ProjectItemRepository,
    ) -> None:
        self._item_repo = item_repo
        self._line_repo = line_repo

    # --- Create ---------------------------------------------------------------

    def add_line(self, line: ProjectItem) -> ProjectItem:
        """Insert a new pull-list line and deduct its quantity from stock.

        The deduction happens whatever the initial status, including
        ``returned``. If the referenced item does not exist the line is
        still created and no stock moves.
        """
        self._line_repo.save(line)

        item = self._item_repo.get_by_id(line.item_id)
        if item is None:
            logger.warning(
                "Line #%s references missing item #%s; stock not adjusted",
                line.id, line.item_id,
            )
            return line

        self._move(item, -line.quantity.value, f"line #{line.id} added")
        return line

    # --- Update ---------------------------------------------------------------

    def update_line(self, line_id: int, changes: dict) -> ProjectItem:
        """Apply a partial update to a line and move stock accordingly.

        Both rules are evaluated against the line as it was *before* the
        update:

        1. quantity rule: when the quantity changes and neither the old
           nor the new status is ``returned``, stock moves by the negative
           of the difference (floored at zero);
        2. status rule: moving into ``returned`` puts the (new) quantity
           back into stock; moving out of ``returned`` takes it out again
           (floored at zero).
        """
        _check_changes(changes)

        line = self._line_repo.get_by_id(line_id)
        if line is None:
            raise EntityNotFoundError(f"Project item #{line_id} not found")

        old_quantity = line.quantity.value
        old_status = line.status
        new_quantity = (
            Quantity(changes["quantity"]).value
            if "quantity" in changes
            else old_quantity
        )
        new_status = (
            PullStatus.parse(changes["status"]) if "status" in changes else old_status
        )

        line.quantity = Quantity(new_quantity)
        line.status = new_status
        if "notes" in changes:
            line.notes = changes["notes"]
        self._line_repo.save(line)

        item = self._item_repo.get_by_id(line.item_id)
        if item is None:
            logger.warning(
                "Line #%s references missing item #%s; stock not adjusted",
                line.id, line.item_id,
            )
            return line

        if (
            new_quantity != old_quantity
            and old_status.holds_stock
            and new_status.holds_stock
        ):
            self._move(
                item,
                -(new_quantity - old_quantity),
                f"line #{line.id} quantity {old_quantity} -> {new_quantity}",
            )

        transition = classify_transition(old_status, new_status)
        reason = f"line #{line.id} {old_status.value} -> {new_status.value}"
        if transition is StatusTransition.RELEASE:
            self._move(item, new_quantity, reason)
        elif transition is StatusTransition.RECOMMIT:
            self._move(item, -new_quantity, reason)

        return line

    # --- Delete ---------------------------------------------------------------

    def remove_line(self, line_id: int) -> None:
        """Delete a line, returning its units to stock unless already returned.

        Deleting a line that does not exist is a no-op.
        """
        line = self._line_repo.get_by_id(line_id)
        if line is None:
            logger.debug("Line #%s already absent; nothing to remove", line_id)
            return

        if line.status.holds_stock:
            item = self._item_repo.get_by_id(line.item_id)
            if item is None:
                logger.warning(
                    "Line #%s references missing item #%s; stock not restored",
                    line.id, line.item_id,
                )
            else:
                self._move(item, line.quantity.value, f"line #{line.id} removed")

        self._line_repo.delete(line_id)

    # --- Internal helpers -----------------------------------------------------

    def _move(self, item: Item, delta: int, reason: str) -> None:
        before = item.quantity
        after = item.adjust_stock(delta)
        self._item_repo.save(item)
        if before + delta < 0:
            logger.info(
                "Stock for '%s' clamped at 0 (%s, wanted %+d from %d)",
                item.name, reason, delta, before,
            )
        else:
            logger.info(
                "Stock for '%s' %d -> %d (%s)", item.name, before, after, reason
            )


def _check_changes(changes: dict) -> None:
    for key in changes:
        if key in IMMUTABLE_FIELDS:
            raise ValidationError(
                f"'{key}' cannot be changed on an existing project item", key
            )
        if key not in MUTABLE_FIELDS:
            raise ValidationError(f"Unknown project item field '{key}'", key)
