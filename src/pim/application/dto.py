"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI / HTTP layers and the application layer
without exposing domain internals to the outside world. Money is always
rendered as an exact two-digit decimal string, never a float.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pim.domain.model.expense import Expense, ExpenseSummary
from pim.domain.model.item import Item
from pim.domain.model.project import Project
from pim.domain.model.project_item import ProjectItem


@dataclass(frozen=True)
class ItemDTO:
    id: int
    name: str
    vendor: str
    category: str
    cost: str  # e.g. "150.00"
    price: str
    bwd_price: str
    quantity: int
    description: str | None
    image_url: str | None


@dataclass(frozen=True)
class ProjectItemDTO:
    id: int
    project_id: int
    item_id: int
    quantity: int
    status: str
    notes: str | None
    added_at: datetime
    item: ItemDTO | None = None  # embedded catalog entry on project detail


@dataclass(frozen=True)
class ProjectDTO:
    id: int
    name: str
    client_name: str
    status: str
    created_at: datetime


@dataclass(frozen=True)
class ProjectDetailDTO:
    id: int
    name: str
    client_name: str
    status: str
    created_at: datetime
    items: list[ProjectItemDTO]


@dataclass(frozen=True)
class ItemAssignmentDTO:
    """A non-returned line holding units of a catalog item."""

    project_id: int
    project_name: str
    quantity: int
    status: str
    added_at: datetime


@dataclass(frozen=True)
class ExpenseDTO:
    id: int
    description: str
    vendor: str
    category: str
    quantity: int
    unit_cost: str
    total_cost: str
    purchase_date: datetime
    invoice_number: str | None
    notes: str | None
    item_id: int | None
    project_id: int | None
    created_at: datetime


@dataclass(frozen=True)
class ExpenseSummaryDTO:
    total_spend: str
    expense_count: int
    avg_unit_cost: str


# --- Mapping ------------------------------------------------------------------


def item_to_dto(item: Item) -> ItemDTO:
    return ItemDTO(
        id=item.id,  # type: ignore[arg-type]
        name=item.name,
        vendor=item.vendor,
        category=item.category,
        cost=item.cost.to_string(),
        price=item.price.to_string(),
        bwd_price=item.bwd_price.to_string(),
        quantity=item.quantity,
        description=item.description,
        image_url=item.image_url,
    )


def project_item_to_dto(line: ProjectItem, item: Item | None = None) -> ProjectItemDTO:
    return ProjectItemDTO(
        id=line.id,  # type: ignore[arg-type]
        project_id=line.project_id,
        item_id=line.item_id,
        quantity=line.quantity.value,
        status=line.status.value,
        notes=line.notes,
        added_at=line.added_at,
        item=item_to_dto(item) if item is not None else None,
    )


def project_to_dto(project: Project) -> ProjectDTO:
    return ProjectDTO(
        id=project.id,  # type: ignore[arg-type]
        name=project.name,
        client_name=project.client_name,
        status=project.status.value,
        created_at=project.created_at,
    )


def expense_to_dto(expense: Expense) -> ExpenseDTO:
    return ExpenseDTO(
        id=expense.id,  # type: ignore[arg-type]
        description=expense.description,
        vendor=expense.vendor,
        category=expense.category,
        quantity=expense.quantity.value,
        unit_cost=expense.unit_cost.to_string(),
        total_cost=expense.total_cost.to_string(),
        purchase_date=expense.purchase_date,
        invoice_number=expense.invoice_number,
        notes=expense.notes,
        item_id=expense.item_id,
        project_id=expense.project_id,
        created_at=expense.created_at,
    )


def summary_to_dto(summary: ExpenseSummary) -> ExpenseSummaryDTO:
    return ExpenseSummaryDTO(
        total_spend=f"{summary.total_spend:.2f}",
        expense_count=summary.expense_count,
        avg_unit_cost=summary.avg_unit_cost.to_string(),
    )
