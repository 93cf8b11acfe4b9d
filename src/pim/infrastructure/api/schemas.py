"""Request / response models for the HTTP API.

Field names travel in camelCase on the wire (``itemId``, ``clientName``)
and are snake_case inside Python. Money is always an exact decimal
string such as ``"150.00"``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pim.domain.model.project import ProjectStatus
from pim.domain.model.project_item import PullStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PatchModel(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


# --- Items --------------------------------------------------------------------


class ItemCreate(CamelModel):
    name: str
    vendor: str
    category: str
    cost: str
    price: str
    bwd_price: Optional[str] = None
    quantity: int = Field(default=0, ge=0)
    description: Optional[str] = None
    image_url: Optional[str] = None


class ItemUpdate(PatchModel):
    name: Optional[str] = None
    vendor: Optional[str] = None
    category: Optional[str] = None
    cost: Optional[str] = None
    price: Optional[str] = None
    bwd_price: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    image_url: Optional[str] = None


class ItemOut(CamelModel):
    id: int
    name: str
    vendor: str
    category: str
    cost: str
    price: str
    bwd_price: str
    quantity: int
    description: Optional[str] = None
    image_url: Optional[str] = None


class ItemAssignmentOut(CamelModel):
    project_id: int
    project_name: str
    quantity: int
    status: str
    added_at: datetime


# --- Projects -----------------------------------------------------------------


class ProjectCreate(CamelModel):
    name: str
    client_name: str
    status: Optional[ProjectStatus] = None


class ProjectUpdate(PatchModel):
    name: Optional[str] = None
    client_name: Optional[str] = None
    status: Optional[ProjectStatus] = None


class ProjectOut(CamelModel):
    id: int
    name: str
    client_name: str
    status: str
    created_at: datetime


# --- Project items (pull-list lines) ------------------------------------------


class ProjectItemCreate(CamelModel):
    item_id: int
    quantity: Optional[int] = Field(default=None, gt=0)
    status: Optional[PullStatus] = None
    notes: Optional[str] = None


class ProjectItemUpdate(PatchModel):
    quantity: Optional[int] = Field(default=None, gt=0)
    status: Optional[PullStatus] = None
    notes: Optional[str] = None
    # Accepted only so the domain can reject them with a clear message.
    project_id: Optional[int] = None
    item_id: Optional[int] = None


class ProjectItemOut(CamelModel):
    id: int
    project_id: int
    item_id: int
    quantity: int
    status: str
    notes: Optional[str] = None
    added_at: datetime
    item: Optional[ItemOut] = None


class ProjectDetailOut(ProjectOut):
    items: list[ProjectItemOut]


# --- Expenses -----------------------------------------------------------------


class ExpenseCreate(CamelModel):
    description: str
    vendor: str
    category: str
    unit_cost: str
    purchase_date: datetime
    quantity: int = Field(default=1, gt=0)
    total_cost: Optional[str] = None
    invoice_number: Optional[str] = None
    notes: Optional[str] = None
    item_id: Optional[int] = None
    project_id: Optional[int] = None


class ExpenseUpdate(PatchModel):
    description: Optional[str] = None
    vendor: Optional[str] = None
    category: Optional[str] = None
    unit_cost: Optional[str] = None
    purchase_date: Optional[datetime] = None
    quantity: Optional[int] = Field(default=None, gt=0)
    total_cost: Optional[str] = None
    invoice_number: Optional[str] = None
    notes: Optional[str] = None
    item_id: Optional[int] = None
    project_id: Optional[int] = None


class ExpenseOut(CamelModel):
    id: int
    description: str
    vendor: str
    category: str
    quantity: int
    unit_cost: str
    total_cost: str
    purchase_date: datetime
    invoice_number: Optional[str] = None
    notes: Optional[str] = None
    item_id: Optional[int] = None
    project_id: Optional[int] = None
    created_at: datetime


class ExpenseSummaryOut(CamelModel):
    total_spend: str
    expense_count: int
    avg_unit_cost: str

