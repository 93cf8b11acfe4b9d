"""Catalog endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from pim.application.add_item import AddItemHandler
from pim.application.show_items import (
    ListItemsHandler,
    ShowItemAssignmentsHandler,
    ShowItemHandler,
)
from pim.application.update_item import UpdateItemHandler
from pim.domain.repository.unit_of_work import UnitOfWork
from pim.infrastructure.api.dependencies import get_uow
from pim.infrastructure.api.schemas import (
    ItemAssignmentOut,
    ItemCreate,
    ItemOut,
    ItemUpdate,
)

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=List[ItemOut])
def list_items(search: Optional[str] = None, uow: UnitOfWork = Depends(get_uow)):
    return ListItemsHandler(uow).handle(search)


@router.post("", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
def create_item(body: ItemCreate, uow: UnitOfWork = Depends(get_uow)):
    return AddItemHandler(uow).handle(**body.model_dump())


@router.get("/{item_id}", response_model=ItemOut)
def read_item(item_id: int, uow: UnitOfWork = Depends(get_uow)):
    return ShowItemHandler(uow).handle(item_id)


@router.patch("/{item_id}", response_model=ItemOut)
def update_item(item_id: int, body: ItemUpdate, uow: UnitOfWork = Depends(get_uow)):
    return UpdateItemHandler(uow).handle(item_id, body.changes())


@router.get("/{item_id}/projects", response_model=List[ItemAssignmentOut])
def item_assignments(item_id: int, uow: UnitOfWork = Depends(get_uow)):
    return ShowItemAssignmentsHandler(uow).handle(item_id)
