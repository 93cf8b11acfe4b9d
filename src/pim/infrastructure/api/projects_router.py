"""Project endpoints, including the pull-list (project item) lifecycle."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status

from pim.application.add_project_item import AddProjectItemHandler
from pim.application.create_project import CreateProjectHandler
from pim.application.delete_project import DeleteProjectHandler
from pim.application.delete_project_item import DeleteProjectItemHandler
from pim.application.show_projects import ListProjectsHandler, ShowProjectHandler
from pim.application.update_project import UpdateProjectHandler
from pim.application.update_project_item import UpdateProjectItemHandler
from pim.domain.repository.unit_of_work import UnitOfWork
from pim.infrastructure.api.dependencies import get_uow
from pim.infrastructure.api.schemas import (
    ProjectCreate,
    ProjectDetailOut,
    ProjectItemCreate,
    ProjectItemOut,
    ProjectItemUpdate,
    ProjectOut,
    ProjectUpdate,
)

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=List[ProjectOut])
def list_projects(uow: UnitOfWork = Depends(get_uow)):
    return ListProjectsHandler(uow).handle()


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def create_project(body: ProjectCreate, uow: UnitOfWork = Depends(get_uow)):
    return CreateProjectHandler(uow).handle(
        name=body.name, client_name=body.client_name, status=body.status
    )


@router.get("/{project_id}", response_model=ProjectDetailOut)
def read_project(project_id: int, uow: UnitOfWork = Depends(get_uow)):
    return ShowProjectHandler(uow).handle(project_id)


@router.patch("/{project_id}", response_model=ProjectOut)
def update_project(
    project_id: int, body: ProjectUpdate, uow: UnitOfWork = Depends(get_uow)
):
    return UpdateProjectHandler(uow).handle(project_id, body.changes())


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: int,
    release_stock: bool = False,
    uow: UnitOfWork = Depends(get_uow),
):
    DeleteProjectHandler(uow).handle(project_id, release_stock=release_stock)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Pull list ----------------------------------------------------------------


@router.post(
    "/{project_id}/items",
    response_model=ProjectItemOut,
    status_code=status.HTTP_201_CREATED,
)
def add_project_item(
    project_id: int, body: ProjectItemCreate, uow: UnitOfWork = Depends(get_uow)
):
    return AddProjectItemHandler(uow).handle(
        project_id=project_id,
        item_id=body.item_id,
        quantity=body.quantity,
        status=body.status,
        notes=body.notes,
    )


@router.patch("/{project_id}/items/{line_id}", response_model=ProjectItemOut)
def update_project_item(
    project_id: int,
    line_id: int,
    body: ProjectItemUpdate,
    uow: UnitOfWork = Depends(get_uow),
):
    return UpdateProjectItemHandler(uow).handle(
        line_id, body.changes(), project_id=project_id
    )


@router.delete("/{project_id}/items/{line_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project_item(
    project_id: int, line_id: int, uow: UnitOfWork = Depends(get_uow)
):
    DeleteProjectItemHandler(uow).handle(line_id, project_id=project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
