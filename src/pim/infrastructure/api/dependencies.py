"""FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from pim.domain.repository.unit_of_work import UnitOfWork


def get_uow(request: Request) -> UnitOfWork:
    """A fresh unit of work per request."""
    return request.app.state.uow_factory()
