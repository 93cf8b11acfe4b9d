"""FastAPI application factory."""

from __future__ import annotations

from typing import Callable, Optional

from fastapi import FastAPI

from pim.domain.repository.unit_of_work import UnitOfWork
from pim.infrastructure.api import expenses_router, items_router, projects_router
from pim.infrastructure.api.exception_handlers import setup_exception_handlers
from pim.infrastructure.bootstrap import unit_of_work
from pim.infrastructure.config import Settings, get_settings
from pim.infrastructure.log_config import setup_logging


def create_app(
    settings: Optional[Settings] = None,
    uow_factory: Optional[Callable[[], UnitOfWork]] = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Project Inventory Manager API")
    app.state.uow_factory = uow_factory or (lambda: unit_of_work(settings))

    setup_exception_handlers(app)

    app.include_router(items_router.router)
    app.include_router(projects_router.router)
    app.include_router(expenses_router.router)
    return app
