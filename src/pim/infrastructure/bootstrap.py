"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pim.infrastructure.config import Settings, get_settings
from pim.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def unit_of_work(settings: Settings | None = None) -> JsonUnitOfWork:
    settings = settings or get_settings()
    return JsonUnitOfWork(settings.data_path)
