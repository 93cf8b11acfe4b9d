"""Map domain and request errors onto HTTP responses.

* ValidationError and malformed request bodies -> 400 ``{message, field}``
* EntityNotFoundError -> 404 ``{message}``
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pim.domain.exceptions import EntityNotFoundError, ValidationError

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(ValidationError)
    async def domain_validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": str(exc), "field": _camel(exc.field)},
        )

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = [part for part in first.get("loc", ()) if part not in ("body", "query", "path")]
        field = str(loc[-1]) if loc else None
        message = first.get("msg", "Invalid request")
        if field:
            message = f"{field}: {message}"
        logger.debug("Rejected request to %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": message, "field": field},
        )


def _camel(field: str | None) -> str | None:
    if not field:
        return field
    head, *rest = field.split("_")
    return head + "".join(part.capitalize() for part in rest)
