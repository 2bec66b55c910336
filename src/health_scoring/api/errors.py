"""Exception handlers mapping engine errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from health_scoring.domain.errors import InvalidEntryError, MalformedDateError

_logger = logging.getLogger(__name__)


async def invalid_entry_handler(
    request: Request, exc: InvalidEntryError
) -> JSONResponse:
    """Reject records outside their documented domain."""
    _logger.warning(
        "Invalid entry on %s %s: %s", request.method, request.url.path, exc
    )
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "field": exc.field},
    )


async def malformed_date_handler(
    request: Request, exc: MalformedDateError
) -> JSONResponse:
    """Reject timestamps that cannot be placed on a calendar day."""
    _logger.warning(
        "Malformed date on %s %s: %s", request.method, request.url.path, exc
    )
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message, "value": str(exc.value)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register engine error handlers on the app."""
    app.add_exception_handler(InvalidEntryError, invalid_entry_handler)
    app.add_exception_handler(MalformedDateError, malformed_date_handler)
