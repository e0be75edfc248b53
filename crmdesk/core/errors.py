"""Error taxonomy and the FastAPI handlers that render it."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CRMError(Exception):
    """Base class for service errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error_code: str = "crm_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CRMError):
    """Raised when an update or delete references an absent id."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity


class StorageError(CRMError):
    """Raised by store backends that can fail underneath the service."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_code = "storage_error"


def _field_name(loc: tuple[Any, ...]) -> str:
    # ("body", "address", "city") -> "city", matching the form's error keys
    parts = [str(p) for p in loc if p != "body"]
    return parts[-1] if parts else "body"


def _error_message(error: dict[str, Any]) -> str:
    msg = str(error.get("msg", "Invalid value"))
    # pydantic prefixes messages raised from validators
    return msg.removeprefix("Value error, ")


async def crm_error_handler(request: Request, exc: CRMError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error_code": exc.error_code},
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors: dict[str, str] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(tuple(error.get("loc", ()))), _error_message(error))

    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "error_code": "validation_error",
            "errors": errors,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CRMError, crm_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
