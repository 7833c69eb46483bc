from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from menuadmin.errors import MenuAdminError

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    """Uniform error body returned by every failing endpoint."""

    status: int
    error: str
    message: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    path: str
    details: List[str] | None = None


def _respond(request: Request, status: int, error: str, message: str, details: List[str] | None = None) -> JSONResponse:
    body = ErrorResponse(status=status, error=error, message=message, path=request.url.path, details=details)
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


async def menu_admin_error_handler(request: Request, exc: MenuAdminError) -> JSONResponse:
    return _respond(request, exc.status_code, exc.title, str(exc))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        details.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return _respond(
        request,
        400,
        "Validation Failed",
        "The submitted data does not satisfy the required validations",
        details,
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _respond(request, 500, "Internal Server Error", f"Internal server error: {exc}")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MenuAdminError, menu_admin_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


__all__ = ["ErrorResponse", "register_exception_handlers"]
