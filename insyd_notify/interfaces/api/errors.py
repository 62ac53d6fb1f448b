"""Exception handlers installed on the FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from insyd_notify.domain.errors import StorageFailure

logger = logging.getLogger(__name__)

GENERIC_ERROR_DETAIL = "Internal Server Error"


def _describe_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid request"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": _describe_validation_error(exc)},
    )


async def storage_failure_handler(request: Request, exc: StorageFailure) -> JSONResponse:
    logger.exception("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_ERROR_DETAIL},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": GENERIC_ERROR_DETAIL},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Map request and storage errors to HTTP responses."""

    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StorageFailure, storage_failure_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


__all__ = ["GENERIC_ERROR_DETAIL", "register_exception_handlers"]
