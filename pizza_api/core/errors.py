"""
Error taxonomy for calls into the document store, and the HTTP mapping.
Every failure below the routes surfaces as one of these, never as a crash
of the request task.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)


class PizzaStoreError(Exception):
    """Base class for document store failures."""

    status_code = status.HTTP_502_BAD_GATEWAY
    public_message = "Upstream search service error"


class StoreRejectedError(PizzaStoreError):
    """The store answered but did not accept the operation."""

    public_message = "Search service rejected the request"

    def __init__(self, message: str, upstream_status: int | None = None):
        super().__init__(message)
        self.upstream_status = upstream_status


class PizzaNotCreatedError(StoreRejectedError):
    """The store did not report the new pizza as created (201)."""

    public_message = "Can not create the pizza!"


class StoreUnavailableError(PizzaStoreError):
    """The store could not be reached."""

    public_message = "Search service unavailable"


class StoreTimeoutError(StoreUnavailableError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    public_message = "Search service timed out"


class DocumentShapeError(PizzaStoreError):
    """A stored document or store response does not match the pizza shape."""

    public_message = "Stored pizza has an unexpected shape"


async def pizza_store_error_handler(request: Request, exc: PizzaStoreError) -> PlainTextResponse:
    logger.warning(
        "%s %s failed: %s: %s", request.method, request.url.path, type(exc).__name__, exc
    )
    return PlainTextResponse(exc.public_message, status_code=exc.status_code)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed input is a client error: 400 instead of FastAPI's 422."""
    logger.info("%s %s rejected: invalid body", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PizzaStoreError, pizza_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
