# =============================================================================
# app/exceptions.py - Custom Exceptions and Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure is rendered as a fixed-shape body: {"error": "<message>"}.
# Internal details are logged, never returned to the client.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_PRODUCT_MESSAGE = "Invalid product data"
PRODUCT_NOT_FOUND_MESSAGE = "Product not found"
ROUTE_NOT_FOUND_MESSAGE = "Route not found"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class CatalogException(Exception):
    """
    Base exception for the catalog API.

    All custom exceptions inherit from this class. The message is what the
    client sees; details are for the logs only.
    """

    def __init__(
        self,
        message: str,
        code: str = "CATALOG_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# Product Exceptions
# =============================================================================

class InvalidProductError(CatalogException):
    """Raised when a product payload is missing fields or has bad values."""

    def __init__(self, errors: list[dict[str, Any]] | None = None):
        super().__init__(
            message=INVALID_PRODUCT_MESSAGE,
            code="INVALID_PRODUCT",
            status_code=400,
            details={"errors": errors or []}
        )


class ProductNotFoundError(CatalogException):
    """Raised when a product ID doesn't exist."""

    def __init__(self, product_id: str | int):
        super().__init__(
            message=PRODUCT_NOT_FOUND_MESSAGE,
            code="PRODUCT_NOT_FOUND",
            status_code=404,
            details={"product_id": str(product_id)}
        )


# =============================================================================
# Storage Exceptions
# =============================================================================

class DataStoreError(CatalogException):
    """Raised when the backing file is missing, unreadable or corrupt."""

    def __init__(self, reason: str, code: str = "DATA_STORE_ERROR", details: dict[str, Any] | None = None):
        super().__init__(
            message=INTERNAL_ERROR_MESSAGE,
            code=code,
            status_code=500,
            details={"reason": reason, **(details or {})}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def catalog_exception_handler(
    request: Request,
    exc: CatalogException
) -> JSONResponse:
    """
    Convert CatalogException to JSON response.

    Client errors are logged as warnings, server errors as errors.
    """
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"{request.method} {request.url.path} -> {exc.status_code} [{exc.code}] {exc.details}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body validation errors (malformed JSON, non-object body).

    These are reported exactly like any other invalid product payload.
    """
    logger.warning(f"{request.method} {request.url.path} -> 400 [INVALID_REQUEST] {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": INVALID_PRODUCT_MESSAGE}
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handle framework HTTP errors.

    Unknown paths and unsupported methods both count as an unmatched route.
    """
    if exc.status_code in (404, 405):
        logger.info(f"{request.method} {request.url.path} -> 404 [ROUTE_NOT_FOUND]")
        return JSONResponse(
            status_code=404,
            content={"error": ROUTE_NOT_FOUND_MESSAGE}
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Terminal fallback for anything not handled above."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": INTERNAL_ERROR_MESSAGE}
    )
