"""
Custom exception handlers for FastAPI.
Every error reaches the client as ``{"description": "..."}``.
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from receipt_points.core.exceptions import DOESNT_BIND, ReceiptServiceError
from receipt_points.core.observability import capture_exception

logger = logging.getLogger(__name__)


def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed JSON, missing/null keys and wrong JSON types all land here.
    logger.info("Rejected %s %s: body does not bind: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"description": DOESNT_BIND},
    )


def receipt_service_exception_handler(request: Request, exc: ReceiptServiceError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"description": exc.description},
    )


def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    capture_exception(exc)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"description": "Internal server error"},
    )
