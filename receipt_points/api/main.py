"""Entry point for the FastAPI application.

This module constructs the FastAPI app, registers the exception
handlers and includes the receipts router. The score store is created
once per application and attached to ``app.state`` so handlers receive
it through :func:`receipt_points.api.dependencies.get_score_store`.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from receipt_points import __version__
from receipt_points.api.error_handlers import (
    generic_exception_handler,
    receipt_service_exception_handler,
    validation_exception_handler,
)
from receipt_points.api.routes.receipts import router as receipts_router
from receipt_points.core.config import settings
from receipt_points.core.exceptions import ReceiptServiceError
from receipt_points.core.observability import configure_logging, init_sentry
from receipt_points.services.score_store import ScoreStore

# Configure logging
configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting up (%s)...", settings.ENVIRONMENT)
    init_sentry("api")
    yield
    logger.info("Shutting down with %d stored receipts...", len(app.state.score_store))


def create_app(score_store: Optional[ScoreStore] = None) -> FastAPI:
    """Build the application around ``score_store`` (a new empty one by default)."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.score_store = score_store if score_store is not None else ScoreStore()

    # Register custom exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ReceiptServiceError, receipt_service_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(receipts_router)
    return app


app = create_app()
