"""Run the service with uvicorn on ``HOST:PORT``.

    python -m receipt_points
"""

from __future__ import annotations

import logging

import uvicorn

from receipt_points.core.config import settings
from receipt_points.core.observability import configure_logging

logger = logging.getLogger("receipt_points")


def main() -> None:
    configure_logging()
    logger.info("Listening on %s:%d", settings.HOST, settings.PORT)
    uvicorn.run(
        "receipt_points.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
