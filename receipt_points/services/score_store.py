"""In-memory store of receipt scores keyed by opaque identifiers.

The store lives for the lifetime of the process. It is created once by
the application factory and handed to route handlers through a FastAPI
dependency, so tests can build their own isolated instance.

Handlers run on Starlette's worker threads, so every access to the
underlying dict happens under a lock.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict

from receipt_points.core.exceptions import ReceiptNotFoundError

logger = logging.getLogger(__name__)


def new_receipt_id() -> str:
    """Mint a lowercase RFC 4122 version 4 UUID string."""
    return str(uuid.uuid4())


class ScoreStore:
    """Thread-safe mapping of receipt id to points. Insert-only."""

    def __init__(self) -> None:
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def insert(self, points: int) -> str:
        """Store ``points`` under a freshly minted id and return the id."""
        if points < 0:
            raise ValueError(f"points must be non-negative, got {points}")
        with self._lock:
            receipt_id = new_receipt_id()
            while receipt_id in self._points:
                receipt_id = new_receipt_id()
            self._points[receipt_id] = points
        logger.debug("Stored %s points under %s", points, receipt_id)
        return receipt_id

    def lookup(self, receipt_id: str) -> int:
        """Return the points stored under ``receipt_id``.

        Raises :class:`ReceiptNotFoundError` when the id is unknown.
        """
        with self._lock:
            points = self._points.get(receipt_id)
        if points is None:
            raise ReceiptNotFoundError(receipt_id)
        return points

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
