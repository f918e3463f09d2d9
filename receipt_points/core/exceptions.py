"""Domain exceptions raised by the receipt services.

Each exception carries the HTTP status code and the client facing
description it should be rendered with. The API layer registers a
single handler for :class:`ReceiptServiceError` so services never
need to import FastAPI.
"""

from __future__ import annotations

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

INVALID_PREFIX = "The receipt is invalid."
DOESNT_BIND = f"{INVALID_PREFIX} Doesn't bind"
NOT_FOUND_DESCRIPTION = "No receipt found for that ID."


class ReceiptServiceError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = HTTP_400_BAD_REQUEST
    description: str = INVALID_PREFIX

    def __init__(self, description: str | None = None):
        if description is not None:
            self.description = description
        super().__init__(self.description)


class MalformedReceiptError(ReceiptServiceError):
    """Body is not JSON or does not bind to the receipt shape."""

    description = DOESNT_BIND


class InvalidReceiptError(ReceiptServiceError):
    """A receipt field violates its format rule."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{INVALID_PREFIX} {reason}")


class ReceiptNotFoundError(ReceiptServiceError):
    """No score is stored under the requested identifier."""

    status_code = HTTP_404_NOT_FOUND
    description = NOT_FOUND_DESCRIPTION

    def __init__(self, receipt_id: str):
        self.receipt_id = receipt_id
        super().__init__()
