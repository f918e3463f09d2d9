"""API routes for receipt processing and points lookup."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from receipt_points.api.dependencies import get_score_store
from receipt_points.core.exceptions import InvalidReceiptError, ReceiptNotFoundError
from receipt_points.models.schemas import (
    ErrorResponse,
    ProcessReceiptResponse,
    ReceiptIn,
    ReceiptPointsResponse,
)
from receipt_points.services.score_store import ScoreStore
from receipt_points.services.scorer import explain_points
from receipt_points.services.validator import validate_receipt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/receipts", tags=["receipts"])


# Handlers are plain ``def`` so Starlette runs them on its worker threadpool.
@router.post(
    "/process",
    response_model=ProcessReceiptResponse,
    responses={400: {"model": ErrorResponse}},
)
def process_receipt(
    receipt: ReceiptIn,
    store: ScoreStore = Depends(get_score_store),
) -> ProcessReceiptResponse:
    """Validate and score a receipt, returning the id its points are stored under."""
    try:
        validated = validate_receipt(receipt)
    except InvalidReceiptError as exc:
        logger.info("Rejected receipt from %r: %s (%s)", receipt.retailer, exc.reason, exc.field)
        raise

    breakdown = explain_points(validated)
    points = sum(result.points for result in breakdown)
    if logger.isEnabledFor(logging.DEBUG):
        for result in breakdown:
            logger.debug("%s: +%d (%s)", result.rule.value, result.points, result.reason)

    receipt_id = store.insert(points)
    logger.info("Processed receipt %s from %r: %d points", receipt_id, validated.retailer, points)
    return ProcessReceiptResponse(id=receipt_id)


@router.get(
    "/{receipt_id}/points",
    response_model=ReceiptPointsResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_receipt_points(
    receipt_id: str,
    store: ScoreStore = Depends(get_score_store),
) -> ReceiptPointsResponse:
    """Return the points awarded to a previously processed receipt."""
    try:
        points = store.lookup(receipt_id)
    except ReceiptNotFoundError:
        logger.info("No receipt found for id %s", receipt_id)
        raise
    return ReceiptPointsResponse(points=points)
