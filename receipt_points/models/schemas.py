"""Pydantic schemas for request and response models.

Pydantic models are used for binding and serialising data that crosses
the boundary of the API. Binding only checks the JSON shape: required
keys are present, non-null and of the right JSON type. Field formats
(character sets, money patterns, calendar dates) are checked afterwards
by :mod:`receipt_points.services.validator`, which turns a bound
``ReceiptIn`` into a ``ValidatedReceipt`` for the scorer.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .enums import RuleName


# ---------------------------------------------------------------------------
# API request schemas


class ItemIn(BaseModel):
    """One line of a submitted receipt."""

    model_config = ConfigDict(populate_by_name=True)

    short_description: str = Field(alias="shortDescription")
    price: str


class ReceiptIn(BaseModel):
    """A submitted receipt, exactly as the client sent it."""

    model_config = ConfigDict(populate_by_name=True)

    retailer: str
    purchase_date: str = Field(alias="purchaseDate")
    purchase_time: str = Field(alias="purchaseTime")
    items: List[ItemIn]
    total: str


# ---------------------------------------------------------------------------
# Domain schemas produced by validation and scoring


class ValidatedItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    short_description: str
    price: Decimal


class ValidatedReceipt(BaseModel):
    """A receipt whose every field passed its format rule.

    ``total`` keeps the accepted text so the cents can be read without a
    float round trip.
    """

    model_config = ConfigDict(frozen=True)

    retailer: str
    purchased_at: datetime
    items: Tuple[ValidatedItem, ...]
    total: str

    @property
    def total_cents(self) -> int:
        """Cents portion of the total (the two digits after the point)."""
        return int(self.total.rsplit(".", 1)[1])


class RuleResult(BaseModel):
    """Points contributed by a single rule and a short explanation."""

    model_config = ConfigDict(frozen=True)

    rule: RuleName
    points: int = Field(ge=0)
    reason: str


# ---------------------------------------------------------------------------
# API response schemas


class ProcessReceiptResponse(BaseModel):
    id: str


class ReceiptPointsResponse(BaseModel):
    points: int


class ErrorResponse(BaseModel):
    description: str
