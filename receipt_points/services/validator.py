"""Field-level validation of submitted receipts.

Binding (done by FastAPI against :class:`ReceiptIn`) guarantees every
required key is present and is a string or list. This module applies the
format rules on top of that, in a fixed order, and raises
:class:`InvalidReceiptError` for the first rule that fails:

* ``retailer`` – letters, digits, underscore, space, hyphen and ``&``.
* ``total`` – digits, a point and exactly two digits.
* ``items`` – at least one item.
* ``items[i].shortDescription`` – letters, digits, underscore, space and
  hyphen, with at least one non-space character.
* ``items[i].price`` – same money pattern as ``total``.
* ``purchaseDate`` + ``purchaseTime`` – ``YYYY-MM-DD`` and ``HH:MM``
  forming a real calendar date-time.

Patterns are ASCII only and must match the whole value; ``re.fullmatch``
is used so a trailing newline never slips through the way it would with
``$``.
"""

from __future__ import annotations

import re
from datetime import datetime
from decimal import Decimal

from receipt_points.core.exceptions import InvalidReceiptError
from receipt_points.models.schemas import (
    ItemIn,
    ReceiptIn,
    ValidatedItem,
    ValidatedReceipt,
)

RETAILER_PATTERN = re.compile(r"[A-Za-z0-9 \-&_]+")
MONEY_PATTERN = re.compile(r"[0-9]+\.[0-9]{2}")
SHORT_DESCRIPTION_PATTERN = re.compile(r"[A-Za-z0-9 \-_]+")
PURCHASED_AT_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}")

PURCHASED_AT_FORMAT = "%Y-%m-%dT%H:%M"


def _validate_item(index: int, item: ItemIn) -> ValidatedItem:
    desc = item.short_description
    if not SHORT_DESCRIPTION_PATTERN.fullmatch(desc) or not desc.strip():
        raise InvalidReceiptError(
            f"items[{index}].shortDescription", "Invalid short description format"
        )
    if not MONEY_PATTERN.fullmatch(item.price):
        raise InvalidReceiptError(f"items[{index}].price", "Item price invalid format")
    return ValidatedItem(short_description=desc, price=Decimal(item.price))


def parse_purchased_at(purchase_date: str, purchase_time: str) -> datetime:
    """Combine date and time into a local ``datetime``.

    The digit shape is checked first because ``strptime`` accepts single
    digit months, days and hours. ``strptime`` then rejects dates that do
    not exist on the calendar (``2025-02-30``) and out of range clock
    values (``24:00``).
    """
    value = f"{purchase_date}T{purchase_time}"
    if not PURCHASED_AT_PATTERN.fullmatch(value):
        raise InvalidReceiptError("purchaseDate", "Date is wrong")
    try:
        return datetime.strptime(value, PURCHASED_AT_FORMAT)
    except ValueError:
        raise InvalidReceiptError("purchaseDate", "Date is wrong") from None


def validate_receipt(receipt: ReceiptIn) -> ValidatedReceipt:
    """Check every format rule and return the receipt in validated form."""
    if not RETAILER_PATTERN.fullmatch(receipt.retailer):
        raise InvalidReceiptError("retailer", "Invalid retailer name")

    if not MONEY_PATTERN.fullmatch(receipt.total):
        raise InvalidReceiptError("total", "Invalid total format")

    if not receipt.items:
        raise InvalidReceiptError("items", "At least one item is required")

    items = tuple(_validate_item(i, item) for i, item in enumerate(receipt.items))
    purchased_at = parse_purchased_at(receipt.purchase_date, receipt.purchase_time)

    return ValidatedReceipt(
        retailer=receipt.retailer,
        purchased_at=purchased_at,
        items=items,
        total=receipt.total,
    )
