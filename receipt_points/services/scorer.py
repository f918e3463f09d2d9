"""Points rule engine for validated receipts.

The engine applies a fixed, ordered list of point rules to a
:class:`ValidatedReceipt`. Each rule is a plain function returning the
points it awards together with a short reasoning string. The rules are
independent of each other, so the total does not depend on their order.

Supported rules:

* ``retailer_alphanumeric`` – one point for every ASCII letter or digit
  in the retailer name.
* ``round_dollar_total`` – 50 points if the total has no cents.
* ``quarter_dollar_total`` – 25 points if the total is a multiple of
  ``0.25``. A round dollar total also qualifies, so it earns 75 in all.
* ``item_pairs`` – 5 points for every two items.
* ``item_description_length`` – for each item whose trimmed description
  length is a non-zero multiple of 3, the price multiplied by ``0.2``
  and rounded up to the nearest integer.
* ``odd_purchase_day`` – 6 points if the day of the month is odd.
* ``afternoon_purchase`` – 10 points if the purchase happened after
  14:00 and before 16:00, both ends excluded.

:func:`explain_points` returns the per-rule breakdown and
:func:`score_receipt` the sum of it.
"""

from __future__ import annotations

import datetime as dt
import math
from decimal import Decimal
from typing import Callable, List, Tuple

from receipt_points.models.enums import RuleName
from receipt_points.models.schemas import RuleResult, ValidatedReceipt

ROUND_DOLLAR_POINTS = 50
QUARTER_DOLLAR_POINTS = 25
QUARTER_CENTS = (0, 25, 50, 75)
POINTS_PER_ITEM_PAIR = 5
DESCRIPTION_LENGTH_MULTIPLE = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START = dt.time(14, 0)
AFTERNOON_END = dt.time(16, 0)


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _score_retailer(receipt: ValidatedReceipt) -> Tuple[int, str]:
    count = sum(1 for char in receipt.retailer if _is_ascii_alnum(char))
    return count, f"{count} alphanumeric characters in {receipt.retailer!r}"


def _score_round_dollar(receipt: ValidatedReceipt) -> Tuple[int, str]:
    if receipt.total_cents == 0:
        return ROUND_DOLLAR_POINTS, f"total {receipt.total} is a round dollar amount"
    return 0, f"total {receipt.total} has cents"


def _score_quarter_dollar(receipt: ValidatedReceipt) -> Tuple[int, str]:
    if receipt.total_cents in QUARTER_CENTS:
        return QUARTER_DOLLAR_POINTS, f"total {receipt.total} is a multiple of 0.25"
    return 0, f"total {receipt.total} is not a multiple of 0.25"


def _score_item_pairs(receipt: ValidatedReceipt) -> Tuple[int, str]:
    pairs = len(receipt.items) // 2
    return pairs * POINTS_PER_ITEM_PAIR, f"{pairs} pairs in {len(receipt.items)} items"


def description_bonus(short_description: str, price: Decimal) -> int:
    """Points for a single item under the description length rule."""
    length = len(short_description.strip())
    if length == 0 or length % DESCRIPTION_LENGTH_MULTIPLE:
        return 0
    return math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER)


def _score_item_descriptions(receipt: ValidatedReceipt) -> Tuple[int, str]:
    awarded: List[str] = []
    total = 0
    for item in receipt.items:
        bonus = description_bonus(item.short_description, item.price)
        if bonus:
            total += bonus
            awarded.append(f"{item.short_description.strip()!r}={bonus}")
    return total, f"description bonuses [{', '.join(awarded)}]"


def _score_odd_day(receipt: ValidatedReceipt) -> Tuple[int, str]:
    day = receipt.purchased_at.day
    if day % 2 == 1:
        return ODD_DAY_POINTS, f"day {day} is odd"
    return 0, f"day {day} is even"


def _score_afternoon(receipt: ValidatedReceipt) -> Tuple[int, str]:
    at = receipt.purchased_at.time()
    if AFTERNOON_START < at < AFTERNOON_END:
        return AFTERNOON_POINTS, f"{at:%H:%M} is between 14:00 and 16:00"
    return 0, f"{at:%H:%M} is outside 14:00-16:00"


RULES: List[Tuple[RuleName, Callable[[ValidatedReceipt], Tuple[int, str]]]] = [
    (RuleName.RETAILER_ALPHANUMERIC, _score_retailer),
    (RuleName.ROUND_DOLLAR_TOTAL, _score_round_dollar),
    (RuleName.QUARTER_DOLLAR_TOTAL, _score_quarter_dollar),
    (RuleName.ITEM_PAIRS, _score_item_pairs),
    (RuleName.ITEM_DESCRIPTION_LENGTH, _score_item_descriptions),
    (RuleName.ODD_PURCHASE_DAY, _score_odd_day),
    (RuleName.AFTERNOON_PURCHASE, _score_afternoon),
]


def explain_points(receipt: ValidatedReceipt) -> List[RuleResult]:
    """Evaluate every rule against a receipt.

    :param receipt: A receipt that already passed validation.
    :returns: One :class:`RuleResult` per rule, in evaluation order.
    """
    results: List[RuleResult] = []
    for rule, handler in RULES:
        points, reason = handler(receipt)
        results.append(RuleResult(rule=rule, points=points, reason=reason))
    return results


def score_receipt(receipt: ValidatedReceipt) -> int:
    """Return the total points for a validated receipt."""
    return sum(result.points for result in explain_points(receipt))
