"""Enumeration types used throughout the receipt points service.

Enumerations constrain the values that are passed between the scorer
and its callers and improve readability of the per-rule breakdown.
"""

from enum import Enum


class RuleName(str, Enum):
    """Point rules applied by the scorer, in evaluation order."""

    RETAILER_ALPHANUMERIC = "retailer_alphanumeric"
    ROUND_DOLLAR_TOTAL = "round_dollar_total"
    QUARTER_DOLLAR_TOTAL = "quarter_dollar_total"
    ITEM_PAIRS = "item_pairs"
    ITEM_DESCRIPTION_LENGTH = "item_description_length"
    ODD_PURCHASE_DAY = "odd_purchase_day"
    AFTERNOON_PURCHASE = "afternoon_purchase"
