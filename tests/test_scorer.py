from __future__ import annotations

from decimal import Decimal

import pytest

from conftest import (
    MM_CORNER_MARKET_RECEIPT,
    MORNING_RECEIPT,
    SIMPLE_RECEIPT,
    TARGET_RECEIPT,
    minimal_receipt,
)
from receipt_points.models.enums import RuleName
from receipt_points.models.schemas import ReceiptIn
from receipt_points.services.scorer import description_bonus, explain_points, score_receipt
from receipt_points.services.validator import validate_receipt


def _score(payload: dict) -> int:
    return score_receipt(validate_receipt(ReceiptIn.model_validate(payload)))


def _breakdown(payload: dict) -> dict:
    results = explain_points(validate_receipt(ReceiptIn.model_validate(payload)))
    return {result.rule: result.points for result in results}


@pytest.mark.parametrize(
    "payload,expected",
    [
        (TARGET_RECEIPT, 28),
        (MM_CORNER_MARKET_RECEIPT, 109),
        (SIMPLE_RECEIPT, 31),
        (MORNING_RECEIPT, 15),
        (minimal_receipt(), 26),
        (minimal_receipt(total="1.00"), 76),
        (minimal_receipt(purchase_time="14:01", total="1.01"), 11),
        (minimal_receipt(purchase_time="14:00", total="1.01"), 1),
        (minimal_receipt(purchase_date="2025-01-15", purchase_time="16:01", total="1.01"), 7),
    ],
)
def test_scenario_points(payload, expected):
    assert _score(payload) == expected


def test_target_breakdown():
    breakdown = _breakdown(TARGET_RECEIPT)
    assert breakdown == {
        RuleName.RETAILER_ALPHANUMERIC: 6,
        RuleName.ROUND_DOLLAR_TOTAL: 0,
        RuleName.QUARTER_DOLLAR_TOTAL: 0,
        RuleName.ITEM_PAIRS: 10,
        RuleName.ITEM_DESCRIPTION_LENGTH: 6,
        RuleName.ODD_PURCHASE_DAY: 6,
        RuleName.AFTERNOON_PURCHASE: 0,
    }


def test_breakdown_sums_to_score():
    results = explain_points(validate_receipt(ReceiptIn.model_validate(MM_CORNER_MARKET_RECEIPT)))
    assert [r.rule for r in results] == list(RuleName)
    assert sum(r.points for r in results) == _score(MM_CORNER_MARKET_RECEIPT) == 109


def test_retailer_counts_only_ascii_alphanumerics():
    payload = minimal_receipt()
    payload["retailer"] = "M&M Corner_Market - 24"
    assert _breakdown(payload)[RuleName.RETAILER_ALPHANUMERIC] == 16


def test_round_dollar_also_scores_quarter():
    breakdown = _breakdown(minimal_receipt(total="12.00"))
    assert breakdown[RuleName.ROUND_DOLLAR_TOTAL] == 50
    assert breakdown[RuleName.QUARTER_DOLLAR_TOTAL] == 25


@pytest.mark.parametrize("total,quarter", [("0.25", 25), ("3.50", 25), ("9.75", 25), ("9.74", 0), ("0.05", 0)])
def test_quarter_dollar_total(total, quarter):
    breakdown = _breakdown(minimal_receipt(total=total))
    assert breakdown[RuleName.QUARTER_DOLLAR_TOTAL] == quarter
    assert breakdown[RuleName.ROUND_DOLLAR_TOTAL] == 0


def test_large_total_uses_cents_text():
    # 1e15 dollars would lose the cents in a float round trip.
    breakdown = _breakdown(minimal_receipt(total="1000000000000000.75"))
    assert breakdown[RuleName.QUARTER_DOLLAR_TOTAL] == 25


@pytest.mark.parametrize("n_items,expected", [(1, 0), (2, 5), (3, 5), (4, 10), (7, 15)])
def test_item_pairs(n_items, expected):
    payload = minimal_receipt()
    payload["items"] = [{"shortDescription": "B", "price": "1.00"}] * n_items
    assert _breakdown(payload)[RuleName.ITEM_PAIRS] == expected


@pytest.mark.parametrize(
    "description,price,expected",
    [
        ("Emils Cheese Pizza", "12.25", 3),
        ("   Klarbrunn 12-PK 12 FL OZ  ", "12.00", 3),
        ("Dasani", "1.40", 1),
        ("Abc", "5.00", 1),
        ("Abc", "15.00", 3),
        ("Abc", "0.00", 0),
        ("Abc", "0.01", 1),
        ("Gatorade", "2.25", 0),
        ("   ", "9.99", 0),
    ],
)
def test_description_bonus(description, price, expected):
    assert description_bonus(description, Decimal(price)) == expected


def test_odd_day():
    assert _breakdown(minimal_receipt(purchase_date="2025-01-31"))[RuleName.ODD_PURCHASE_DAY] == 6
    assert _breakdown(minimal_receipt(purchase_date="2025-01-30"))[RuleName.ODD_PURCHASE_DAY] == 0


@pytest.mark.parametrize(
    "purchase_time,expected",
    [("13:59", 0), ("14:00", 0), ("14:01", 10), ("15:00", 10), ("15:59", 10), ("16:00", 0), ("16:01", 0)],
)
def test_afternoon_window_is_exclusive(purchase_time, expected):
    breakdown = _breakdown(minimal_receipt(purchase_time=purchase_time))
    assert breakdown[RuleName.AFTERNOON_PURCHASE] == expected


def test_score_is_deterministic():
    validated = validate_receipt(ReceiptIn.model_validate(TARGET_RECEIPT))
    assert {score_receipt(validated) for _ in range(5)} == {28}


def test_adding_an_item_never_lowers_item_rules(receipt_factory):
    payload = receipt_factory(SIMPLE_RECEIPT)
    item_rules = (RuleName.RETAILER_ALPHANUMERIC, RuleName.ITEM_PAIRS, RuleName.ITEM_DESCRIPTION_LENGTH)
    before = _breakdown(payload)
    for description in ("Dasani", "Emils Cheese Pizza", "X"):
        payload["items"].append({"shortDescription": description, "price": "3.10"})
        after = _breakdown(payload)
        assert sum(after[r] for r in item_rules) >= sum(before[r] for r in item_rules)
        before = after
