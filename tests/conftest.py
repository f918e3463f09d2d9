"""Shared pytest fixtures.

Each test gets its own application and score store so stored receipts
never leak between tests.
"""

from __future__ import annotations

import copy

import pytest
from fastapi.testclient import TestClient

from receipt_points.api.main import create_app
from receipt_points.services.score_store import ScoreStore


TARGET_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

MM_CORNER_MARKET_RECEIPT = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}

SIMPLE_RECEIPT = {
    "retailer": "Target",
    "purchaseDate": "2022-01-02",
    "purchaseTime": "13:13",
    "total": "1.25",
    "items": [{"shortDescription": "Pepsi - 12-oz", "price": "1.25"}],
}

MORNING_RECEIPT = {
    "retailer": "Walgreens",
    "purchaseDate": "2022-01-02",
    "purchaseTime": "08:13",
    "total": "2.65",
    "items": [
        {"shortDescription": "Pepsi - 12-oz", "price": "1.25"},
        {"shortDescription": "Dasani", "price": "1.40"},
    ],
}


def minimal_receipt(
    purchase_date: str = "2025-01-14",
    purchase_time: str = "13:59",
    total: str = "1.25",
) -> dict:
    """Single item receipt from retailer "A" with item "B"."""
    return {
        "retailer": "A",
        "purchaseDate": purchase_date,
        "purchaseTime": purchase_time,
        "items": [{"shortDescription": "B", "price": total}],
        "total": total,
    }


@pytest.fixture
def receipt_factory():
    """Return a deep copy of a sample receipt so tests can mutate it freely."""

    def _make(sample: dict = TARGET_RECEIPT) -> dict:
        return copy.deepcopy(sample)

    return _make


@pytest.fixture
def score_store() -> ScoreStore:
    return ScoreStore()


@pytest.fixture
def client(score_store: ScoreStore):
    app = create_app(score_store=score_store)
    with TestClient(app) as test_client:
        yield test_client
