"""Common dependencies for FastAPI routes."""

from __future__ import annotations

from fastapi import Request

from receipt_points.services.score_store import ScoreStore


def get_score_store(request: Request) -> ScoreStore:
    """Return the process-wide store created by the application factory."""
    return request.app.state.score_store
