"""Observability helpers (logging setup, Sentry init & scrubbing).

Centralises logging configuration and Sentry initialisation so the
API and the command line entry point do not drift. Sentry stays a
no-op while ``SENTRY_DSN`` is unset.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration

from receipt_points.core.config import settings

logger = logging.getLogger(__name__)

_SCRUBBED_HEADERS = ("authorization", "cookie", "set-cookie", "x-api-key")


def configure_logging(level: Optional[str] = None) -> None:
	"""Configure root logging once at the configured level."""
	logging.basicConfig(
		level=(level or settings.LOG_LEVEL or "INFO").upper(),
		format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
	)


def _before_send(event: Dict[str, Any], hint: Dict[str, Any] | None = None):
	"""Scrub secrets before sending to Sentry.

	- Drop Authorization & Cookie headers
	- Remove request data/body (receipts are customer data)
	"""
	req = event.get("request") or {}
	headers = req.get("headers") or {}
	for k in list(headers.keys()):
		if k.lower() in _SCRUBBED_HEADERS:
			headers.pop(k, None)
	req.pop("data", None)
	event["request"] = req
	return event


def init_sentry(service: str) -> bool:
	"""Initialise Sentry once for a given process.

	Returns True if Sentry was initialised; False otherwise.
	"""
	if not settings.SENTRY_DSN:
		return False
	if getattr(init_sentry, "_done", False):  # prevent duplicate init in same process
		return True
	sentry_sdk.init(
		dsn=settings.SENTRY_DSN,
		integrations=[FastApiIntegration()],
		traces_sample_rate=float(settings.SENTRY_TRACES_SAMPLE_RATE or 0),
		environment=settings.ENVIRONMENT,
		release=settings.SENTRY_RELEASE,
		before_send=_before_send,
	)
	sentry_sdk.set_tag("service", service)
	init_sentry._done = True  # type: ignore[attr-defined]
	logger.info("Sentry SDK initialized (%s)", service)
	return True


def capture_exception(exc: BaseException) -> None:
	"""Report an unexpected exception to Sentry when it is configured."""
	if settings.SENTRY_DSN:
		sentry_sdk.capture_exception(exc)


__all__ = ["configure_logging", "init_sentry", "capture_exception"]
