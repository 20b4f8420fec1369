# address_capture/sinks/webhook.py
"""
Webhook delivery for captured addresses.

Payload shape (JSON):
  {
    "address":   "5904 E 7 St, Tulsa, OK 74112",
    "street":    "5904 E 7 St" | null,
    "city":      "Tulsa" | null,
    "state":     "OK" | null,
    "zip":       "74112" | null,
    "sourceUrl": "https://...",
    "capturedAt": "2025-01-01T00:00:00+00:00"
  }

Single POST, no retries.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import requests

from address_capture.schemas.models import (
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    WebhookPayload,
    WebhookPolicy,
)

logger = logging.getLogger(__name__)


class DeliveryError(RuntimeError):
    """The payload could not be delivered (or there was nothing to deliver)."""


def build_payload(result: ExtractionSuccess, captured_at: datetime | None = None) -> WebhookPayload:
    return WebhookPayload(
        address=result.full_address,
        street=result.street or None,
        city=result.city or None,
        state=result.state or None,
        zip=result.zip or None,
        source_url=result.url,
        captured_at=captured_at or datetime.now(timezone.utc),
    )


def send_to_webhook(payload: WebhookPayload, policy: WebhookPolicy) -> None:
    if not policy.webhook_url:
        raise DeliveryError("No webhook URL configured.")

    body = payload.model_dump(mode="json", by_alias=True)
    try:
        resp = requests.post(
            policy.webhook_url,
            json=body,
            headers={"Content-Type": "application/json", "User-Agent": policy.user_agent},
            timeout=policy.timeout_s,
        )
    except requests.RequestException as e:
        raise DeliveryError(f"Webhook request failed: {e}") from e

    if not resp.ok:
        try:
            text = resp.text
        except Exception:  # noqa: BLE001
            text = ""
        raise DeliveryError(f"Webhook HTTP {resp.status_code} {resp.reason} {text}".rstrip())


def deliver_result(
    result: ExtractionResult,
    policy: WebhookPolicy,
    captured_at: datetime | None = None,
) -> WebhookPayload:
    """POST a successful extraction; a failed one raises DeliveryError with its message."""
    if isinstance(result, ExtractionFailure):
        raise DeliveryError(result.error or "Address not found")

    payload = build_payload(result, captured_at=captured_at)
    send_to_webhook(payload, policy)
    logger.info("Webhook sent: %s", payload.model_dump(mode="json", by_alias=True))
    return payload


__all__ = ["DeliveryError", "build_payload", "send_to_webhook", "deliver_result"]
