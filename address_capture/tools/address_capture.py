# address_capture/tools/address_capture.py
"""
Address capture tool (URL or local file) → ExtractionResult → webhook.

Pipeline (deterministic, offline-first by default):
  1) core.fetch.load_document(url | file, policy) → SoupDocument
  2) core.extract.extract_address(document)       → ExtractionResult
  3) (optional) sinks.webhook.deliver_result       → WebhookPayload

This tool is the single integration point for the CLI.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from address_capture.core.extract import extract_address
from address_capture.core.fetch import DocumentLoadError, load_document
from address_capture.schemas.models import (
    ExtractionFailure,
    ExtractionResult,
    FetchPolicy,
    LocatorConfig,
    WebhookPayload,
    WebhookPolicy,
)
from address_capture.sinks.webhook import deliver_result

logger = logging.getLogger(__name__)


def capture_address(
    *,
    url: str | None = None,
    file: Path | None = None,
    fetch_policy: FetchPolicy | None = None,
    locator: LocatorConfig | None = None,
) -> ExtractionResult:
    """
    Load one document and extract its address.
    Load failures come back as ExtractionFailure; bad arguments raise ValueError.
    """
    if not url and not file:
        raise ValueError("Either `url` or `file` must be provided.")

    try:
        document = load_document(url=url, file=file, policy=fetch_policy)
    except DocumentLoadError as e:
        logger.warning("could not load %s: %s", url or file, e)
        return ExtractionFailure(error=str(e))

    return extract_address(document, locator)


def capture_and_deliver(
    *,
    url: str | None = None,
    file: Path | None = None,
    fetch_policy: FetchPolicy | None = None,
    locator: LocatorConfig | None = None,
    webhook_policy: WebhookPolicy | None = None,
    dry_run: bool = False,
    captured_at: datetime | None = None,
) -> tuple[ExtractionResult, WebhookPayload | None]:
    """
    Capture, then POST the result unless `dry_run`.
    Raises DeliveryError when the result is a failure or the POST fails.
    """
    result = capture_address(url=url, file=file, fetch_policy=fetch_policy, locator=locator)
    if dry_run:
        return result, None

    payload = deliver_result(result, webhook_policy or WebhookPolicy(), captured_at=captured_at)
    return result, payload
