# address_capture/cli.py

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from address_capture.logs import configure_logging
from address_capture.schemas.models import ExtractionSuccess, FetchPolicy, LocatorConfig, WebhookPolicy
from address_capture.sinks.webhook import DeliveryError, deliver_result
from address_capture.tools.address_capture import capture_address

logger = logging.getLogger("address_capture.cli")


def _non_empty(value: str) -> str:
    value = value.strip()
    if not value:
        raise argparse.ArgumentTypeError("must not be empty")
    return value


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="address-capture", description="Extract a property address from a listing page")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--url", type=_non_empty, default=None)
    src.add_argument("--file", type=_non_empty, default=None)
    p.add_argument("--out-cache", type=str, default="data/cache")
    p.add_argument("--online", type=int, choices=(0, 1), default=0, help="Allow network fetch on cache miss")
    p.add_argument("--container", type=str, default=None, help="Override the address container selector")
    p.add_argument("--webhook-url", type=str, default=None, help="Overrides $ADDRESS_CAPTURE_WEBHOOK_URL")
    p.add_argument("--dry-run", action="store_true", help="Extract only; do not POST")
    p.add_argument("--pretty", type=int, choices=(0, 1), default=1)
    p.add_argument("--debug", action="store_true")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(debug=True if args.debug else None)

    fetch_policy = FetchPolicy(
        allow_network=bool(args.online),
        cache_dir=Path(args.out_cache),
    )
    locator = LocatorConfig(container_selector=args.container) if args.container else LocatorConfig()

    result = capture_address(
        url=args.url,
        file=Path(args.file) if args.file else None,
        fetch_policy=fetch_policy,
        locator=locator,
    )
    print(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2 if args.pretty else None))

    if not isinstance(result, ExtractionSuccess):
        return 1
    if args.dry_run:
        return 0

    try:
        webhook_policy = WebhookPolicy(webhook_url=args.webhook_url) if args.webhook_url else WebhookPolicy()
    except ValidationError as e:
        logger.error("invalid webhook configuration: %s", e.errors()[0]["msg"])
        return 2

    try:
        payload = deliver_result(result, webhook_policy)
    except DeliveryError as e:
        logger.error("Failed to send address to webhook: %s", e)
        return 1

    print(f"delivered: {payload.address}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
