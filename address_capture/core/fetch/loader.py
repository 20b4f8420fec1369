# address_capture/core/fetch/loader.py
"""
Offline-first document loader: local file or URL → SoupDocument.

URL flow:
  1) cache hit (index.raw.html) → parse it, no network
  2) cache miss + allow_network=False → OfflineRequiredError
  3) robots.txt check (if respect_robots) → DisallowedByRobotsError
  4) GET with policy UA/timeout; always save raw bytes + meta.json
  5) HTTP >= 400 → NetworkError unless allow_non_200
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import requests

from address_capture.core.extract.document import SoupDocument
from address_capture.schemas.models import FetchPolicy

from .cache import _sha256, cache_paths
from .errors import DisallowedByRobotsError, NetworkError, OfflineRequiredError, load_error_guard
from .robots import is_allowed

logger = logging.getLogger(__name__)

# -------------------------
# Internal HTTP helpers
# -------------------------


def _http_get(url: str, ua: str, timeout: float) -> tuple[int, bytes]:
    try:
        resp = requests.get(url, headers={"User-Agent": ua}, timeout=timeout)
        return resp.status_code, resp.content
    except requests.RequestException as e:
        raise NetworkError(str(e)) from e


def _fetch_for_robots(url: str, ua: str, timeout: float) -> tuple[int, str]:
    try:
        code, b = _http_get(url, ua, timeout)
    except NetworkError:
        return 599, ""
    return code, b.decode("utf-8", errors="ignore")


def _write_meta(meta_path: Path, url: str, status_code: int, raw: bytes) -> None:
    meta = {
        "url": url,
        "fetched_at": datetime.now(timezone.utc).isoformat(),
        "status_code": status_code,
        "bytes_size": len(raw),
        "sha256": _sha256(raw),
    }
    meta_path.write_text(json.dumps(meta), encoding="utf-8")


def _cached_status(meta_path: Path) -> int:
    # a snapshot without readable meta is treated as a 200
    try:
        return int(json.loads(meta_path.read_text(encoding="utf-8")).get("status_code", 200))
    except (OSError, ValueError, TypeError, AttributeError):
        return 200


# -------------------------
# Public API
# -------------------------


def load_file(path: Path) -> SoupDocument:
    with load_error_guard():
        html = path.read_text(encoding="utf-8")
        return SoupDocument.from_html(html, url=path.resolve().as_uri())


def fetch_document(url: str, *, policy: FetchPolicy | None = None) -> SoupDocument:
    pol = policy or FetchPolicy()
    paths = cache_paths(url, pol.cache_dir)

    with load_error_guard():
        if paths["html_raw"].exists():
            logger.debug("cache hit for %s (%s)", url, paths["html_raw"])
            status = _cached_status(paths["meta"])
            if not pol.allow_non_200 and status >= 400:
                raise NetworkError(f"HTTP {status} for {url}")
            return SoupDocument.from_html(paths["html_raw"].read_bytes(), url=url)

        if not pol.allow_network:
            raise OfflineRequiredError("Cache miss and networking is disabled by policy.")

        if pol.respect_robots:
            allowed = is_allowed(url, pol.user_agent, lambda r: _fetch_for_robots(r, pol.user_agent, pol.timeout_s))
            if not allowed:
                raise DisallowedByRobotsError(f"robots.txt disallows fetching {url}")

        status, content = _http_get(url, pol.user_agent, pol.timeout_s)
        paths["root"].mkdir(parents=True, exist_ok=True)
        paths["html_raw"].write_bytes(content)
        _write_meta(paths["meta"], url, status, content)
        logger.info("fetched %s (HTTP %s, %d bytes)", url, status, len(content))

        if not pol.allow_non_200 and status >= 400:
            raise NetworkError(f"HTTP {status} for {url}")

        return SoupDocument.from_html(content, url=url)


def load_document(
    *,
    url: str | None = None,
    file: Path | None = None,
    policy: FetchPolicy | None = None,
) -> SoupDocument:
    """Load exactly one of `url` / `file` into a queryable document."""
    if bool(url) == bool(file):
        raise ValueError("Provide exactly one of `url` or `file`.")
    if file is not None:
        return load_file(Path(file))
    assert url is not None
    return fetch_document(url, policy=policy)
