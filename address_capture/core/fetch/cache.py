# address_capture/core/fetch/cache.py
"""
Deterministic on-disk cache layout for fetched listing pages.
"""

from __future__ import annotations

from hashlib import sha256 as _sha256lib
from pathlib import Path


def _sha256(data: bytes | str) -> str:
    if isinstance(data, str):
        data = data.encode("utf-8", errors="ignore")
    return _sha256lib(data).hexdigest()


def cache_paths(url: str, base_dir: Path) -> dict[str, Path]:
    """
    Stable cache directory keyed by sha256(url) prefix. Nothing is created here.

    Layout (under base/<hash16>/):
      - index.raw.html
      - meta.json
    """
    root = (base_dir / _sha256(url)[:16]).resolve()
    return {
        "root": root,
        "html_raw": root / "index.raw.html",
        "meta": root / "meta.json",
    }
