# address_capture/core/fetch/errors.py
"""
Typed errors + utilities for the offline-first document loader.

Exports
-------
- DocumentLoadError, OfflineRequiredError, DisallowedByRobotsError,
  NetworkError, InvalidHtmlError
- LOADER_ERRORS
- classify_load_error(exc)
- load_error_guard()
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import requests

# =========================
# Exception types
# =========================


class DocumentLoadError(RuntimeError):
    """Base class for document acquisition failures."""


class OfflineRequiredError(DocumentLoadError):
    """Cache miss occurred but policy forbids network access."""


class DisallowedByRobotsError(DocumentLoadError):
    """robots.txt explicitly disallows fetching the requested URL."""


class NetworkError(DocumentLoadError):
    """HTTP/transport failure while attempting to fetch a page."""


class InvalidHtmlError(DocumentLoadError):
    """The page bytes could not be decoded or parsed into a DOM."""


LOADER_ERRORS = (
    OfflineRequiredError,
    DisallowedByRobotsError,
    NetworkError,
    InvalidHtmlError,
)

# =========================
# Classification helpers
# =========================


def classify_load_error(exc: Exception) -> DocumentLoadError:
    """
    Map arbitrary exceptions raised inside the loader to a typed DocumentLoadError.

    Heuristics:
      - DocumentLoadError subclasses → passed through
      - requests.* errors → NetworkError
      - decode errors, lxml/BeautifulSoup parse failures → InvalidHtmlError
      - Fallback → DocumentLoadError
    """
    if isinstance(exc, DocumentLoadError):
        return exc

    if isinstance(exc, requests.RequestException):
        return NetworkError(str(exc))

    msg = f"{type(exc).__name__}: {exc}"

    if isinstance(exc, UnicodeDecodeError) or any(k in msg.lower() for k in ("parser", "lxml", "beautifulsoup", "bs4")):
        return InvalidHtmlError(msg)

    return DocumentLoadError(msg)


@contextmanager
def load_error_guard() -> Iterator[None]:
    """Context manager to normalize unexpected exceptions from loader internals."""
    try:
        yield
    except LOADER_ERRORS:
        raise
    except Exception as exc:  # noqa: BLE001
        raise classify_load_error(exc) from exc


__all__ = [
    "DocumentLoadError",
    "OfflineRequiredError",
    "DisallowedByRobotsError",
    "NetworkError",
    "InvalidHtmlError",
    "LOADER_ERRORS",
    "classify_load_error",
    "load_error_guard",
]
