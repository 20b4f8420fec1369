# address_capture/core/fetch/__init__.py
from .cache import cache_paths
from .errors import (
    LOADER_ERRORS,
    DisallowedByRobotsError,
    DocumentLoadError,
    InvalidHtmlError,
    NetworkError,
    OfflineRequiredError,
    classify_load_error,
    load_error_guard,
)
from .loader import fetch_document, load_document, load_file
from .robots import is_allowed

__all__ = [
    "DocumentLoadError",
    "OfflineRequiredError",
    "DisallowedByRobotsError",
    "NetworkError",
    "InvalidHtmlError",
    "LOADER_ERRORS",
    "classify_load_error",
    "load_error_guard",
    "is_allowed",
    "cache_paths",
    "fetch_document",
    "load_document",
    "load_file",
]
