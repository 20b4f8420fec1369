# address_capture/core/normalize/__init__.py
from __future__ import annotations

from .text import clean_fragment, normalize_fragments

__all__ = [
    "clean_fragment",
    "normalize_fragments",
]
