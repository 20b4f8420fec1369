# address_capture/core/normalize/text.py
"""
Fragment cleaning for scraped address parts.

Rule (in order):
  1) collapse whitespace runs to a single space
  2) collapse comma runs to a single comma
  3) trim leading/trailing whitespace

Total: None or non-string input yields ''. Idempotent.
"""

from __future__ import annotations

import re
from typing import Any

from address_capture.schemas.models import ADDRESS_ROLES, AddressFragments, NormalizedAddress

_WS_RUN_RE = re.compile(r"\s+")
_COMMA_RUN_RE = re.compile(r",+")


def clean_fragment(value: Any) -> str:
    if not isinstance(value, str) or not value:
        return ""
    out = _WS_RUN_RE.sub(" ", value)
    out = _COMMA_RUN_RE.sub(",", out)
    return out.strip()


def normalize_fragments(fragments: AddressFragments) -> NormalizedAddress:
    return NormalizedAddress(**{role: clean_fragment(getattr(fragments, role)) for role in ADDRESS_ROLES})


__all__ = ["clean_fragment", "normalize_fragments"]
