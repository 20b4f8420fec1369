# address_capture/core/extract/assembler.py
"""
Compose the canonical one-line address: "Street, City, ST ZIP".

Missing parts are dropped along with their separators:
  street only        → "5904 E 7 St"
  city + state       → "Tulsa, OK"
  street + zip       → "5904 E 7 St, 74112"
"""

from __future__ import annotations

import re

from address_capture.schemas.models import (
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    NormalizedAddress,
)

NOT_FOUND_MESSAGE = "Could not find address fields on the page."

_SPACE_BEFORE_COMMA_RE = re.compile(r"\s+,")


def _join_present(sep: str, *parts: str) -> str:
    return sep.join(p for p in parts if p)


def compose_full_address(address: NormalizedAddress) -> str:
    locality = _join_present(", ", address.city, address.state)
    tail = _join_present(" ", locality, address.zip)
    full = _join_present(", ", address.street, tail)
    return _SPACE_BEFORE_COMMA_RE.sub(",", full)


def assemble_result(address: NormalizedAddress, url: str) -> ExtractionResult:
    full_address = compose_full_address(address)
    if not full_address:
        return ExtractionFailure(error=NOT_FOUND_MESSAGE)
    return ExtractionSuccess(
        url=url,
        street=address.street,
        city=address.city,
        state=address.state,
        zip=address.zip,
        full_address=full_address,
    )


__all__ = ["NOT_FOUND_MESSAGE", "compose_full_address", "assemble_result"]
