# tests/utils.py
"""
Single source of truth for test data, factories, and canonical payloads.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

from pathlib import Path

from address_capture.core.extract.document import SoupDocument
from address_capture.schemas.models import ExtractionSuccess, NormalizedAddress

# -----------------------------
# Global defaults (edit once)
# -----------------------------

DEFAULT_URL = "https://example.com/homedetails/5904-E-7th-St-Tulsa-OK-74112"

DEFAULT_STREET = "5904 E 7 St"
DEFAULT_CITY = "Tulsa"
DEFAULT_STATE = "OK"
DEFAULT_ZIP = "74112"
DEFAULT_FULL_ADDRESS = "5904 E 7 St, Tulsa, OK 74112"

# Listing markup with the address container and knockout-style data-bind spans
DEFAULT_PROPERTY_HTML = """<!doctype html>
<html>
  <head><title>5904 E 7 St</title></head>
  <body>
    <h1>
      <span id="propertyAddress">
        <span data-bind="text: PropertyDetails.Address">5904 E 7 St</span>
        <span data-bind="text: PropertyDetails.City">Tulsa</span>,
        <span data-bind="text: PropertyDetails.State">OK</span>
        <span data-bind="text: PropertyDetails.Zip">74112</span>
      </span>
    </h1>
  </body>
</html>
"""

NO_ADDRESS_HTML = """<!doctype html>
<html><body><p>Nothing to see here.</p></body></html>
"""


def span(role: str, text: str) -> str:
    """One data-bind span for `role` ∈ Address/City/State/Zip."""
    return f'<span data-bind="text: PropertyDetails.{role}">{text}</span>'


def make_property_html(
    *,
    street: str | None = DEFAULT_STREET,
    city: str | None = DEFAULT_CITY,
    state: str | None = DEFAULT_STATE,
    zip_code: str | None = DEFAULT_ZIP,
    container: bool = True,
    outside: str = "",
) -> str:
    """
    Build listing HTML. A None part is left out of the markup entirely.
    `outside` is raw HTML placed after the container (for fallback tests).
    """
    parts = []
    for role, value in (("Address", street), ("City", city), ("State", state), ("Zip", zip_code)):
        if value is not None:
            parts.append(span(role, value))
    inner = "\n".join(parts)
    block = f'<span id="propertyAddress">{inner}</span>' if container else f"<div>{inner}</div>"
    return f"<html><body>{block}{outside}</body></html>"


def make_document_from_html(html: str, url: str | None = DEFAULT_URL) -> SoupDocument:
    return SoupDocument.from_html(html, url=url)


def make_normalized(
    street: str = "",
    city: str = "",
    state: str = "",
    zip_code: str = "",
) -> NormalizedAddress:
    return NormalizedAddress(street=street, city=city, state=state, zip=zip_code)


def make_success(**overrides: str) -> ExtractionSuccess:
    data = {
        "url": DEFAULT_URL,
        "street": DEFAULT_STREET,
        "city": DEFAULT_CITY,
        "state": DEFAULT_STATE,
        "zip": DEFAULT_ZIP,
        "full_address": DEFAULT_FULL_ADDRESS,
    }
    data.update(overrides)
    return ExtractionSuccess(**data)


def write_html(tmp_dir: Path, html: str, filename: str = "listing.html") -> Path:
    tmp_dir.mkdir(parents=True, exist_ok=True)
    path = tmp_dir / filename
    path.write_text(html, encoding="utf-8")
    return path
