"""
address-capture: pull a structured postal address out of a listing page.

    from address_capture import SoupDocument, extract_address

    result = extract_address(SoupDocument.from_html(html, url=url))
"""

from address_capture.core.extract import SoupDocument, extract_address
from address_capture.schemas.models import ExtractionFailure, ExtractionResult, ExtractionSuccess

__all__ = ["SoupDocument", "extract_address", "ExtractionResult", "ExtractionSuccess", "ExtractionFailure"]
