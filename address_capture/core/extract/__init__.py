# address_capture/core/extract/__init__.py
"""
Address extraction entry point: Locator → Normalizer → Assembler.

`extract_address` is total: every fault (missing fields, a document that
cannot be queried, a bad selector) comes back as ExtractionFailure.
"""

from __future__ import annotations

import logging

from address_capture.core.normalize.text import normalize_fragments
from address_capture.schemas.models import ExtractionFailure, ExtractionResult, LocatorConfig

from .assembler import NOT_FOUND_MESSAGE, assemble_result, compose_full_address
from .document import QueryableDocument, SoupDocument
from .locator import locate_fragments, plan_lookups

logger = logging.getLogger(__name__)


def extract_address(document: QueryableDocument, config: LocatorConfig | None = None) -> ExtractionResult:
    try:
        fragments = locate_fragments(document, config)
        address = normalize_fragments(fragments)
        logger.debug("address fragments: %s", address.model_dump())
        result = assemble_result(address, url=document.url or "")
    except Exception as exc:  # noqa: BLE001
        logger.debug("address extraction raised", exc_info=True)
        result = ExtractionFailure(error=str(exc) or type(exc).__name__)

    if isinstance(result, ExtractionFailure):
        logger.warning("address extraction failed: %s", result.error)
    return result


__all__ = [
    "NOT_FOUND_MESSAGE",
    "QueryableDocument",
    "SoupDocument",
    "assemble_result",
    "compose_full_address",
    "extract_address",
    "locate_fragments",
    "plan_lookups",
]
