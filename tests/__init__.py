"""
Expose common test utilities so tests can import directly:
    from tests import make_property_html, make_document_from_html
"""

from .utils import make_document_from_html, make_property_html

__all__ = ["make_property_html", "make_document_from_html"]
