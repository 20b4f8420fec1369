# address_capture/core/extract/document.py
"""
Queryable document seam for the address extractor.

The extractor only needs to "find the first element matching a CSS selector,
optionally below a given node" and to read an element's text. Anything that
offers those two operations (plus the page URL) can be extracted from;
`SoupDocument` is the BeautifulSoup-backed implementation.
"""

from __future__ import annotations

import re
from typing import Any, Protocol, runtime_checkable

from bs4 import BeautifulSoup, Tag

_WS_RE = re.compile(r"\s+")


@runtime_checkable
class QueryableDocument(Protocol):
    url: str

    def select_first(self, selector: str, scope: Any | None = None) -> Any | None:
        """First element under `scope` (whole document when None) matching `selector`."""
        ...

    def text_of(self, node: Any | None) -> str:
        """Whitespace-collapsed text content of `node`; '' when node is None."""
        ...


class SoupDocument:
    """BeautifulSoup tree + the URL it was loaded from. Never mutated."""

    def __init__(self, soup: BeautifulSoup, url: str | None = None) -> None:
        self.soup = soup
        self.url = url if url is not None else _canonical_url(soup)

    @classmethod
    def from_html(cls, html: str | bytes, url: str | None = None) -> SoupDocument:
        return cls(BeautifulSoup(html, "lxml"), url=url)

    def select_first(self, selector: str, scope: Tag | None = None) -> Tag | None:
        root = self.soup if scope is None else scope
        return root.select_one(selector)

    def text_of(self, node: Tag | None) -> str:
        if node is None:
            return ""
        # textContent semantics: all descendant text, no separator
        return _WS_RE.sub(" ", node.get_text()).strip()

    def __repr__(self) -> str:
        return f"SoupDocument(url={self.url!r})"


def _canonical_url(soup: BeautifulSoup) -> str:
    link = soup.select_one('link[rel~="canonical"][href]')
    if link is None:
        return ""
    href = link.get("href", "")
    if isinstance(href, list):
        href = " ".join(href)
    return (href or "").strip()


__all__ = ["QueryableDocument", "SoupDocument"]
