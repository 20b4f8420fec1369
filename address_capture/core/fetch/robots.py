# address_capture/core/fetch/robots.py
"""
robots.txt check using urllib.robotparser with a pluggable fetch.
"""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import urljoin, urlparse
from urllib.robotparser import RobotFileParser

# Fetch signature: (url) -> (status_code, body_text)
FetchFn = Callable[[str], tuple[int, str]]


def robots_url_for(url: str) -> str:
    parsed = urlparse(url)
    return urljoin(f"{parsed.scheme}://{parsed.netloc}", "/robots.txt")


def is_allowed(url: str, ua: str, fetch: FetchFn) -> bool:
    """
    True if `ua` may fetch `url` per robots.txt.
    An unreachable or empty robots.txt allows everything.
    """
    status, text = fetch(robots_url_for(url))
    if status >= 400 or not text:
        return True

    rp = RobotFileParser()
    rp.parse(text.splitlines())
    return rp.can_fetch(ua, url)
