# tests/conftest.py
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from address_capture.schemas.models import WEBHOOK_URL_ENV
from tests.utils import (
    DEFAULT_PROPERTY_HTML,
    DEFAULT_URL,
    make_document_from_html,
    make_property_html,
    write_html,
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    # never pick up a real webhook or debug switch from the developer's shell
    monkeypatch.delenv(WEBHOOK_URL_ENV, raising=False)
    monkeypatch.delenv("ADDRESS_CAPTURE_DEBUG", raising=False)
    yield


@pytest.fixture(autouse=True)
def _restore_package_logger():
    # CLI runs attach handlers to the package logger; drop them after each test
    logger = logging.getLogger("address_capture")
    level, handlers = logger.level, list(logger.handlers)
    yield
    for h in list(logger.handlers):
        if h not in handlers:
            logger.removeHandler(h)
            h.close()
    logger.setLevel(level)


# -------- Document fixtures --------
@pytest.fixture
def property_document():
    """Default listing page: container present, all four parts inside it."""
    return make_document_from_html(DEFAULT_PROPERTY_HTML)


@pytest.fixture
def document_factory():
    """
    Callable factory building a SoupDocument from listing parts.

    Usage:
        doc = document_factory(street=None, container=False)
        doc = document_factory(html="<html>...</html>", url=None)
    """

    def _factory(*, html: str | None = None, url: str | None = DEFAULT_URL, **parts):
        return make_document_from_html(html if html is not None else make_property_html(**parts), url=url)

    return _factory


@pytest.fixture
def html_file_factory(tmp_path: Path):
    """Callable writing HTML into tmp_path and returning the file path."""

    def _factory(html: str = DEFAULT_PROPERTY_HTML, filename: str = "listing.html") -> Path:
        return write_html(tmp_path, html, filename=filename)

    return _factory


class FakeResponse:
    """Tiny stand-in for requests.Response."""

    def __init__(self, *, status: int = 200, body: bytes = b"", reason: str = "OK"):
        self.status_code = status
        self.content = body
        self.reason = reason

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="ignore")


@pytest.fixture
def fake_response():
    return FakeResponse


# -------- Pytest markers --------
def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks integration tests")
