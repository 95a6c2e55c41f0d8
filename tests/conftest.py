import logging

import httpx
import pytest

from bionic_reading import Client

API_KEY = "test-rapidapi-key-1234"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it served."""

    def __init__(self, handler):
        self.requests = []

        def record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def _html_response(status_code: int = 200, content: bytes = b"<b>hel</b>lo"):
    return httpx.Response(
        status_code,
        content=content,
        headers={"Content-Type": "text/html; charset=utf-8"},
    )


@pytest.fixture
def api_key():
    return API_KEY


@pytest.fixture
def make_client():
    """Build a client whose requests are answered by the given handler."""

    def _make(handler, base_url: str = "https://bionic-reading1.p.rapidapi.com"):
        transport = RecordingTransport(handler)
        return Client.create(API_KEY, base_url=base_url, transport=transport), transport

    return _make


@pytest.fixture
def html_response():
    """Factory for HTML responses as the API sends them."""
    return _html_response


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from the caller's environment and any .env file."""
    for name in ("API_KEY", "BASE_URL", "LOG_LEVEL", "DEBUG"):
        monkeypatch.delenv(f"BIONIC_READING_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def package_logger():
    """The package logger, restored to its prior state after the test."""
    logger = logging.getLogger("bionic_reading")
    handlers, level = list(logger.handlers), logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
