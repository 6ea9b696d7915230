"""
Root Pytest Fixtures.

Shared fixtures available to all tests.

Every test runs against an isolated user config directory and a clean
UNIFI_* environment, so nothing reads or writes the real ~/.config/unifi.

Router HTTP traffic is served by MockRouter through httpx.MockTransport:

    def test_rules(mock_router):
        mock_router.add("GET", "/proxy/network/api/s/default/rest/firewallrule",
                        json={"meta": {"rc": "ok"}, "data": []})
        client = mock_router.client()
"""

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

from unifi_cli.client import RouterClient
from unifi_cli.core.config import get_app_config, get_settings

BASE_URL = "https://router.test"
API_KEY = "test-api-key"


class MockRouter:
    """
    Scripted router for httpx.MockTransport.

    Routes are keyed by (method, path). Unknown routes answer 404 with
    body "not found". Every request is recorded in order.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        json: Any = None,
        status_code: int = 200,
        text: str | None = None,
    ) -> None:
        if text is not None:
            response = httpx.Response(status_code, text=text)
        else:
            response = httpx.Response(status_code, json=json)
        self.routes[(method, path)] = response

    def fail(self, method: str, path: str, error: Exception) -> None:
        """Make a route raise a transport error instead of answering."""
        self.routes[(method, path)] = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        return route

    def client(self) -> RouterClient:
        return RouterClient(BASE_URL, API_KEY, transport=httpx.MockTransport(self.handler))

    def sent_json(self, index: int = -1) -> Any:
        """Decoded JSON body of a recorded request."""
        return json.loads(self.requests[index].content)

    def calls(self, method: str) -> list[httpx.Request]:
        return [request for request in self.requests if request.method == method]


@pytest.fixture
def mock_router() -> MockRouter:
    """Provide a fresh scripted router."""
    return MockRouter()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """
    Point the user config directory at tmp_path and clear UNIFI_* overrides.

    Yields:
        The directory that will hold unifi/config.json
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("UNIFI_BASE_URL", "UNIFI_API_KEY", "UNIFI_SITE", "UNIFI_VERIFY_SSL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield tmp_path
    get_settings.cache_clear()
    get_app_config.cache_clear()


def _envelope(data: Any) -> dict[str, Any]:
    return {"meta": {"rc": "ok"}, "data": data}


@pytest.fixture
def envelope() -> Any:
    """Provide a helper that wraps records the way REST v1 endpoints do."""
    return _envelope


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None, None, None]:
    """Undo handler and level changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
