"""
Root Pytest Fixtures.

Shared fixtures available to all tests. Every test runs with a clean
HASSCTL_* environment, an empty working directory (so no stray .env is
picked up), and fresh configuration caches.
"""

import json
import logging
from collections.abc import Callable
from typing import Any

import httpx
import pytest
from pydantic import SecretStr

from hassctl.client import HomeAssistantClient
from hassctl.core.config import ConnectionConfig, get_app_config, get_connection_config

ENV_KEYS = ("HASSCTL_ACCESS_TOKEN", "HASSCTL_HOST", "HASSCTL_PORT")


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path, monkeypatch):
    """Clear connection env vars and caches, run from an empty directory."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_app_config.cache_clear()
    get_connection_config.cache_clear()
    yield
    get_app_config.cache_clear()
    get_connection_config.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo handlers installed by setup_logging, which bind to captured streams."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def hass_env(monkeypatch) -> dict[str, str]:
    """Set a complete, valid connection environment."""
    values = {
        "HASSCTL_ACCESS_TOKEN": "test-token",
        "HASSCTL_HOST": "hass.test",
        "HASSCTL_PORT": "8123",
    }
    for key, value in values.items():
        monkeypatch.setenv(key, value)
    return values


# =============================================================================
# Payloads
# =============================================================================


def make_state(entity_id: str, state: str = "on", **attributes: Any) -> dict[str, Any]:
    """Build a /api/states record."""
    return {
        "entity_id": entity_id,
        "state": state,
        "last_changed": "2024-01-01T00:00:00+00:00",
        "last_updated": "2024-01-01T00:00:00+00:00",
        "attributes": attributes,
        "context": {"id": "01H", "parent_id": None, "user_id": None},
    }


@pytest.fixture
def states_payload() -> list[dict[str, Any]]:
    return [
        make_state("scene.movie_night", "scening", friendly_name="Movie Night"),
        make_state("light.kitchen", "on", friendly_name="Kitchen", brightness=255),
        make_state("lighting.strip", "off"),
        make_state("switch.fan", "off", friendly_name="Fan"),
        make_state("scene.bright", "scening"),
    ]


@pytest.fixture
def services_payload() -> list[dict[str, Any]]:
    return [
        {
            "domain": "light",
            "services": {
                "turn_on": {
                    "name": "Turn on",
                    "description": "Turn on one or more lights.",
                    "fields": {
                        "brightness": {"name": "Brightness", "description": "Level", "selector": {"number": {}}},
                    },
                    "target": {"entity": [{"domain": ["light"]}]},
                },
                "toggle": {
                    "name": "Toggle",
                    "fields": {},
                    "target": {"entity": [{"domain": ["light", "switch"], "supported_features": [1]}]},
                },
            },
        },
        {
            "domain": "homeassistant",
            "services": {
                "update_entity": {
                    "name": "Update entity",
                    "description": "Force one or more entities to update.",
                    "fields": {},
                },
            },
        },
    ]


# =============================================================================
# Transport
# =============================================================================


class RecordingHandler:
    """httpx.MockTransport handler that records requests and serves routes."""

    def __init__(self, routes: dict[tuple[str, str], Any] | None = None) -> None:
        self.routes = routes or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"message": "Entity not found."})
        route = self.routes[key]
        if isinstance(route, httpx.Response):
            return route
        if isinstance(route, Exception):
            raise route
        return httpx.Response(200, json=route)

    def bodies(self) -> list[Any]:
        return [json.loads(r.content) for r in self.requests if r.content]


@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig(host="hass.test", port=8123, access_token=SecretStr("test-token"))


@pytest.fixture
def make_client(connection_config) -> Callable[[RecordingHandler], HomeAssistantClient]:
    """Build a HomeAssistantClient served by a RecordingHandler."""

    def factory(handler: RecordingHandler) -> HomeAssistantClient:
        return HomeAssistantClient(connection_config, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def state_record() -> Callable[..., dict[str, Any]]:
    """Provide make_state for building state records in tests."""
    return make_state


@pytest.fixture
def routes_handler() -> type[RecordingHandler]:
    """Provide RecordingHandler for serving canned API routes."""
    return RecordingHandler
