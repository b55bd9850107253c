"""
HTTP Client for Home Assistant.

Provides a synchronous HTTP client for the Home Assistant REST API.
Every request carries the bearer access token. Responses are decoded
into typed records with pydantic.
"""

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from hassctl.core.config import ConnectionConfig, get_connection_config
from hassctl.core.exceptions import TransportError
from hassctl.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

T = TypeVar("T")


class HomeAssistantClient:
    """
    HTTP client for Home Assistant REST API communication.

    Features:
    - Base URL built from the resolved connection config
    - Bearer token on every request
    - Structured logging of requests/responses
    - All failures surfaced as TransportError

    Usage:
        with HomeAssistantClient(config) as client:
            states = client.get("/api/states", list[EntityState])
            client.post("/api/services/scene/turn_on", {"entity_id": "scene.a"}, list[EntityState])
    """

    def __init__(
        self,
        config: ConnectionConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Resolved connection settings.
            transport: Optional httpx transport, used by tests to stub the server.
        """
        self.config = config
        self.base_url = config.base_url
        self._transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "HomeAssistantClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def build_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers={
                    "Authorization": f"Bearer {self.config.access_token.get_secret_value()}",
                    "Content-Type": "application/json",
                },
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    def request(self, method: str, path: str, response_type: Any, **kwargs: Any) -> Any:
        """
        Make an HTTP request and decode the JSON response.

        Args:
            method: HTTP method (GET, POST)
            path: API path (e.g., /api/states)
            response_type: Type the JSON body is validated against
            **kwargs: Additional arguments for httpx

        Returns:
            The decoded response body.

        Raises:
            TransportError: On network failure, non-2xx status, or a body
                that is not valid JSON of the expected shape.
        """
        client = self._get_client()
        url = self.build_url(path)

        log_with_source(logger, "cli", "debug", "API request", method=method, path=path)

        try:
            response = client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger, "cli", "error", "API request failed",
                method=method, path=path, error=str(e),
            )
            raise TransportError(str(e) or type(e).__name__, method, path) from e

        log_with_source(
            logger, "cli", "debug", "API response",
            method=method, path=path, status_code=response.status_code,
        )

        if response.is_error:
            message = response.reason_phrase or "Request failed"
            if response.status_code == 401:
                message = "Unauthorized, check the access token"
            raise TransportError(message, method, path, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise TransportError(
                "Response is not valid JSON", method, path, status_code=response.status_code,
            ) from e

        try:
            return TypeAdapter(response_type).validate_python(payload)
        except ValidationError as e:
            raise TransportError(
                f"Unexpected response shape: {e.error_count()} validation error(s)",
                method, path, status_code=response.status_code,
            ) from e

    def get(self, path: str, response_type: type[T]) -> T:
        """Make a GET request."""
        return self.request("GET", path, response_type)

    def post(self, path: str, body: Any, response_type: type[T]) -> T:
        """Make a POST request with a JSON body."""
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json")
        return self.request("POST", path, response_type, json=body)


def get_hass_client() -> HomeAssistantClient:
    """
    Create a client from the process connection config.

    Raises:
        ConfigurationError: If the connection settings cannot be resolved.
    """
    return HomeAssistantClient(get_connection_config())
