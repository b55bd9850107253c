"""
Configuration Management.

Loads application settings from hassctl/settings/*.yaml and resolves the
Home Assistant connection (host, port, access token) from the environment.

Settings (YAML):
    application.yaml   - App identity, connection defaults, env var names
    logging.yaml       - Logging configuration

Connection (environment):
    HASSCTL_ACCESS_TOKEN  - required, falls back to the .env file
    HASSCTL_HOST          - required, environment only
    HASSCTL_PORT          - optional, defaults to 8123

Each connection value is looked up through an ordered list of sources.
The first source that returns a value wins.
"""

import os
from collections.abc import Callable, Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values, find_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from hassctl.core.config_schema import ApplicationSchema, LoggingSchema
from hassctl.core.exceptions import (
    InvalidAccessTokenError,
    InvalidHostError,
    InvalidPortError,
    MissingAccessTokenError,
    MissingHostError,
)

SETTINGS_DIR = Path(__file__).resolve().parent.parent / "settings"

Source = Callable[[str], str | None]
"""A lookup function returning the value for a key, or None if absent."""


def load_yaml_config(filename: str, settings_dir: Path | None = None) -> dict[str, Any]:
    """Load a YAML configuration file from hassctl/settings/."""
    config_path = (settings_dir or SETTINGS_DIR) / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type, filename: str, settings_dir: Path | None = None) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename, settings_dir)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed, frozen Pydantic model instances.
    """

    def __init__(self, settings_dir: Path | None = None) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml", settings_dir)
        self._logging = _load_validated(LoggingSchema, "logging.yaml", settings_dir)

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


# =============================================================================
# Connection sources
# =============================================================================


def environ_source(key: str) -> str | None:
    """Look up a key in the process environment."""
    return os.environ.get(key)


def dotenv_source(filename: str = ".env") -> Source:
    """
    Build a source reading from a dotenv file.

    The file is searched upwards from the current working directory and
    parsed on first lookup. Nothing is exported into os.environ.
    """
    values: dict[str, str | None] | None = None

    def lookup(key: str) -> str | None:
        nonlocal values
        if values is None:
            path = find_dotenv(filename, usecwd=True)
            values = dict(dotenv_values(path)) if path else {}
        return values.get(key)

    return lookup


def lookup(key: str, sources: Sequence[Source]) -> str | None:
    """Query sources in priority order and return the first present value."""
    for source in sources:
        value = source(key)
        if value is not None:
            return value
    return None


# =============================================================================
# Connection configuration
# =============================================================================


class ConnectionConfig(BaseModel):
    """Resolved connection settings. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int = Field(ge=0, le=65535)
    access_token: SecretStr
    scheme: str = "http"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"


def _missing_token_message(app_name: str, token_key: str) -> str:
    return (
        "Missing access token\n"
        "\n"
        f"To authenticate requests to Home Assistant, {app_name}\n"
        "needs to have an access token.\n"
        "\n"
        "Go to your profile in the Home Assistant dashboard,\n"
        "and select the Security tab. Create a long-lived token,\n"
        "and make sure to copy the token.\n"
        "\n"
        f"Then create an environment variable named {token_key}\n"
        "with the access token as value, or add it to a .env file."
    )


def _validate_token(token: str, token_key: str) -> str:
    if not token or any(ch.isspace() or not ch.isprintable() for ch in token):
        raise InvalidAccessTokenError(
            "Invalid access token!\n"
            "\n"
            f"The value of {token_key} must be a non-empty token\n"
            "without whitespace or control characters."
        )
    return token


def _validate_host(host: str, host_key: str) -> str:
    if not host or any(ch.isspace() for ch in host) or any(ch in host for ch in "/?#@"):
        raise InvalidHostError(
            "Invalid host.\n"
            "\n"
            f"{host_key} must be a bare hostname or IP address\n"
            "without scheme or path, e.g. homeassistant.local"
        )
    return host


def _parse_port(raw: str, port_key: str) -> int:
    digits = raw[1:] if raw.startswith("+") else raw
    if not (digits.isascii() and digits.isdigit()) or int(digits) > 65535:
        raise InvalidPortError(
            "Invalid port.\n"
            "\n"
            f"{port_key} must be a number between 0 and 65535, got {raw!r}."
        )
    return int(digits)


def resolve_connection_config(
    token_sources: Sequence[Source] | None = None,
    host_sources: Sequence[Source] | None = None,
    port_sources: Sequence[Source] | None = None,
    app_config: AppConfig | None = None,
) -> ConnectionConfig:
    """
    Resolve and validate the connection settings.

    Checks run in order: access token, host, port. The first failure
    raises the matching ConfigurationError subclass.

    Args:
        token_sources: Sources for the access token. Defaults to the
            environment, then the .env file.
        host_sources: Sources for the host. Defaults to the environment.
        port_sources: Sources for the port. Defaults to the environment.
        app_config: Application config. Defaults to the cached instance.

    Returns:
        Validated, frozen ConnectionConfig.
    """
    application = (app_config or get_app_config()).application
    connection = application.connection
    env = connection.env

    if token_sources is None:
        token_sources = [environ_source, dotenv_source(connection.dotenv_file)]
    if host_sources is None:
        host_sources = [environ_source]
    if port_sources is None:
        port_sources = [environ_source]

    token = lookup(env.access_token, token_sources)
    if token is None:
        raise MissingAccessTokenError(_missing_token_message(application.name, env.access_token))
    token = _validate_token(token, env.access_token)

    host = lookup(env.host, host_sources)
    if host is None:
        raise MissingHostError(
            "Missing host.\n"
            "\n"
            f"Host must be specified in the environment variable {env.host}.\n"
        )
    host = _validate_host(host, env.host)

    raw_port = lookup(env.port, port_sources)
    port = connection.default_port if raw_port is None else _parse_port(raw_port, env.port)

    return ConnectionConfig(
        host=host,
        port=port,
        access_token=SecretStr(token),
        scheme=connection.scheme,
    )


@lru_cache
def get_connection_config() -> ConnectionConfig:
    """Get the cached connection configuration, resolved once per process."""
    return resolve_connection_config()
