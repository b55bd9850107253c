"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML settings file.
Used by AppConfig to validate configuration at load time. If a YAML file
has missing keys, wrong types, or unknown fields, a clear ValidationError
is raised at startup instead of a cryptic KeyError deep in application code.

Each top-level class corresponds to one file in hassctl/settings/:
    ApplicationSchema  → application.yaml
    LoggingSchema      → logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid", frozen=True)


# =============================================================================
# application.yaml
# =============================================================================


class EnvNamesSchema(_StrictBase):
    access_token: str
    host: str
    port: str


class ConnectionSchema(_StrictBase):
    scheme: Literal["http", "https"]
    default_port: int = Field(ge=0, le=65535)
    dotenv_file: str
    env: EnvNamesSchema


class SelectorSchema(_StrictBase):
    max_length: int = Field(gt=0)


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    connection: ConnectionSchema
    selector: SelectorSchema


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool
    stream: Literal["stdout", "stderr"]


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["console", "json"]
    handlers: HandlersSchema
