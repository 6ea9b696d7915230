"""
Configuration Schemas.

Pydantic models defining the expected structure of each packaged YAML file.
Used by AppConfig to validate configuration at load time. If a YAML file
has missing keys, wrong types, or unknown fields, a clear ValidationError
is raised at startup instead of a cryptic KeyError deep in application code.

Each top-level class corresponds to one file in unifi_cli/config/:
    ApplicationSchema  → application.yaml
    LoggingSchema      → logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ControllerSchema(_StrictBase):
    site: str
    api_key_header: str
    verify_ssl: bool
    timeout: float


class PathsSchema(_StrictBase):
    rest: str
    v2: str
    stat: str
    cmd: str


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    controller: ControllerSchema
    paths: PathsSchema


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int
    backup_count: int


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: str
    format: Literal["console", "json"]
    handlers: HandlersSchema
