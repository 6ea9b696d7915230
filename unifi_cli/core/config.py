"""
Configuration Management.

Two sources, each with one job:

User config (JSON):
    <user config dir>/unifi/config.json holds the router base URL and API key.
    Written by `unifi config`, read once per invocation.

Environment (UNIFI_*):
    UNIFI_BASE_URL, UNIFI_API_KEY, UNIFI_SITE, UNIFI_VERIFY_SSL override the
    file and the packaged defaults.

Settings (YAML, packaged with the application):
    application.yaml   - App identity, controller defaults, API path conventions
    logging.yaml       - Logging configuration
"""

import os
import stat
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from unifi_cli.core.config_schema import ApplicationSchema, LoggingSchema
from unifi_cli.core.exceptions import ConfigurationError

APP_DIR_NAME = "unifi"
CONFIG_FILENAME = "config.json"
SETTINGS_DIR = Path(__file__).resolve().parent.parent / "config"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (XDG on Linux, APPDATA on Windows)."""
    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_DIR_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME
    return Path.home() / ".config" / APP_DIR_NAME


def get_config_path() -> Path:
    return get_user_config_dir() / CONFIG_FILENAME


def normalize_base_url(host: str) -> str:
    """Turn a bare host (192.168.1.1) into a base URL (https://192.168.1.1)."""
    host = host.strip().rstrip("/")
    if not host.startswith("http"):
        host = f"https://{host}"
    return host


# =============================================================================
# Packaged YAML settings
# =============================================================================


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from unifi_cli/config/."""
    config_path = SETTINGS_DIR / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except PydanticValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from the packaged YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

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
# User config file
# =============================================================================


class RouterConfig(BaseModel):
    """Connection details persisted by `unifi config`."""

    model_config = ConfigDict(extra="ignore")

    # Older config files stored the bare host under "host".
    base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("base_url", "host"),
    )
    api_key: str | None = None

    @field_validator("base_url")
    @classmethod
    def _normalize(cls, value: str | None) -> str | None:
        if not value:
            return None
        return normalize_base_url(value)


def load_config(path: Path | None = None) -> RouterConfig:
    """
    Read the user config file.

    A missing file yields an empty config so `unifi config` can fill it in.

    Raises:
        ConfigurationError: If the file exists but is not a valid config
    """
    path = path or get_config_path()
    if not path.exists():
        return RouterConfig()

    try:
        return RouterConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigurationError(
            f"Invalid config file {path}: {e}",
            code="CONFIG_INVALID",
        ) from e


def save_config(config: RouterConfig, path: Path | None = None) -> Path:
    """Write the user config file (owner read/write only). Returns its path."""
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2) + "\n", encoding="utf-8")
    os.chmod(path, stat.S_IRUSR | stat.S_IWUSR)
    return path


# =============================================================================
# Environment overrides and resolved connection
# =============================================================================


class Settings(BaseSettings):
    """Overrides read from UNIFI_* environment variables."""

    base_url: str | None = None
    api_key: str | None = None
    site: str | None = None
    verify_ssl: bool | None = None

    model_config = SettingsConfigDict(
        env_prefix="UNIFI_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached environment overrides.

    Raises:
        ConfigurationError: If a UNIFI_* variable has an invalid value
    """
    try:
        return Settings()
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid environment settings: {e}",
            code="CONFIG_INVALID",
        ) from e


class ConnectionConfig(BaseModel):
    """Everything RouterClient needs to talk to the router."""

    base_url: str
    api_key: str
    site: str
    verify_ssl: bool
    timeout: float


def resolve_connection(path: Path | None = None) -> ConnectionConfig:
    """
    Combine environment, user config file and packaged defaults.

    Environment values win over the file; the file wins over defaults.

    Raises:
        ConfigurationError: If no base URL or API key is available
    """
    env = get_settings()
    stored = load_config(path)
    controller = get_app_config().application.controller

    base_url = normalize_base_url(env.base_url) if env.base_url else stored.base_url
    if not base_url:
        raise ConfigurationError("Not configured. Run 'unifi config' first")

    api_key = env.api_key or stored.api_key
    if not api_key:
        raise ConfigurationError("API key not configured. Run 'unifi config' first")

    return ConnectionConfig(
        base_url=base_url,
        api_key=api_key,
        site=env.site or controller.site,
        verify_ssl=env.verify_ssl if env.verify_ssl is not None else controller.verify_ssl,
        timeout=controller.timeout,
    )
