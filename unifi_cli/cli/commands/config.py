"""
Config Command.

Stores the router host and API key in the user config file.
"""

from typing import Any, Optional

import typer

from unifi_cli.cli.runner import fail, print_json
from unifi_cli.core.config import RouterConfig, get_config_path, load_config, save_config
from unifi_cli.core.exceptions import ConfigurationError
from unifi_cli.core.logging import get_logger

logger = get_logger(__name__)


def _mask(api_key: str | None) -> str | None:
    """Hide all but the last four characters of an API key."""
    if not api_key:
        return None
    if len(api_key) <= 4:
        return "****"
    return f"****{api_key[-4:]}"


def _summary(config: RouterConfig, path: str) -> dict[str, Any]:
    return {
        "config_path": path,
        "base_url": config.base_url,
        "api_key": _mask(config.api_key),
    }


def config(
    host: Optional[str] = typer.Option(
        None, "--host", "-H", help="UniFi controller/UDM host or URL (e.g., 192.168.2.1)",
    ),
    api_key: Optional[str] = typer.Option(None, "--api-key", "-a", help="API key"),
    show: bool = typer.Option(False, "--show", help="Show the stored config instead of changing it"),
) -> None:
    """
    Configure host and API key.

    With no options, prompts for both. Options given on the command line
    replace only the matching stored value.

    Examples:
        unifi config --host 192.168.2.1 --api-key KEY
        unifi config --show
    """
    path = get_config_path()

    if show:
        try:
            current = load_config(path)
        except ConfigurationError as e:
            fail(e)
        print_json(_summary(current, str(path)))
        return

    try:
        current = load_config(path)
    except ConfigurationError as e:
        # An unreadable file is replaced by what the user enters now.
        logger.warning("Ignoring unreadable config file", path=str(path), error=e.message)
        current = RouterConfig()

    if host is None and api_key is None:
        host = typer.prompt("Router host", default=current.base_url or None)
        api_key = typer.prompt(
            "API key",
            default=current.api_key or None,
            hide_input=True,
            show_default=False,
        )

    updates: dict[str, Any] = {}
    if host is not None:
        updates["base_url"] = host
    if api_key is not None:
        updates["api_key"] = api_key

    updated = RouterConfig.model_validate({**current.model_dump(), **updates})
    saved_path = save_config(updated, path)
    logger.info("Config saved", path=str(saved_path))
    print_json(_summary(updated, str(saved_path)))
