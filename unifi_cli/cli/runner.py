"""
Command Runner.

Every router command goes through run_request: build the client, run one
service coroutine, print the result as JSON, close the client. Application
errors are printed to stderr and end the command with exit status 1.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, NoReturn

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from unifi_cli.client import RouterClient, get_router_client
from unifi_cli.core.exceptions import ApplicationError
from unifi_cli.core.logging import get_logger

logger = get_logger(__name__)

console = Console()
err_console = Console(stderr=True)

Operation = Callable[[RouterClient], Awaitable[Any]]


def print_json(data: Any) -> None:
    """Print a result to stdout as indented JSON."""
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    console.print_json(data=data)


def fail(error: ApplicationError) -> NoReturn:
    """Report an application error and exit with status 1."""
    logger.debug("Command failed", code=error.code, error=error.message)
    err_console.print(f"[red]Error:[/red] {escape(error.message)}", soft_wrap=True)
    raise typer.Exit(1)


def run_request(operation: Operation) -> None:
    """
    Run a service call against the configured router and print its result.

    Args:
        operation: Coroutine function taking the RouterClient
    """
    result = asyncio.run(_execute(operation))
    print_json(result)


async def _execute(operation: Operation) -> Any:
    """Async implementation of run_request."""
    try:
        client = get_router_client()
    except ApplicationError as e:
        fail(e)

    try:
        return await operation(client)
    except ApplicationError as e:
        fail(e)
    finally:
        await client.close()
