"""
Client Commands.

Known, online and offline clients, and client reconnects.
"""

import typer

from unifi_cli.cli.runner import run_request
from unifi_cli.client import RouterClient
from unifi_cli.services.clients import ClientService

app = typer.Typer(help="Connected clients", no_args_is_help=True)


@app.command("all")
def list_all() -> None:
    """All known clients."""
    run_request(lambda client: ClientService(client).list_all())


@app.command()
def online() -> None:
    """Currently online clients."""
    run_request(lambda client: ClientService(client).list_online())


@app.command()
def offline() -> None:
    """Offline clients (known but not currently connected)."""
    run_request(lambda client: ClientService(client).list_offline())


@app.command()
def reconnect(
    mac: str = typer.Argument(..., help="Client MAC address (e.g., aa:bb:cc:dd:ee:ff)"),
) -> None:
    """
    Reconnect a client.

    Kicks the client off the network; it rejoins on its own.

    Examples:
        unifi clients reconnect aa:bb:cc:dd:ee:ff
    """

    async def _reconnect(client: RouterClient) -> dict:
        await ClientService(client).reconnect(mac)
        return {"mac": mac, "reconnecting": True}

    run_request(_reconnect)
