"""
VPN Commands.

Teleport, site-to-site, and VPN servers/clients.
"""

import typer

from unifi_cli.cli.runner import run_request
from unifi_cli.services.vpn import VpnService

app = typer.Typer(help="VPN settings (Teleport, WireGuard)", no_args_is_help=True)


@app.command()
def teleport() -> None:
    """Show Teleport VPN settings."""
    run_request(lambda client: VpnService(client).get_teleport())


@app.command("site-to-site")
def site_to_site() -> None:
    """Show Site-to-Site VPN settings."""
    run_request(lambda client: VpnService(client).get_site_to_site())


@app.command()
def servers() -> None:
    """
    List VPN servers.

    WireGuard servers and, when configured, the OpenVPN server setting.
    """
    run_request(lambda client: VpnService(client).list_servers())


@app.command()
def clients() -> None:
    """List VPN clients (remote-site IPsec)."""
    run_request(lambda client: VpnService(client).list_clients())
