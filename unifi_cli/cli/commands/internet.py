"""
Internet Commands.

WAN uplink settings.
"""

import typer

from unifi_cli.cli.runner import run_request
from unifi_cli.services.internet import InternetService

app = typer.Typer(help="Internet/WAN settings", no_args_is_help=True)


@app.command("all")
def show_all() -> None:
    """Show all WAN settings."""
    run_request(lambda client: InternetService(client).get_wan_settings())


@app.command()
def dns() -> None:
    """
    Show WAN DNS settings.

    Prints the DNS preference (auto/manual) and servers for IPv4 and IPv6.
    """
    run_request(lambda client: InternetService(client).get_dns_settings())
