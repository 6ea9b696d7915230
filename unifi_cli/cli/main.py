"""
UniFi CLI.

Command-line client for the UniFi router management API.
Built with Typer for type-safe commands and Rich for JSON output.

Usage:
    unifi --help                                    # Show help

    # Setup
    unifi config --host 192.168.1.1 --api-key KEY   # Store host and API key
    unifi config --show                             # Show stored config

    # Resources
    unifi internet all                              # WAN settings
    unifi dns list                                  # Static DNS records
    unifi firewall rules                            # Firewall rules
    unifi clients online                            # Online clients
    unifi vpn servers                               # WireGuard/OpenVPN servers

Options:
    --verbose, -v     Enable verbose output (INFO level logging)
    --debug, -d       Enable debug mode (DEBUG level logging)
    --help            Show help message
"""

import typer

from unifi_cli.cli.commands import clients_app, dns_app, firewall_app, internet_app, vpn_app
from unifi_cli.cli.commands import config as config_commands
from unifi_cli.cli.commands import resources
from unifi_cli.core.logging import setup_logging

app = typer.Typer(
    name="unifi",
    help="CLI tool to access UniFi router API. Results are printed as JSON.",
    no_args_is_help=True,
)

app.command("config")(config_commands.config)

# Register command groups
app.add_typer(internet_app, name="internet")
app.add_typer(dns_app, name="dns")
app.add_typer(firewall_app, name="firewall")
app.add_typer(clients_app, name="clients")
app.add_typer(vpn_app, name="vpn")

# Single-action resources
app.command("networks")(resources.networks)
app.command("wifi")(resources.wifi)
app.command("devices")(resources.devices)
app.command("security")(resources.security)


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    UniFi router CLI.

    Networks, clients, firewall rules, DNS records, WiFi, VPN, devices and
    security settings. Every command prints JSON to stdout.
    """
    if debug:
        setup_logging(level="DEBUG")
    elif verbose:
        setup_logging(level="INFO")
    else:
        setup_logging()


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
