"""
CLI Commands.

Organized by resource family.
"""

from unifi_cli.cli.commands.clients import app as clients_app
from unifi_cli.cli.commands.dns import app as dns_app
from unifi_cli.cli.commands.firewall import app as firewall_app
from unifi_cli.cli.commands.internet import app as internet_app
from unifi_cli.cli.commands.vpn import app as vpn_app

__all__ = [
    "clients_app",
    "dns_app",
    "firewall_app",
    "internet_app",
    "vpn_app",
]
