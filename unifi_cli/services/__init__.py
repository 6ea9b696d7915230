"""
Resource Services.

One service per resource family. Each wraps a RouterClient and knows the
paths and create defaults for its resources.
"""

from unifi_cli.services.clients import ClientService
from unifi_cli.services.devices import DeviceService
from unifi_cli.services.dns import DnsService
from unifi_cli.services.firewall import FirewallService
from unifi_cli.services.internet import InternetService
from unifi_cli.services.networks import NetworkService
from unifi_cli.services.security import SecurityService
from unifi_cli.services.vpn import VpnService
from unifi_cli.services.wifi import WifiService

__all__ = [
    "ClientService",
    "DeviceService",
    "DnsService",
    "FirewallService",
    "InternetService",
    "NetworkService",
    "SecurityService",
    "VpnService",
    "WifiService",
]
