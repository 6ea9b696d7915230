"""
Read-only Resource Commands.

Single-action resource families registered directly on the main app.
"""

from unifi_cli.cli.runner import run_request
from unifi_cli.services.devices import DeviceService
from unifi_cli.services.networks import NetworkService
from unifi_cli.services.security import SecurityService
from unifi_cli.services.wifi import WifiService


def networks() -> None:
    """Network/VLAN settings."""
    run_request(lambda client: NetworkService(client).list_networks())


def wifi() -> None:
    """WiFi/WLAN settings."""
    run_request(lambda client: WifiService(client).list_wlans())


def devices() -> None:
    """UniFi devices (APs, switches, gateways)."""
    run_request(lambda client: DeviceService(client).list_devices())


def security() -> None:
    """Security settings (IPS, ad blocking, DNS filtering)."""
    run_request(lambda client: SecurityService(client).get_settings())
