"""
VPN Service.

Teleport and site-to-site are single settings records. Servers and clients
are collected from endpoints that a gateway without VPN configured may not
serve at all, so their failures degrade to empty results.
"""

from typing import Any

from unifi_cli.core.exceptions import ExternalServiceError, NotFoundError
from unifi_cli.services.base import BaseService

TELEPORT_SETTING = "teleport"
SITE_TO_SITE_SETTING = "magic_site_to_site_vpn"
OPENVPN_SETTING = "openvpn"
WIREGUARD_RESOURCE = "wg"
REMOTE_SITE_IPSEC_RESOURCE = "remotesiteipsec"


class VpnService(BaseService):
    """Service for Teleport, site-to-site, WireGuard/OpenVPN servers and IPsec clients."""

    async def get_teleport(self) -> dict[str, Any]:
        return await self.client.get_setting(TELEPORT_SETTING)

    async def get_site_to_site(self) -> dict[str, Any]:
        return await self.client.get_setting(SITE_TO_SITE_SETTING)

    async def list_servers(self) -> dict[str, Any]:
        """
        VPN servers keyed by kind.

        Returns:
            {"wireguard": [...]} plus "openvpn" when that setting exists.
            WireGuard falls back to [] if its endpoint fails.
        """
        try:
            wireguard = await self.client.get_rest(WIREGUARD_RESOURCE)
        except ExternalServiceError as e:
            self._logger.warning("WireGuard servers unavailable", error=e.message)
            wireguard = []

        result: dict[str, Any] = {"wireguard": wireguard}

        try:
            result["openvpn"] = await self.client.get_setting(OPENVPN_SETTING)
        except (ExternalServiceError, NotFoundError) as e:
            self._logger.warning("OpenVPN settings unavailable", error=e.message)

        return result

    async def list_clients(self) -> Any:
        """Remote-site IPsec clients; [] when none are configured."""
        try:
            return await self.client.get_rest(REMOTE_SITE_IPSEC_RESOURCE)
        except ExternalServiceError as e:
            self._logger.warning("VPN clients unavailable", error=e.message)
            return []
