"""
Internet Service.

WAN settings are not a resource of their own: they are the networkconf
record whose purpose is "wan".
"""

from typing import Any

from unifi_cli.core.exceptions import NotFoundError
from unifi_cli.schemas.internet import WanDnsSettings
from unifi_cli.services.base import BaseService
from unifi_cli.services.networks import NETWORKS_RESOURCE


class InternetService(BaseService):
    """Service for WAN/Internet settings."""

    async def get_wan_settings(self) -> dict[str, Any]:
        """
        Get the WAN network record.

        Raises:
            NotFoundError: If no network has purpose "wan"
        """
        networks = await self.client.get_rest(NETWORKS_RESOURCE)
        for network in networks or []:
            if isinstance(network, dict) and network.get("purpose") == "wan":
                return network
        raise NotFoundError("No WAN network found")

    async def get_dns_settings(self) -> WanDnsSettings:
        """Get the WAN DNS servers and preferences."""
        return WanDnsSettings.from_network(await self.get_wan_settings())
