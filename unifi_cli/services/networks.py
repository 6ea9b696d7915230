"""Network Service: LANs, VLANs, WAN and VPN networks."""

from typing import Any

from unifi_cli.services.base import BaseService

NETWORKS_RESOURCE = "networkconf"


class NetworkService(BaseService):

    async def list_networks(self) -> Any:
        return await self.client.get_rest(NETWORKS_RESOURCE)
