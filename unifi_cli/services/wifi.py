"""WiFi Service: WLAN configurations."""

from typing import Any

from unifi_cli.services.base import BaseService

WLAN_RESOURCE = "wlanconf"


class WifiService(BaseService):

    async def list_wlans(self) -> Any:
        return await self.client.get_rest(WLAN_RESOURCE)
