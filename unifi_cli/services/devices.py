"""Device Service: adopted UniFi devices (gateways, switches, APs)."""

from typing import Any

from unifi_cli.services.base import BaseService

DEVICE_STAT = "device"


class DeviceService(BaseService):

    async def list_devices(self) -> Any:
        return await self.client.get_stat(DEVICE_STAT)
