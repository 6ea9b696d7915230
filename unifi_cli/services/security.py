"""Security Service: IPS, ad blocking and DNS filtering settings."""

from typing import Any

from unifi_cli.services.base import BaseService

IPS_SETTING = "ips"


class SecurityService(BaseService):

    async def get_settings(self) -> dict[str, Any]:
        return await self.client.get_setting(IPS_SETTING)
