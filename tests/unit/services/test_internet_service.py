"""Unit tests for InternetService and WanDnsSettings."""

import pytest

from unifi_cli.core.exceptions import NotFoundError
from unifi_cli.schemas.internet import WanDnsSettings
from unifi_cli.services.internet import InternetService

NETWORKS = "/proxy/network/api/s/default/rest/networkconf"

WAN = {
    "_id": "wan1",
    "purpose": "wan",
    "wan_dns_preference": "manual",
    "wan_dns1": "1.1.1.1",
    "wan_dns2": "",
    "wan_ipv6_dns_preference": "",
}


class TestInternetService:

    @pytest.mark.asyncio
    async def test_wan_settings_is_wan_network(self, mock_router, envelope):
        mock_router.add("GET", NETWORKS, json=envelope([{"purpose": "corporate"}, WAN]))
        client = mock_router.client()

        assert await InternetService(client).get_wan_settings() == WAN
        await client.close()

    @pytest.mark.asyncio
    async def test_no_wan_raises_not_found(self, mock_router, envelope):
        mock_router.add("GET", NETWORKS, json=envelope([{"purpose": "corporate"}]))
        client = mock_router.client()

        with pytest.raises(NotFoundError, match="No WAN network found"):
            await InternetService(client).get_wan_settings()
        await client.close()

    @pytest.mark.asyncio
    async def test_dns_settings(self, mock_router, envelope):
        mock_router.add("GET", NETWORKS, json=envelope([WAN]))
        client = mock_router.client()

        settings = await InternetService(client).get_dns_settings()
        await client.close()

        assert settings == WanDnsSettings(
            mode="manual",
            dns1="1.1.1.1",
            dns2=None,
            mode_ipv6="auto",
            dns1_ipv6=None,
            dns2_ipv6=None,
        )


class TestWanDnsSettings:
    def test_empty_network_defaults(self):
        settings = WanDnsSettings.from_network({})

        assert settings.model_dump() == {
            "mode": "auto",
            "dns1": None,
            "dns2": None,
            "mode_ipv6": "auto",
            "dns1_ipv6": None,
            "dns2_ipv6": None,
        }
