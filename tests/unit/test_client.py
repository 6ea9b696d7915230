"""Unit tests for the router HTTP client."""

import httpx
import pytest

from unifi_cli.client import RouterClient, get_router_client
from unifi_cli.core.config import RouterConfig, save_config
from unifi_cli.core.exceptions import (
    ConfigurationError,
    NotFoundError,
    ResponseDecodeError,
    RouterAPIError,
    RouterTransportError,
)

REST = "/proxy/network/api/s/default/rest"


class TestRouterClient:
    """Tests for RouterClient construction and paths."""

    def test_defaults_from_application_yaml(self):
        client = RouterClient("https://router.test/", "key")

        assert client.base_url == "https://router.test"
        assert client.site == "default"
        assert client.verify_ssl is False
        assert client.timeout == 5.0

    def test_path_conventions(self):
        client = RouterClient("https://router.test", "key")

        assert client.rest_path("firewallrule") == "/proxy/network/api/s/default/rest/firewallrule"
        assert client.v2_path("static-dns") == "/proxy/network/v2/api/site/default/static-dns"
        assert client.setting_path("ips") == "/proxy/network/api/s/default/rest/setting/ips"
        assert client.stat_path("sta") == "/proxy/network/api/s/default/stat/sta"
        assert client.cmd_path("stamgr") == "/proxy/network/api/s/default/cmd/stamgr"

    def test_site_is_substituted(self):
        client = RouterClient("https://router.test", "key", site="branch")

        assert client.rest_path("user") == "/proxy/network/api/s/branch/rest/user"
        assert client.v2_path("trafficrules") == "/proxy/network/v2/api/site/branch/trafficrules"

    @pytest.mark.asyncio
    async def test_close_client(self):
        client = RouterClient("https://router.test", "key")
        await client._get_client()
        assert client._client is not None

        await client.close()
        assert client._client is None


class TestRequest:
    """Tests for request/response handling."""

    @pytest.mark.asyncio
    async def test_sends_api_key_header(self, mock_router, envelope):
        mock_router.add("GET", f"{REST}/networkconf", json=envelope([]))
        client = mock_router.client()

        await client.get_rest("networkconf")
        await client.close()

        request = mock_router.requests[0]
        assert request.headers["X-API-Key"] == "test-api-key"
        assert str(request.url) == f"https://router.test{REST}/networkconf"

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self, mock_router, envelope):
        mock_router.add("POST", f"{REST}/firewallrule", json=envelope([{"_id": "1"}]))
        client = mock_router.client()

        result = await client.post(f"{REST}/firewallrule", {"name": "x"})
        await client.close()

        assert result == envelope([{"_id": "1"}])
        assert mock_router.sent_json() == {"name": "x"}
        assert mock_router.requests[0].headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_non_2xx_raises_with_status_and_body(self, mock_router):
        mock_router.add("GET", f"{REST}/wlanconf", status_code=401, text='{"meta":{"rc":"error"}}')
        client = mock_router.client()

        with pytest.raises(RouterAPIError) as exc_info:
            await client.get_rest("wlanconf")
        await client.close()

        error = exc_info.value
        assert error.status_code == 401
        assert error.body == '{"meta":{"rc":"error"}}'
        assert "(401)" in error.message
        assert f"{REST}/wlanconf" in error.message

    @pytest.mark.asyncio
    async def test_transport_failure_raises(self, mock_router):
        mock_router.fail("GET", f"{REST}/user", httpx.ConnectError("connection refused"))
        client = mock_router.client()

        with pytest.raises(RouterTransportError, match="connection refused"):
            await client.get_rest("user")
        await client.close()

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, mock_router):
        mock_router.add("GET", f"{REST}/user", text="<html>login</html>")
        client = mock_router.client()

        with pytest.raises(ResponseDecodeError):
            await client.get_rest("user")
        await client.close()

    @pytest.mark.asyncio
    async def test_empty_body_returns_none(self, mock_router):
        mock_router.add("DELETE", "/proxy/network/v2/api/site/default/static-dns/abc", text="")
        client = mock_router.client()

        result = await client.delete("/proxy/network/v2/api/site/default/static-dns/abc")
        await client.close()

        assert result is None


class TestReadHelpers:
    """Tests for the four GET helper shapes."""

    @pytest.mark.asyncio
    async def test_get_rest_unwraps_data(self, mock_router, envelope):
        mock_router.add("GET", f"{REST}/firewallgroup", json=envelope([{"_id": "g1"}]))
        client = mock_router.client()

        assert await client.get_rest("firewallgroup") == [{"_id": "g1"}]
        await client.close()

    @pytest.mark.asyncio
    async def test_get_rest_without_data_is_empty(self, mock_router):
        mock_router.add("GET", f"{REST}/firewallgroup", json={"meta": {"rc": "ok"}})
        client = mock_router.client()

        assert await client.get_rest("firewallgroup") == []
        await client.close()

    @pytest.mark.asyncio
    async def test_get_v2_returns_body_as_is(self, mock_router):
        body = [{"_id": "r1", "key": "nas.lan"}]
        mock_router.add("GET", "/proxy/network/v2/api/site/default/static-dns", json=body)
        client = mock_router.client()

        assert await client.get_v2("static-dns") == body
        await client.close()

    @pytest.mark.asyncio
    async def test_get_setting_returns_first_record(self, mock_router, envelope):
        mock_router.add("GET", f"{REST}/setting/ips", json=envelope([{"key": "ips"}, {"key": "other"}]))
        client = mock_router.client()

        assert await client.get_setting("ips") == {"key": "ips"}
        await client.close()

    @pytest.mark.asyncio
    async def test_get_setting_empty_raises_not_found(self, mock_router, envelope):
        mock_router.add("GET", f"{REST}/setting/teleport", json=envelope([]))
        client = mock_router.client()

        with pytest.raises(NotFoundError, match="Setting 'teleport' not found"):
            await client.get_setting("teleport")
        await client.close()

    @pytest.mark.asyncio
    async def test_get_stat_unwraps_data(self, mock_router, envelope):
        mock_router.add("GET", "/proxy/network/api/s/default/stat/device", json=envelope([{"mac": "aa"}]))
        client = mock_router.client()

        assert await client.get_stat("device") == [{"mac": "aa"}]
        await client.close()


class TestGetRouterClient:
    """Tests for building the client from config."""

    def test_builds_from_config_file(self):
        save_config(RouterConfig(base_url="192.168.1.1", api_key="stored"))

        client = get_router_client()

        assert client.base_url == "https://192.168.1.1"
        assert client.api_key == "stored"

    def test_unconfigured_raises(self):
        with pytest.raises(ConfigurationError):
            get_router_client()
