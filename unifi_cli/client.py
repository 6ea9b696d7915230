"""
HTTP Client for the router management API.

Provides an async httpx client that attaches the API key header to every
request, encodes request bodies as JSON and decodes responses as JSON.

Path conventions (from application.yaml, site defaults to "default"):
    REST v1   /proxy/network/api/s/{site}/rest/{resource}
    REST v2   /proxy/network/v2/api/site/{site}/{resource}
    Setting   /proxy/network/api/s/{site}/rest/setting/{key}
    Stat      /proxy/network/api/s/{site}/stat/{resource}
    Command   /proxy/network/api/s/{site}/cmd/{manager}

Usage:
    client = get_router_client()
    rules = await client.get_rest("firewallrule")
    await client.close()
"""

from typing import Any

import httpx

from unifi_cli.core.config import get_app_config, resolve_connection
from unifi_cli.core.exceptions import (
    NotFoundError,
    ResponseDecodeError,
    RouterAPIError,
    RouterTransportError,
)
from unifi_cli.core.logging import get_logger

logger = get_logger(__name__)


class RouterClient:
    """
    HTTP client for router API communication.

    Features:
    - API key header on every request
    - JSON request and response bodies
    - Structured logging of requests/responses
    - Errors carry HTTP status and response text

    No retries. Timeout is the configured one (httpx default of 5 seconds).
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        site: str | None = None,
        verify_ssl: bool | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the router client.

        Args:
            base_url: Router base URL, e.g. https://192.168.1.1
            api_key: API key sent in the configured header
            site: Site name. If None, reads from application.yaml.
            verify_ssl: Verify TLS certificates. If None, reads from application.yaml.
            timeout: Request timeout in seconds. If None, reads from application.yaml.
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        application = get_app_config().application
        controller = application.controller

        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.site = site or controller.site
        self.verify_ssl = verify_ssl if verify_ssl is not None else controller.verify_ssl
        self.timeout = timeout if timeout is not None else controller.timeout
        self._api_key_header = controller.api_key_header
        self._paths = application.paths
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def rest_path(self, resource: str) -> str:
        return f"{self._paths.rest.format(site=self.site)}/{resource}"

    def v2_path(self, resource: str) -> str:
        return f"{self._paths.v2.format(site=self.site)}/{resource}"

    def setting_path(self, key: str) -> str:
        return self.rest_path(f"setting/{key}")

    def stat_path(self, resource: str) -> str:
        return f"{self._paths.stat.format(site=self.site)}/{resource}"

    def cmd_path(self, manager: str) -> str:
        return f"{self._paths.cmd.format(site=self.site)}/{manager}"

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                verify=self.verify_ssl,
                headers={
                    self._api_key_header: self.api_key,
                    "Accept": "application/json",
                },
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
    ) -> Any:
        """
        Make an HTTP request to the router and decode the JSON response.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API path (e.g., /proxy/network/api/s/default/rest/firewallrule)
            body: JSON-serializable request body, if any

        Returns:
            Decoded JSON body, or None when the response has no body

        Raises:
            RouterTransportError: On connection or timeout failure
            RouterAPIError: On a non-2xx response
            ResponseDecodeError: If the body is not JSON
        """
        client = await self._get_client()

        logger.debug("API request", method=method, path=path)

        kwargs: dict[str, Any] = {}
        if body is not None:
            kwargs["json"] = body

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error("API request failed", method=method, path=path, error=str(e))
            raise RouterTransportError(f"{method} {path} failed: {e}") from e

        logger.debug(
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if not response.is_success:
            logger.error(
                "API error response",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise RouterAPIError(
                f"{method} {path} failed ({response.status_code}): {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        if not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(f"Failed to parse response from {method} {path}: {e}") from e

    # -------------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------------

    async def get_rest(self, resource: str) -> Any:
        """GET a REST v1 resource and return the envelope's data array."""
        return _unwrap_data(await self.request("GET", self.rest_path(resource)))

    async def get_v2(self, resource: str) -> Any:
        """GET a REST v2 resource. v2 responses are not enveloped."""
        return await self.request("GET", self.v2_path(resource))

    async def get_setting(self, key: str) -> dict[str, Any]:
        """GET a setting resource and return its single record."""
        data = _unwrap_data(await self.request("GET", self.setting_path(key)))
        if isinstance(data, list) and data:
            return data[0]
        raise NotFoundError(f"Setting '{key}' not found")

    async def get_stat(self, resource: str) -> Any:
        """GET a stat resource and return the envelope's data array."""
        return _unwrap_data(await self.request("GET", self.stat_path(resource)))

    # -------------------------------------------------------------------------
    # Write passthrough
    # -------------------------------------------------------------------------

    async def post(self, path: str, body: Any) -> Any:
        """Make a POST request."""
        return await self.request("POST", path, body)

    async def put(self, path: str, body: Any) -> Any:
        """Make a PUT request."""
        return await self.request("PUT", path, body)

    async def delete(self, path: str) -> Any:
        """Make a DELETE request."""
        return await self.request("DELETE", path)


def _unwrap_data(body: Any) -> Any:
    """Return the "data" member of a v1 {"meta": ..., "data": [...]} envelope."""
    if isinstance(body, dict):
        return body.get("data", [])
    return []


def get_router_client() -> RouterClient:
    """
    Build a client from the resolved connection config.

    Raises:
        ConfigurationError: If base URL or API key is not configured
    """
    connection = resolve_connection()
    return RouterClient(
        connection.base_url,
        connection.api_key,
        site=connection.site,
        verify_ssl=connection.verify_ssl,
        timeout=connection.timeout,
    )
