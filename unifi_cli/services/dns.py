"""
DNS Service.

Static DNS records (REST v2 "static-dns").
"""

from typing import Any

from unifi_cli.services.base import BaseService

STATIC_DNS_RESOURCE = "static-dns"

DNS_RECORD_DEFAULTS: dict[str, Any] = {
    "record_type": "A",
    "enabled": True,
}


class DnsService(BaseService):
    """Service for static DNS records."""

    async def list_records(self) -> Any:
        return await self.client.get_v2(STATIC_DNS_RESOURCE)

    async def create_record(self, fields: dict[str, Any]) -> Any:
        """
        Create a static DNS record.

        Args:
            fields: Record fields; "key" is the hostname, "value" the address

        Returns:
            The created record as returned by the router
        """
        body = self._with_defaults(DNS_RECORD_DEFAULTS, fields)
        self._log_operation("Creating DNS record", key=body.get("key"), record_type=body["record_type"])
        return await self.client.post(self.client.v2_path(STATIC_DNS_RESOURCE), body)

    async def update_record(self, record_id: str, fields: dict[str, Any]) -> Any:
        """Send only the given fields for an existing record."""
        self._validate_update(fields)
        self._log_operation("Updating DNS record", record_id=record_id, fields=sorted(fields))
        return await self.client.put(
            self.client.v2_path(f"{STATIC_DNS_RESOURCE}/{record_id}"),
            dict(fields),
        )

    async def delete_record(self, record_id: str) -> None:
        self._log_operation("Deleting DNS record", record_id=record_id)
        await self.client.delete(self.client.v2_path(f"{STATIC_DNS_RESOURCE}/{record_id}"))
