"""
Client Service.

Clients are the stations attached to the network. "All" is every client the
router has ever seen (REST user), "online" is the live station table
(stat sta), "offline" is the difference keyed by MAC address.
"""

from typing import Any

from unifi_cli.services.base import BaseService

KNOWN_CLIENTS_RESOURCE = "user"
ONLINE_CLIENTS_STAT = "sta"
STATION_MANAGER = "stamgr"


class ClientService(BaseService):
    """Service for known, online and offline clients."""

    async def list_all(self) -> Any:
        return await self.client.get_rest(KNOWN_CLIENTS_RESOURCE)

    async def list_online(self) -> Any:
        return await self.client.get_stat(ONLINE_CLIENTS_STAT)

    async def list_offline(self) -> list[Any]:
        """
        Known clients that are not currently online.

        A known client without a MAC address cannot be matched against the
        station table and is reported as offline.
        """
        known = await self.list_all()
        online = await self.list_online()

        online_macs = {
            entry["mac"]
            for entry in online or []
            if isinstance(entry, dict) and isinstance(entry.get("mac"), str)
        }

        offline = []
        for entry in known or []:
            mac = entry.get("mac") if isinstance(entry, dict) else None
            if not isinstance(mac, str) or mac not in online_macs:
                offline.append(entry)
        return offline

    async def reconnect(self, mac: str) -> Any:
        """
        Kick a client so it reconnects.

        Args:
            mac: Client MAC address (aa:bb:cc:dd:ee:ff)
        """
        self._log_operation("Kicking client", mac=mac)
        return await self.client.post(
            self.client.cmd_path(STATION_MANAGER),
            {"cmd": "kick-sta", "mac": mac.lower()},
        )
