"""
Firewall Service.

Firewall rules and groups live under REST v1, traffic rules under REST v2.
"""

from typing import Any

from unifi_cli.core.exceptions import NotFoundError
from unifi_cli.services.base import BaseService

RULES_RESOURCE = "firewallrule"
GROUPS_RESOURCE = "firewallgroup"
TRAFFIC_RESOURCE = "trafficrules"

# Keys the router rejects a new rule without.
FIREWALL_RULE_DEFAULTS: dict[str, Any] = {
    "src_networkconf_type": "NETv4",
    "dst_networkconf_type": "NETv4",
    "src_networkconf_id": "",
    "dst_networkconf_id": "",
    "src_mac_address": "",
    "src_firewallgroup_ids": [],
    "dst_firewallgroup_ids": [],
    "icmp_typename": "",
    "ipsec": "",
    "logging": False,
    "protocol_match_excepted": False,
    "state_established": False,
    "state_invalid": False,
    "state_new": False,
    "state_related": False,
    "setting_preference": "manual",
}


class FirewallService(BaseService):
    """Service for firewall rules, firewall groups and traffic rules."""

    async def list_rules(self) -> Any:
        return await self.client.get_rest(RULES_RESOURCE)

    async def get_rule(self, rule_id: str) -> Any:
        """
        Get a single firewall rule by ID.

        Raises:
            NotFoundError: If the router returns no record for the ID
        """
        records = await self.client.get_rest(f"{RULES_RESOURCE}/{rule_id}")
        if isinstance(records, list) and records:
            return records[0]
        raise NotFoundError(f"Firewall rule '{rule_id}' not found")

    async def list_groups(self) -> Any:
        """List firewall groups (address groups, port groups)."""
        return await self.client.get_rest(GROUPS_RESOURCE)

    async def list_traffic_rules(self) -> Any:
        return await self.client.get_v2(TRAFFIC_RESOURCE)

    async def create_rule(self, fields: dict[str, Any]) -> Any:
        """
        Create a firewall rule.

        Caller fields are merged over FIREWALL_RULE_DEFAULTS so every key the
        router requires is present even when the caller leaves it out.

        Args:
            fields: Rule fields (name, action, ruleset, rule_index, ...)

        Returns:
            The created rule as returned by the router
        """
        body = self._with_defaults(FIREWALL_RULE_DEFAULTS, fields)
        self._log_operation("Creating firewall rule", name=body.get("name"))
        return self._first_record(await self.client.post(self.client.rest_path(RULES_RESOURCE), body))

    async def update_rule(self, rule_id: str, fields: dict[str, Any]) -> Any:
        """
        Update a firewall rule by ID.

        Only the given fields are sent. Nothing is read back from the router
        first, so fields the caller omits are left to the router's merge.

        Args:
            rule_id: Rule ID
            fields: Fields to change

        Returns:
            The updated rule as returned by the router

        Raises:
            ValidationError: If fields is empty
        """
        self._validate_update(fields)
        self._log_operation("Updating firewall rule", rule_id=rule_id, fields=sorted(fields))
        path = self.client.rest_path(f"{RULES_RESOURCE}/{rule_id}")
        return self._first_record(await self.client.put(path, dict(fields)))

    async def delete_rule(self, rule_id: str) -> None:
        """Delete a firewall rule by ID."""
        self._log_operation("Deleting firewall rule", rule_id=rule_id)
        await self.client.delete(self.client.rest_path(f"{RULES_RESOURCE}/{rule_id}"))
