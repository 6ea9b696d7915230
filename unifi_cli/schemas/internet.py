"""
Internet Schemas.

DNS settings derived from the WAN network record.
"""

from typing import Any

from pydantic import BaseModel


class WanDnsSettings(BaseModel):
    """DNS configuration of the WAN uplink, IPv4 and IPv6."""

    mode: str = "auto"
    dns1: str | None = None
    dns2: str | None = None
    mode_ipv6: str = "auto"
    dns1_ipv6: str | None = None
    dns2_ipv6: str | None = None

    @classmethod
    def from_network(cls, network: dict[str, Any]) -> "WanDnsSettings":
        """
        Build from a networkconf record with purpose "wan".

        Empty strings count as unset: preferences fall back to "auto",
        servers to None.
        """

        def value(key: str) -> str | None:
            raw = network.get(key)
            if isinstance(raw, str) and raw:
                return raw
            return None

        return cls(
            mode=value("wan_dns_preference") or "auto",
            dns1=value("wan_dns1"),
            dns2=value("wan_dns2"),
            mode_ipv6=value("wan_ipv6_dns_preference") or "auto",
            dns1_ipv6=value("wan_ipv6_dns1"),
            dns2_ipv6=value("wan_ipv6_dns2"),
        )
