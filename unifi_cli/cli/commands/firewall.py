"""
Firewall Commands.

Firewall rules, firewall groups and traffic rules.
"""

from typing import Any, Optional

import typer

from unifi_cli.cli.runner import run_request
from unifi_cli.client import RouterClient
from unifi_cli.services.firewall import FirewallService

app = typer.Typer(help="Firewall rules and policies", no_args_is_help=True)


def _split_ids(value: Optional[str]) -> Optional[list[str]]:
    """Parse a comma-separated list of firewall group IDs."""
    if value is None:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]


@app.command()
def rules() -> None:
    """List firewall rules."""
    run_request(lambda client: FirewallService(client).list_rules())


@app.command()
def rule(
    rule_id: str = typer.Argument(..., metavar="ID", help="Rule ID"),
) -> None:
    """Show a single firewall rule by ID."""
    run_request(lambda client: FirewallService(client).get_rule(rule_id))


@app.command()
def groups() -> None:
    """List firewall groups (IP groups, port groups)."""
    run_request(lambda client: FirewallService(client).list_groups())


@app.command()
def traffic() -> None:
    """List traffic rules."""
    run_request(lambda client: FirewallService(client).list_traffic_rules())


@app.command()
def add(
    name: str = typer.Option(..., "--name", help="Rule name"),
    action: str = typer.Option(..., "--action", help="Action: accept, drop, reject"),
    ruleset: str = typer.Option(
        ..., "--ruleset", help="Ruleset: LAN_IN, LAN_OUT, LAN_LOCAL, WAN_IN, WAN_OUT, WAN_LOCAL, etc.",
    ),
    rule_index: int = typer.Option(..., "--rule-index", help="Rule index (priority order)"),
    src_address: Optional[str] = typer.Option(None, "--src-address", help="Source address (CIDR or IP)"),
    dst_address: Optional[str] = typer.Option(None, "--dst-address", help="Destination address (CIDR or IP)"),
    protocol: Optional[str] = typer.Option(None, "--protocol", help="Protocol: tcp, udp, tcp_udp, all, etc."),
    src_port: Optional[str] = typer.Option(None, "--src-port", help="Source port"),
    dst_port: Optional[str] = typer.Option(None, "--dst-port", help="Destination port"),
    src_firewallgroup_ids: Optional[str] = typer.Option(
        None, "--src-firewallgroup-ids", help="Source firewall group IDs (comma-separated)",
    ),
    dst_firewallgroup_ids: Optional[str] = typer.Option(
        None, "--dst-firewallgroup-ids", help="Destination firewall group IDs (comma-separated)",
    ),
    enabled: bool = typer.Option(True, "--enabled/--disabled", help="Enable the rule"),
    logging: bool = typer.Option(False, "--logging", help="Enable logging"),
) -> None:
    """
    Create a firewall rule.

    Examples:
        unifi firewall add --name "Block IoT" --action drop --ruleset LAN_IN --rule-index 2000 \\
            --src-address 192.168.3.0/24
    """
    fields: dict[str, Any] = {
        "name": name,
        "action": action,
        "ruleset": ruleset,
        "rule_index": rule_index,
        "enabled": enabled,
        "logging": logging,
        "protocol": protocol or "all",
        "src_address": src_address or "",
        "dst_address": dst_address or "",
        "src_port": src_port or "",
        "dst_port": dst_port or "",
        "src_firewallgroup_ids": _split_ids(src_firewallgroup_ids) or [],
        "dst_firewallgroup_ids": _split_ids(dst_firewallgroup_ids) or [],
    }

    run_request(lambda client: FirewallService(client).create_rule(fields))


@app.command()
def update(
    rule_id: str = typer.Argument(..., metavar="ID", help="Rule ID"),
    name: Optional[str] = typer.Option(None, "--name", help="Rule name"),
    action: Optional[str] = typer.Option(None, "--action", help="Action: accept, drop, reject"),
    rule_index: Optional[int] = typer.Option(None, "--rule-index", help="Rule index (priority order)"),
    src_address: Optional[str] = typer.Option(None, "--src-address", help="Source address (CIDR or IP)"),
    dst_address: Optional[str] = typer.Option(None, "--dst-address", help="Destination address (CIDR or IP)"),
    protocol: Optional[str] = typer.Option(None, "--protocol", help="Protocol: tcp, udp, tcp_udp, all, etc."),
    src_port: Optional[str] = typer.Option(None, "--src-port", help="Source port"),
    dst_port: Optional[str] = typer.Option(None, "--dst-port", help="Destination port"),
    src_firewallgroup_ids: Optional[str] = typer.Option(
        None, "--src-firewallgroup-ids", help="Source firewall group IDs (comma-separated)",
    ),
    dst_firewallgroup_ids: Optional[str] = typer.Option(
        None, "--dst-firewallgroup-ids", help="Destination firewall group IDs (comma-separated)",
    ),
    enabled: Optional[bool] = typer.Option(None, "--enabled/--disabled", help="Enable or disable the rule"),
    logging: Optional[bool] = typer.Option(None, "--logging/--no-logging", help="Enable or disable logging"),
) -> None:
    """
    Update a firewall rule by ID.

    Only the options given are sent; the router keeps every other field.

    Examples:
        unifi firewall update 64f0c0ffee --disabled
    """
    candidates = {
        "name": name,
        "action": action,
        "rule_index": rule_index,
        "src_address": src_address,
        "dst_address": dst_address,
        "protocol": protocol,
        "src_port": src_port,
        "dst_port": dst_port,
        "src_firewallgroup_ids": _split_ids(src_firewallgroup_ids),
        "dst_firewallgroup_ids": _split_ids(dst_firewallgroup_ids),
        "enabled": enabled,
        "logging": logging,
    }
    fields = {key: value for key, value in candidates.items() if value is not None}

    run_request(lambda client: FirewallService(client).update_rule(rule_id, fields))


@app.command()
def delete(
    rule_id: str = typer.Argument(..., metavar="ID", help="Rule ID"),
) -> None:
    """Delete a firewall rule by ID."""

    async def _delete(client: RouterClient) -> dict:
        await FirewallService(client).delete_rule(rule_id)
        return {"id": rule_id, "deleted": True}

    run_request(_delete)
