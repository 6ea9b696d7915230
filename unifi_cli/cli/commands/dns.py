"""
DNS Commands.

Static DNS records.
"""

from typing import Any, Optional

import typer

from unifi_cli.cli.runner import run_request
from unifi_cli.client import RouterClient
from unifi_cli.services.dns import DnsService

app = typer.Typer(help="Static DNS records", no_args_is_help=True)


@app.command("list")
def list_records() -> None:
    """List static DNS records."""
    run_request(lambda client: DnsService(client).list_records())


@app.command()
def add(
    name: str = typer.Argument(..., help="Hostname (e.g., git.localdomain)"),
    ip: str = typer.Argument(..., help="Record value, usually an IP address (e.g., 192.168.2.32)"),
    record_type: Optional[str] = typer.Option(None, "--record-type", "-t", help="Record type (default: A)"),
    ttl: Optional[int] = typer.Option(None, "--ttl", help="TTL in seconds"),
    disabled: bool = typer.Option(False, "--disabled", help="Create the record disabled"),
) -> None:
    """
    Add a static DNS record.

    Examples:
        unifi dns add git.localdomain 192.168.2.32
        unifi dns add mail.localdomain 10.0.0.5 --record-type MX
    """
    fields: dict[str, Any] = {"key": name, "value": ip}
    if record_type is not None:
        fields["record_type"] = record_type
    if ttl is not None:
        fields["ttl"] = ttl
    if disabled:
        fields["enabled"] = False

    run_request(lambda client: DnsService(client).create_record(fields))


@app.command()
def update(
    record_id: str = typer.Argument(..., metavar="ID", help="Record ID"),
    name: Optional[str] = typer.Option(None, "--name", help="Hostname"),
    ip: Optional[str] = typer.Option(None, "--ip", help="Record value"),
    record_type: Optional[str] = typer.Option(None, "--record-type", "-t", help="Record type"),
    ttl: Optional[int] = typer.Option(None, "--ttl", help="TTL in seconds"),
    enabled: Optional[bool] = typer.Option(None, "--enabled/--disabled", help="Enable or disable the record"),
) -> None:
    """
    Update a static DNS record by ID.

    Only the options given are sent.
    """
    candidates = {
        "key": name,
        "value": ip,
        "record_type": record_type,
        "ttl": ttl,
        "enabled": enabled,
    }
    fields = {key: value for key, value in candidates.items() if value is not None}

    run_request(lambda client: DnsService(client).update_record(record_id, fields))


@app.command()
def delete(
    record_id: str = typer.Argument(..., metavar="ID", help="Record ID"),
) -> None:
    """Delete a static DNS record by ID."""

    async def _delete(client: RouterClient) -> dict:
        await DnsService(client).delete_record(record_id)
        return {"id": record_id, "deleted": True}

    run_request(_delete)
