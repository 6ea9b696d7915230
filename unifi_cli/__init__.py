"""
UniFi CLI.

- core/: Configuration, logging, exceptions
- client.py: HTTP client for the router management API (httpx)
- services/: One service per resource family (firewall, dns, clients, ...)
- schemas/: Pydantic models for derived records
- cli/: Command-line interface (Typer + Rich)
"""

__version__ = "0.1.0"
