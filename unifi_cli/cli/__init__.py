"""
CLI Module.

Command-line client built with Typer for the router management API.

Architecture:
- CLI is a thin presentation layer
- Services build request paths and bodies
- RouterClient performs the HTTP calls (httpx)
- Results are printed to stdout as JSON, errors to stderr

Usage:
    unifi --help
    unifi config --host 192.168.1.1 --api-key KEY
    unifi firewall rules
"""
