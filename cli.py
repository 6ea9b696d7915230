#!/usr/bin/env python3
"""
UniFi CLI entry script.

Runs the CLI from a source checkout without installing it.

Usage:
    python cli.py --help
    python cli.py config --host 192.168.1.1 --api-key KEY
    python cli.py firewall rules
"""

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from unifi_cli.cli.main import app

if __name__ == "__main__":
    app()
