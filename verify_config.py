#!/usr/bin/env python3
"""Verify a Client Search configuration file against the schema.

Usage:
    python verify_config.py [path]   (defaults to client_search.example.yaml)
"""

import sys
from pathlib import Path

from client_search.config import validate_config_file


def main() -> int:
    config_file = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("client_search.example.yaml")

    if not config_file.exists():
        print(f"✗ {config_file} not found")
        return 1

    return 0 if validate_config_file(config_file) else 1


if __name__ == "__main__":
    sys.exit(main())
