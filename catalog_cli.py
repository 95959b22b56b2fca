#!/usr/bin/env python3
"""
CLI entry point for the Voyage catalog.
"""
import sys
from voyage_catalog.cli.catalog_cli import main

if __name__ == "__main__":
    sys.exit(main())
