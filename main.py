#!/usr/bin/env python3
"""
hREA Docs

Entry point for running without installation.
Usage: python main.py generate --config hrea-docs.yaml
"""

from hrea_docs.cli import main

if __name__ == "__main__":
    exit(main())
