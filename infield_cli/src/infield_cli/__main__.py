#!/usr/bin/env python3
"""
Entry point for running infield_cli as a module: python -m infield_cli
"""

from infield_cli.cli import cli_main

if __name__ == "__main__":
    cli_main()
