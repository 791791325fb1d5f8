#!/usr/bin/env python
"""
MARAS rule post-processing - CLI Entry Point.

Uses Typer for command-line interface with Rich formatting.
"""
from maras.cli.main_cli import main

if __name__ == "__main__":
    main()
