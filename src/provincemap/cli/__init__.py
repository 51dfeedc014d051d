"""Command-line interface for provincemap.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- build: Extract provinces, print a summary and optionally export JSON
- locate: Report the province under a world-space point
- Verbose/quiet output modes
- Detailed error reporting
"""

from provincemap.cli.app import cli, main

__all__ = ["cli", "main"]
