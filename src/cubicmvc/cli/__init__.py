"""Command-line interface for cubicmvc.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Single-query coordinate tables
- Progress bars for batch evaluation
- Verbose/quiet output modes
- Detailed error reporting
"""

from cubicmvc.cli.app import cli, main

__all__ = ["cli", "main"]
