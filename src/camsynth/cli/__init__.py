"""Command-line interface for camsynth.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG input from a file or standard input
- SVG, LDraw and STL output ('-' writes to standard output)
- Template mode for preparing curve drawings
- Verbose/quiet output modes
"""

from camsynth.cli.app import cli, main

__all__ = ["cli", "main"]
