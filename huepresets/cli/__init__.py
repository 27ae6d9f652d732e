"""CLI application setup using Typer.

Provides the command-line interface for hue-presets.
"""

from huepresets.cli.main import app

__all__ = ["app"]
