"""Shared CLI helpers."""

import typer
from rich.console import Console

from huepresets.bridge.base import BridgeClientConfig
from huepresets.exceptions import ConfigurationError
from huepresets.settings import Settings

console = Console()


def require_bridge_config(settings: Settings) -> BridgeClientConfig:
    """Build the bridge config or exit with a hint to run setup."""
    try:
        return BridgeClientConfig.from_settings(settings)
    except ConfigurationError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e
