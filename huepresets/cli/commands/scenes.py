"""Non-interactive scene listing."""

import asyncio

import typer
from rich.table import Table

from huepresets.bridge.base import BridgeClientConfig
from huepresets.bridge.client import BridgeClient
from huepresets.cli.utils import console, require_bridge_config
from huepresets.settings import get_settings
from huepresets.tui.controller import PresetController
from huepresets.tui.render import render_swatch


def scenes() -> None:
    """List scenes on the bridge with their color previews."""
    config = require_bridge_config(get_settings())
    asyncio.run(_list_scenes(config))


async def _list_scenes(config: BridgeClientConfig) -> None:
    """Load scenes the same way the interactive view does and print them."""
    controller = PresetController(BridgeClient(config))
    try:
        await controller.load()
    finally:
        await controller.aclose()

    state = controller.state
    if state.error is not None:
        console.print(f"[red]❌ Failed to load scenes: {state.error}[/red]")
        raise typer.Exit(code=1)

    if not state.scenes:
        console.print("[yellow]No scenes found.[/yellow]")
        return

    table = Table(title=f"Scenes ({len(state.scenes)})", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Preview")

    for scene in state.scenes:
        table.add_row(scene.name, scene.kind.value, render_swatch(scene.colors))

    console.print(table)
