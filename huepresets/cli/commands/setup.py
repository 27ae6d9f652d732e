"""Bridge discovery and pairing command."""

import asyncio
import socket
from typing import Annotated, Optional

import typer
from rich.panel import Panel

from huepresets.bridge.pairing import discover_bridge, pair_with_bridge
from huepresets.cli.utils import console
from huepresets.envfile import update_env_file
from huepresets.exceptions import HuePresetsError
from huepresets.settings import get_settings

DEVICE_TYPE_PREFIX = "hue-presets"


def _log(message: str) -> None:
    console.print(f"[cyan]➜[/cyan] {message}")


def _success(message: str) -> None:
    console.print(f"[green]✓[/green] {message}")


def _error(message: str) -> None:
    console.print(f"[red]✗[/red] {message}")


def _default_device_name() -> str:
    return socket.gethostname().removesuffix(".local")


def _prompt_retry(attempt: int, attempts: int) -> None:
    console.print(
        f"[yellow]⚠[/yellow]  Link button not pressed. Retrying... ({attempt}/{attempts})"
    )
    typer.prompt(
        "   Press the link button, then press Enter", default="", show_default=False
    )


def setup(
    name: Annotated[
        Optional[str],  # noqa: UP007
        typer.Option("--name", "-n", help="Device name registered on the bridge"),
    ] = None,
    bridge_ip: Annotated[
        Optional[str],  # noqa: UP007
        typer.Option("--bridge-ip", help="Skip discovery and use this bridge address"),
    ] = None,
) -> None:
    """Find the Hue bridge, pair with it and save credentials to .env."""
    console.print(
        Panel(
            "[bold]Hue Bridge Setup[/bold]",
            title="🌈 Setup",
            border_style="magenta",
        )
    )

    try:
        asyncio.run(_run_setup(name, bridge_ip))
    except HuePresetsError as e:
        _error(str(e))
        raise typer.Exit(code=1) from e


async def _run_setup(name: str | None, bridge_ip: str | None) -> None:
    """Execute the discovery, pairing and persistence steps."""
    settings = get_settings()

    if bridge_ip is None:
        _log("Discovering Hue Bridge on your network...")
        bridge = await discover_bridge(settings.discovery_url)
        _success(f"Found bridge: {bridge.id} at {bridge.internalipaddress}")
        bridge_ip = bridge.internalipaddress

    default_name = _default_device_name()
    machine_name = name or typer.prompt("Enter a name for this device", default=default_name)
    device_type = f"{DEVICE_TYPE_PREFIX}#{machine_name}"
    _log(f"Using device type: {device_type}")

    console.print("\n[yellow]⚠[/yellow]  Press the link button on your Hue Bridge")
    typer.prompt("   Then press Enter to continue", default="", show_default=False)

    _log("Authenticating with bridge...")
    token = await pair_with_bridge(
        bridge_ip,
        device_type,
        attempts=settings.pairing_attempts,
        on_retry=_prompt_retry,
    )
    _success(f"Authenticated! Token: {token[:8]}...")

    update_env_file(
        settings.env_file_path,
        {"HUE_BRIDGE_IP": bridge_ip, "HUE_API_TOKEN": token},
    )
    _success(f"Saved configuration to {settings.env_file_path}")

    console.print("\n[green]✨ Setup complete![/green]")
    console.print("   You can now run: [bold]hue-presets start[/bold]\n")
