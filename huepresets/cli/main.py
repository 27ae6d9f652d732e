"""CLI entry point and base commands.

Provides the main CLI application with commands for:
- start: Run the interactive scene browser
- setup: Discover and pair with the bridge
- scenes: Print the scene list
"""

# Configure logging early before other imports
import huepresets.logging_config  # noqa: F401

import typer
from rich.panel import Panel

from huepresets.cli.commands.scenes import scenes
from huepresets.cli.commands.setup import setup
from huepresets.cli.utils import console, require_bridge_config

app = typer.Typer(
    name="hue-presets",
    help="Browse and activate Philips Hue scenes from the terminal",
    add_completion=False,
    no_args_is_help=True,
)

app.command()(setup)
app.command()(scenes)


@app.command()
def start() -> None:
    """Start the interactive scene browser.

    Arrow keys move, Enter activates, S toggles activate-on-move,
    B switches the arrows to brightness, O toggles all lights.
    """
    from textual.logging import TextualHandler

    from huepresets.bridge.client import BridgeClient
    from huepresets.logging_config import configure_logging
    from huepresets.settings import get_settings
    from huepresets.tui.app import PresetApp
    from huepresets.tui.controller import PresetController

    settings = get_settings()
    config = require_bridge_config(settings)

    # The UI owns the terminal, so logs must not go to stderr
    if settings.log_file:
        configure_logging(log_file=settings.log_file)
    else:
        configure_logging(handler=TextualHandler())

    controller = PresetController.from_settings(BridgeClient(config), settings)
    PresetApp(controller).run()


@app.command()
def version() -> None:
    """Show hue-presets version information."""
    from huepresets import __version__

    console.print(
        Panel(
            f"[bold]hue-presets[/bold] v{__version__}\n"
            "Terminal scene browser for Philips Hue",
            title="💡 Version",
            border_style="blue",
        )
    )


# Entry point for: python -m huepresets.cli.main
if __name__ == "__main__":
    app()
