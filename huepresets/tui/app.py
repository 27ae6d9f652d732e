"""Textual host for the scene browser.

The app only forwards key presses to the controller and redraws the
view whenever controller state changes.
"""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from huepresets.tui.controller import PresetController, UIState
from huepresets.tui.render import render_state


class PresetApp(App[None]):
    """Terminal UI listing bridge scenes with color previews."""

    CSS = """
    #view {
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=False, priority=True),
        Binding("escape", "quit", "Quit", show=False, priority=True),
    ]

    TITLE = "Hue Presets"

    def __init__(self, controller: PresetController) -> None:
        super().__init__()
        self.controller = controller

    def compose(self) -> ComposeResult:
        yield Static(render_state(self.controller.state), id="view")

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.controller.subscribe(self._redraw)
        self.run_worker(self.controller.load(), exclusive=True)

    async def on_unmount(self) -> None:
        await self.controller.aclose()

    def on_key(self, event: events.Key) -> None:
        key = event.character if event.is_printable and event.character else event.key
        if not self.controller.handle_key(key):
            self.exit()

    def _redraw(self, state: UIState) -> None:
        self.query_one("#view", Static).update(render_state(state))
