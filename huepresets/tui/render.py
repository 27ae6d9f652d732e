"""Rich renderables for the scene browser.

Everything here is a pure function of a ``UIState`` snapshot.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.color import Color, blend_rgb
from rich.console import Group, RenderableType
from rich.style import Style
from rich.text import Text

from huepresets.tui.controller import Mode, UIState

BAR_WIDTH = 20
SWATCH_WIDTH = 16
NAME_WIDTH = 40
BLOCK = "█"
CONFIG_HINT = "Check HUE_BRIDGE_IP and HUE_API_TOKEN in .env"


def _round(value: float) -> int:
    return int(value + 0.5)


def render_swatch(colors: Sequence[str], width: int = SWATCH_WIDTH) -> Text:
    """A horizontal gradient running through the scene's colors."""
    stops = [Color.parse(color).get_truecolor() for color in colors]
    if len(stops) < 2:
        stops = stops * 2

    swatch = Text()
    segments = len(stops) - 1
    for cell in range(width):
        position = cell / max(width - 1, 1) * segments
        index = min(int(position), segments - 1)
        blended = blend_rgb(stops[index], stops[index + 1], position - index)
        swatch.append(BLOCK, style=Style(color=Color.from_triplet(blended)))
    return swatch


def render_brightness_bar(level: float, width: int = BAR_WIDTH) -> Text:
    filled = _round(level / 100 * width)
    return Text.assemble(
        ("Brightness: ", "yellow"),
        (BLOCK * filled, "yellow"),
        ("░" * (width - filled), "grey50"),
        (f" {_round(level)}%", "white"),
    )


def render_header(mode: Mode) -> Text:
    if mode is Mode.BRIGHTNESS:
        hint: str | tuple[str, str] = ("brightness", "magenta")
    elif mode is Mode.SET:
        hint = ("sets active", "yellow")
    else:
        hint = "to move"
    return Text.assemble(
        "Hue Presets (↑/↓ ",
        hint,
        ", Enter to activate, S scene mode, B brightness, O toggle on/off, q quit)",
        style="cyan",
    )


def render_status(state: UIState) -> Text:
    status = render_brightness_bar(state.brightness)
    if state.mode is Mode.BRIGHTNESS:
        status.append(" ◀ adjusting", style="magenta")
    else:
        label = state.message or ("On" if state.lights_on else "Off")
        status.append(f" 💡 {label}", style="green" if state.lights_on else "grey50")
    return status


def render_scene_row(name: str, colors: Sequence[str], selected: bool) -> Text:
    label = Text(f"{'› ' if selected else '  '}{name}", style="cyan" if selected else "white")
    label.truncate(NAME_WIDTH, pad=True)
    return Text.assemble(label, " ", render_swatch(colors))


def render_state(state: UIState) -> RenderableType:
    """Render the whole screen for the current state."""
    if state.loading:
        return Text("Loading scenes...")

    if state.error is not None:
        return Group(Text(f"Error: {state.error}", style="red"), Text(CONFIG_HINT))

    if not state.scenes:
        return Text("No scenes found.", style="yellow")

    rows: list[RenderableType] = [render_header(state.mode), Text(), render_status(state), Text()]
    for index, scene in enumerate(state.scenes):
        rows.append(render_scene_row(scene.name, scene.colors, index == state.selected))
        rows.append(Text())
    return Group(*rows)
