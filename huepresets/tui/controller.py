"""Keyboard-driven state machine for the scene browser.

Owns the UI state, interprets key presses against the current mode and
issues bridge calls. Key handlers never await: bridge work runs in
spawned tasks, and every state change (from a key press or a finished
call) goes through ``_update`` on the event loop, which then notifies
listeners such as the textual view.
"""

from __future__ import annotations

import asyncio
import locale
import logging
import unicodedata
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from huepresets.bridge.client import BridgeGateway
from huepresets.models import Light, Scene
from huepresets.settings import Settings

logger = logging.getLogger(__name__)

KEY_UP = "up"
KEY_DOWN = "down"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
QUIT_KEYS = frozenset({"q", KEY_ESCAPE})

MIN_BRIGHTNESS = 1.0
MAX_BRIGHTNESS = 100.0


class Mode(StrEnum):
    """Interaction mode. Exactly one is active at a time."""

    NORMAL = "normal"
    SET = "set"  # activate each scene as the cursor lands on it
    BRIGHTNESS = "brightness"  # arrows adjust brightness instead of moving


@dataclass
class UIState:
    scenes: list[Scene] = field(default_factory=list)
    selected: int = 0
    mode: Mode = Mode.NORMAL
    brightness: float = MAX_BRIGHTNESS
    lights_on: bool = False
    lights: list[Light] = field(default_factory=list)
    message: str = ""
    loading: bool = True
    error: str | None = None

    @property
    def selected_scene(self) -> Scene | None:
        if 0 <= self.selected < len(self.scenes):
            return self.scenes[self.selected]
        return None


def summarize_lights(lights: list[Light]) -> dict[str, Any]:
    """Derive the aggregate power/brightness fields from a light roster.

    Brightness is averaged over lights that are on; when none are on it
    is left out so the last known value stays on screen.
    """
    summary: dict[str, Any] = {
        "lights": lights,
        "lights_on": any(light.on for light in lights),
    }
    on_lights = [light for light in lights if light.on]
    if on_lights:
        summary["brightness"] = sum(light.effective_brightness for light in on_lights) / len(
            on_lights
        )
    return summary


def scene_sort_key(name: str) -> tuple[str, str, str]:
    """Collation key ordering names like a locale-aware compare.

    Letters compare ignoring case and accents first, then accents, then
    case with lowercase first. Works the same under the C locale.
    """
    folded = name.casefold()
    base = "".join(
        char for char in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(char)
    )
    return locale.strxfrm(base), locale.strxfrm(folded), name.swapcase()


def _describe(error: BaseException) -> str:
    return str(error) or type(error).__name__


class PresetController:
    """Interaction controller for the scene browser.

    Usage:
        controller = PresetController(client, settle_delay=0.2)
        controller.subscribe(lambda state: view.update(render_state(state)))
        await controller.load()
        if not controller.handle_key("down"):
            ...  # quit requested
    """

    def __init__(
        self,
        gateway: BridgeGateway,
        *,
        settle_delay: float = 0.2,
        message_timeout: float = 2.0,
    ) -> None:
        self.gateway = gateway
        self.state = UIState()
        self._settle_delay = settle_delay
        self._message_timeout = message_timeout
        self._listeners: list[Callable[[UIState], None]] = []
        self._tasks: set[asyncio.Task[None]] = set()

    @classmethod
    def from_settings(cls, gateway: BridgeGateway, settings: Settings) -> PresetController:
        return cls(
            gateway,
            settle_delay=settings.settle_delay,
            message_timeout=settings.status_message_timeout,
        )

    # ------------------------------------------------------------------
    # State plumbing
    # ------------------------------------------------------------------

    def subscribe(self, listener: Callable[[UIState], None]) -> None:
        """Register a callback invoked after every state change."""
        self._listeners.append(listener)

    def _update(self, **changes: Any) -> None:
        """Apply one batch of field changes and notify listeners.

        The error state is terminal: once set, nothing mutates any more.
        """
        if self.state.error is not None:
            return
        for name, value in changes.items():
            setattr(self.state, name, value)
        for listener in self._listeners:
            listener(self.state)

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def drain(self) -> None:
        """Wait for all in-flight work, including work it spawns."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel in-flight work and release the gateway."""
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
        await self.gateway.close()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def _list_smart_scenes(self) -> list[dict[str, Any]]:
        try:
            return await self.gateway.list_smart_scenes()
        except Exception as e:
            logger.warning("Smart scenes unavailable, continuing without them: %s", e)
            return []

    async def load(self) -> None:
        """Fetch scenes, smart scenes and lights and build the initial state.

        Any failure other than the smart-scene fetch is terminal.
        """
        try:
            scene_data, smart_scene_data, light_data = await asyncio.gather(
                self.gateway.list_scenes(),
                self._list_smart_scenes(),
                self.gateway.list_lights(),
            )
            scenes = [Scene.from_record(record) for record in scene_data]
            scenes.extend(Scene.from_smart_record(record) for record in smart_scene_data)
            scenes.sort(key=lambda scene: scene_sort_key(scene.name))
            lights = [Light.from_record(record) for record in light_data]
        except Exception as e:
            logger.error("Initial load failed: %s", e)
            self._update(error=_describe(e), loading=False)
            return

        logger.info("Loaded %d scenes and %d lights", len(scenes), len(lights))
        self._update(scenes=scenes, selected=0, loading=False, **summarize_lights(lights))

    async def _refresh_lights(self) -> None:
        records = await self.gateway.list_lights()
        self._update(**summarize_lights([Light.from_record(record) for record in records]))

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------

    def handle_key(self, key: str) -> bool:
        """Interpret one key press.

        Args:
            key: A printable character or a key name ("up", "down",
                "enter", "escape")

        Returns:
            False when the operator asked to quit, True otherwise
        """
        if key in QUIT_KEYS:
            return False
        if self.state.error is not None:
            return True

        command = key.lower() if len(key) == 1 else key
        if command == "s":
            self._toggle_mode(Mode.SET)
        elif command == "b":
            self._toggle_mode(Mode.BRIGHTNESS)
        elif command == "o":
            self._spawn(self.toggle_all_lights())
        elif command == KEY_ENTER:
            scene = self.state.selected_scene
            if scene is not None:
                self._spawn(self.activate(scene))
        elif command in (KEY_UP, KEY_DOWN):
            step = 1 if command == KEY_UP else -1
            if self.state.mode is Mode.BRIGHTNESS:
                self.adjust_brightness(step)
            else:
                self.move_selection(-step)
        return True

    def _toggle_mode(self, mode: Mode) -> None:
        self._update(mode=Mode.NORMAL if self.state.mode is mode else mode)

    def move_selection(self, delta: int) -> None:
        """Move the cursor, clamped to the list. In SET mode also activate."""
        scenes = self.state.scenes
        if not scenes:
            return
        index = max(0, min(self.state.selected + delta, len(scenes) - 1))
        self._update(selected=index)
        if self.state.mode is Mode.SET:
            self._spawn(self.activate(scenes[index]))

    def adjust_brightness(self, delta: float) -> None:
        """Change target brightness now, push it to the lights in the background."""
        level = max(MIN_BRIGHTNESS, min(MAX_BRIGHTNESS, self.state.brightness + delta))
        self._update(brightness=level)
        self._spawn(self._push_brightness(level))

    # ------------------------------------------------------------------
    # Bridge actions
    # ------------------------------------------------------------------

    async def activate(self, scene: Scene) -> None:
        """Recall a scene, then re-read the lights once the bridge settles."""
        self._update(message="")
        try:
            await self.gateway.activate_scene(scene.id, scene.kind)
            await asyncio.sleep(self._settle_delay)
            await self._refresh_lights()
        except Exception as e:
            logger.warning("Failed to activate %s: %s", scene.name, e)
            self._update(message=f"Failed to activate: {_describe(e)}")

    async def _push_brightness(self, level: float) -> None:
        lights = list(self.state.lights)
        try:
            await asyncio.gather(
                *(self.gateway.set_light_brightness(light.id, level) for light in lights)
            )
        except Exception as e:
            logger.warning("Failed to set brightness to %s: %s", level, e)
            self._update(message=f"Failed to set brightness: {_describe(e)}")

    async def toggle_all_lights(self) -> None:
        """Turn everything off if anything is on, otherwise turn everything on."""
        lights = list(self.state.lights)
        target = not any(light.on for light in lights)
        try:
            await asyncio.gather(
                *(self.gateway.set_light_power(light.id, target) for light in lights)
            )
            await self._refresh_lights()
        except Exception as e:
            logger.warning("Failed to toggle lights: %s", e)
            self._update(message=f"Failed to toggle lights: {_describe(e)}")
            return
        self._flash("On" if target else "Off")

    def _flash(self, message: str) -> None:
        self._update(message=message)
        self._spawn(self._clear_message_later(message))

    async def _clear_message_later(self, message: str) -> None:
        await asyncio.sleep(self._message_timeout)
        if self.state.message == message:
            self._update(message="")
