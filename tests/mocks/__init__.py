"""In-memory bridge for controller and CLI tests.

Provides a gateway double that keeps light state between calls, so a
reload after a power or brightness change sees the change.
"""

import copy
from typing import Any

from huepresets.exceptions import BridgeClientError


class FakeBridge:
    """Stands in for ``BridgeClient`` behind the ``BridgeGateway`` protocol."""

    def __init__(
        self,
        scenes: list[dict[str, Any]] | None = None,
        smart_scenes: list[dict[str, Any]] | None = None,
        lights: list[dict[str, Any]] | None = None,
    ):
        self.scenes = list(scenes or [])
        self.smart_scenes = list(smart_scenes or [])
        self.lights = list(lights or [])
        self.calls: list[tuple[Any, ...]] = []
        self.failures: dict[str, Exception] = {}
        self.closed = False

    def fail(self, operation: str, error: Exception | None = None) -> None:
        """Make every later call to ``operation`` raise."""
        self.failures[operation] = error or BridgeClientError(
            "HTTP 500: boom", operation, status_code=500
        )

    def calls_to(self, operation: str) -> list[tuple[Any, ...]]:
        return [call[1:] for call in self.calls if call[0] == operation]

    def _record(self, operation: str, *args: Any) -> None:
        self.calls.append((operation, *args))
        if operation in self.failures:
            raise self.failures[operation]

    def _light(self, light_id: str) -> dict[str, Any]:
        return next(light for light in self.lights if light["id"] == light_id)

    async def list_scenes(self) -> list[dict[str, Any]]:
        self._record("list_scenes")
        return copy.deepcopy(self.scenes)

    async def list_smart_scenes(self) -> list[dict[str, Any]]:
        self._record("list_smart_scenes")
        return copy.deepcopy(self.smart_scenes)

    async def list_lights(self) -> list[dict[str, Any]]:
        self._record("list_lights")
        return copy.deepcopy(self.lights)

    async def activate_scene(self, scene_id: str, kind: str | None = "scene") -> Any:
        self._record("activate_scene", scene_id, kind)
        return {"data": [{"rid": scene_id}]}

    async def set_light_power(self, light_id: str, on: bool) -> Any:
        self._record("set_light_power", light_id, on)
        self._light(light_id)["on"] = {"on": on}
        return {}

    async def set_light_brightness(self, light_id: str, level: float) -> Any:
        self._record("set_light_brightness", light_id, level)
        self._light(light_id)["dimming"] = {"brightness": level}
        return {}

    async def close(self) -> None:
        self.closed = True
