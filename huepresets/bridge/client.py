"""Hue bridge client.

This module acts as a thin facade that combines resource-specific
functionality from base, scenes and lights modules, and declares the
gateway protocol the interactive controller depends on.
"""

from typing import Any, Protocol

from huepresets.bridge.base import BaseBridgeClient, BridgeClientConfig
from huepresets.bridge.lights import LightMixin
from huepresets.bridge.scenes import SceneMixin
from huepresets.exceptions import BridgeClientError

__all__ = ["BridgeClient", "BridgeClientConfig", "BridgeClientError", "BridgeGateway"]


class BridgeGateway(Protocol):
    """Request/response boundary consumed by the interaction controller."""

    async def list_scenes(self) -> list[dict[str, Any]]: ...

    async def list_smart_scenes(self) -> list[dict[str, Any]]: ...

    async def list_lights(self) -> list[dict[str, Any]]: ...

    async def activate_scene(self, scene_id: str, kind: str | None = ...) -> Any: ...

    async def set_light_power(self, light_id: str, on: bool) -> Any: ...

    async def set_light_brightness(self, light_id: str, level: float) -> Any: ...

    async def close(self) -> None: ...


class BridgeClient(BaseBridgeClient, SceneMixin, LightMixin):
    """Async client for a Hue bridge's CLIP v2 API.

    Usage:
        client = BridgeClient(BridgeClientConfig.from_settings())
        scenes = await client.list_scenes()
        await client.activate_scene(scenes[0]["id"])
        await client.close()
    """

    pass
