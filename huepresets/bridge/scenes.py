"""Scene operations for the Hue bridge.

Provides methods for listing and recalling scenes and smart scenes.
"""

import logging
from typing import Any

from huepresets.models import SceneKind

logger = logging.getLogger(__name__)

# Regular scenes are recalled with "active", smart scenes with "activate"
RECALL_ACTIONS = {
    SceneKind.SCENE: "active",
    SceneKind.SMART_SCENE: "activate",
}


class SceneMixin:
    """Mixin providing scene-related operations."""

    async def list_scenes(self) -> list[dict[str, Any]]:
        """List regular scenes stored on the bridge."""
        return await self._list_resource("scene")

    async def list_smart_scenes(self) -> list[dict[str, Any]]:
        """List smart (time-based) scenes stored on the bridge."""
        return await self._list_resource("smart_scene")

    async def activate_scene(self, scene_id: str, kind: str | None = SceneKind.SCENE) -> Any:
        """Recall a scene on its target lights.

        Args:
            scene_id: Scene identifier
            kind: "scene" or "smart_scene"; anything else is treated as "scene"

        Returns:
            Bridge response JSON
        """
        resource = SceneKind.SMART_SCENE if kind == SceneKind.SMART_SCENE else SceneKind.SCENE
        action = RECALL_ACTIONS[resource]
        logger.info("Recalling %s %s (%s)", resource, scene_id, action)
        return await self._request(
            "PUT",
            f"/clip/v2/resource/{resource}/{scene_id}",
            "activate_scene",
            json={"recall": {"action": action}},
        )
