"""Light operations for the Hue bridge."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class LightMixin:
    """Mixin providing light-related operations."""

    async def list_lights(self) -> list[dict[str, Any]]:
        """List all lights with their on/dimming state."""
        return await self._list_resource("light")

    async def set_light_power(self, light_id: str, on: bool) -> Any:
        logger.debug("Setting light %s power to %s", light_id, on)
        return await self._request(
            "PUT",
            f"/clip/v2/resource/light/{light_id}",
            "set_light_power",
            json={"on": {"on": on}},
        )

    async def set_light_brightness(self, light_id: str, level: float) -> Any:
        """Set a light's brightness in percent (the bridge accepts 0-100)."""
        logger.debug("Setting light %s brightness to %s", light_id, level)
        return await self._request(
            "PUT",
            f"/clip/v2/resource/light/{light_id}",
            "set_light_brightness",
            json={"dimming": {"brightness": level}},
        )
