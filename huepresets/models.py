"""Domain types built from bridge records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from huepresets.color import SMART_SCENE_COLORS, extract_colors

# Brightness assumed for a light that is on but reports no dimming
DEFAULT_LIGHT_BRIGHTNESS = 100.0


class SceneKind(StrEnum):
    """Bridge resource type of a scene."""

    SCENE = "scene"
    SMART_SCENE = "smart_scene"


@dataclass(frozen=True)
class Scene:
    id: str
    name: str
    colors: tuple[str, ...]
    kind: SceneKind = SceneKind.SCENE

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Scene:
        """Build a regular scene, deriving its preview from the recipe."""
        return cls(
            id=record["id"],
            name=_scene_name(record),
            colors=tuple(extract_colors(record)),
            kind=SceneKind.SCENE,
        )

    @classmethod
    def from_smart_record(cls, record: dict[str, Any]) -> Scene:
        return cls(
            id=record["id"],
            name=_scene_name(record),
            colors=SMART_SCENE_COLORS,
            kind=SceneKind.SMART_SCENE,
        )


@dataclass(frozen=True)
class Light:
    id: str
    on: bool = False
    brightness: float | None = None

    @property
    def effective_brightness(self) -> float:
        return DEFAULT_LIGHT_BRIGHTNESS if self.brightness is None else self.brightness

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Light:
        on = (record.get("on") or {}).get("on", False)
        brightness = (record.get("dimming") or {}).get("brightness")
        return cls(id=record["id"], on=bool(on), brightness=brightness)


def _scene_name(record: dict[str, Any]) -> str:
    return (record.get("metadata") or {}).get("name") or "Untitled"
