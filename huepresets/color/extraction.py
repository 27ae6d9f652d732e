"""Derive preview swatches from a raw bridge scene record."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from huepresets.color.colorimetry import NO_DATA_COLOR, mirek_to_hex, xy_bri_to_hex

MAX_PREVIEW_COLORS = 6


def _dig(record: Any, *path: str) -> Any:
    """Follow a chain of keys, returning None as soon as one is missing."""
    for key in path:
        if not isinstance(record, Mapping):
            return None
        record = record.get(key)
    return record


def _entries(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list) else []


def _xy_color(entry: Any) -> str | None:
    return xy_bri_to_hex(
        _dig(entry, "color", "xy", "x"),
        _dig(entry, "color", "xy", "y"),
        _dig(entry, "dimming", "brightness"),
    )


def _temperature_color(entry: Any) -> str | None:
    return mirek_to_hex(_dig(entry, "color_temperature", "mirek"))


def dedupe_colors(colors: Iterable[str | None], limit: int = MAX_PREVIEW_COLORS) -> list[str]:
    """Drop empty entries and case-insensitive duplicates, keeping first-seen order."""
    seen: set[str] = set()
    out: list[str] = []
    for color in colors:
        if not color:
            continue
        key = color.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(color)
        if len(out) >= limit:
            break
    return out


def extract_colors(scene: Mapping[str, Any]) -> list[str]:
    """Build the ordered preview palette for a scene.

    Palette colors come first, then palette color temperatures, then the
    per-light action colors and action temperatures. Scenes without any
    usable color data get a single neutral gray.

    Args:
        scene: Raw scene record from ``/clip/v2/resource/scene``

    Returns:
        Between one and six hex colors
    """
    palette = _dig(scene, "palette") or {}
    actions = [_dig(item, "action") for item in _entries(_dig(scene, "actions"))]

    combined = [
        *(_xy_color(entry) for entry in _entries(_dig(palette, "color"))),
        *(_temperature_color(entry) for entry in _entries(_dig(palette, "color_temperature"))),
        *(_xy_color(action) for action in actions),
        *(_temperature_color(action) for action in actions),
    ]

    return dedupe_colors(combined) or [NO_DATA_COLOR]
