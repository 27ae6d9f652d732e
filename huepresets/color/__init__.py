"""Color derivation for scene previews."""

from huepresets.color.colorimetry import (
    NO_DATA_COLOR,
    SMART_SCENE_COLORS,
    mirek_to_hex,
    xy_bri_to_hex,
)
from huepresets.color.extraction import dedupe_colors, extract_colors

__all__ = [
    "NO_DATA_COLOR",
    "SMART_SCENE_COLORS",
    "dedupe_colors",
    "extract_colors",
    "mirek_to_hex",
    "xy_bri_to_hex",
]
