"""Interactive scene browser."""

from huepresets.tui.controller import Mode, PresetController, UIState

__all__ = ["Mode", "PresetController", "UIState"]
