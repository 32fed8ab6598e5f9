"""Interaction layer: pointer gestures to date changes."""

from .drag import (
    DragResizeInterpreter,
    DragSession,
    GestureMode,
    GesturePreview,
    ItemUpdater,
    round_half_up,
)

__all__ = [
    "DragResizeInterpreter",
    "DragSession",
    "GestureMode",
    "GesturePreview",
    "ItemUpdater",
    "round_half_up",
]
