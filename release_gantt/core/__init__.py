"""Core configuration exports."""

from .config import (
    CONFIG,
    AxisConfig,
    GanttConfig,
    InteractionConfig,
    LaneConfig,
    PositionConfig,
)

__all__ = [
    "CONFIG",
    "AxisConfig",
    "GanttConfig",
    "InteractionConfig",
    "LaneConfig",
    "PositionConfig",
]
