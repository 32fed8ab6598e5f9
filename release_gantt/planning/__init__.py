"""Planning layer exports: range, axis, position and today-marker computation."""

from .axis import generate_axis, label_periods
from .position import intra_period_fraction, map_position
from .range import compute_date_range, default_range
from .timeline import (
    GroupLane,
    TimelineBuilder,
    TimelineContext,
    TimelineLayout,
    build_lanes,
    make_context,
)
from .today import NOT_VISIBLE, locate_today

__all__ = [
    "compute_date_range",
    "default_range",
    "generate_axis",
    "label_periods",
    "intra_period_fraction",
    "map_position",
    "NOT_VISIBLE",
    "locate_today",
    "GroupLane",
    "TimelineBuilder",
    "TimelineContext",
    "TimelineLayout",
    "build_lanes",
    "make_context",
]
