"""차트 렌더링 모듈."""

from .colors import STATUS_COLORS, status_color, with_alpha
from .gantt import axis_ticks, build_gantt_figure, chart_width, render_gantt_chart

__all__ = [
    "STATUS_COLORS",
    "status_color",
    "with_alpha",
    "axis_ticks",
    "build_gantt_figure",
    "chart_width",
    "render_gantt_chart",
]
