"""
간트 차트 Figure 테스트

Streamlit 없이 build_gantt_figure 결과만 검증합니다.
"""

from __future__ import annotations

import pandas as pd
import pytest

from release_gantt.core.config import CONFIG
from release_gantt.domain import Release
from release_gantt.pipeline import build_timeline_layout
from release_gantt.ui.charts.gantt import (
    BASE_WIDTH,
    LANE_HEADER_TRACE,
    axis_ticks,
    build_gantt_figure,
    chart_width,
)


def _bar_traces(fig):
    return {trace.name: trace for trace in fig.data if trace.name != LANE_HEADER_TRACE}


def _dashed_shapes(fig):
    return [shape for shape in fig.layout.shapes if shape.line.dash == "dash"]


def test_figure_uses_percent_axis_with_period_labels(sample_releases, sample_groups, now) -> None:
    layout = build_timeline_layout(sample_releases, "Months", now=now, groups=sample_groups)

    fig = build_gantt_figure(layout, sample_releases, sample_groups)

    assert list(fig.layout.xaxis.range) == [0, 100]
    assert len(fig.layout.xaxis.tickvals) == 6
    assert fig.layout.xaxis.ticktext[0] == "Jan 2025<br>Week 1-4"


def test_figure_draws_one_bar_per_visible_release(sample_releases, sample_groups, now) -> None:
    layout = build_timeline_layout(sample_releases, "Months", now=now, groups=sample_groups)

    bars = _bar_traces(build_gantt_figure(layout, sample_releases, sample_groups))

    assert set(bars) == {"Product", "Infrastructure", "Ungrouped"}
    product = bars["Product"]
    assert list(product.y) == ["data-lake", "mobile"]
    assert product.base[0] == pytest.approx(layout.positions["data-lake"].offset_percent)
    assert product.x[0] == pytest.approx(layout.positions["data-lake"].width_percent)


def test_collapsed_lane_keeps_header_row_only(sample_releases, sample_groups, now) -> None:
    layout = build_timeline_layout(
        sample_releases, "Months", now=now, groups=sample_groups, collapsed=["product"]
    )

    fig = build_gantt_figure(layout, sample_releases, sample_groups)

    assert "Product" not in _bar_traces(fig)
    rows = list(fig.layout.yaxis.categoryarray)
    assert "lane::product" in rows
    assert "data-lake" not in rows


def test_today_line_drawn_only_when_visible(sample_releases, now) -> None:
    visible = build_timeline_layout(sample_releases, "Months", now=now)
    hidden = build_timeline_layout(sample_releases, "Months", now=pd.Timestamp("2030-01-01"))

    shapes = _dashed_shapes(build_gantt_figure(visible, sample_releases))
    assert len(shapes) == 1
    assert shapes[0].x0 == pytest.approx(visible.today_offset)
    assert _dashed_shapes(build_gantt_figure(hidden, sample_releases)) == []


def test_axis_ticks_center_labels_between_boundaries() -> None:
    layout = build_timeline_layout([], "Quarters", now=pd.Timestamp("2025-05-01"))

    centers, texts, boundaries = axis_ticks(layout)

    assert centers == pytest.approx([12.5, 37.5, 62.5, 87.5])
    assert boundaries == pytest.approx([25.0, 50.0, 75.0])
    assert texts[0] == "Q1 2025<br>Jan-Mar"


def test_figure_accepts_releases_built_from_date_strings(now) -> None:
    releases = [
        Release("a", "2025-01-15", "2025-03-20", name="Alpha"),
        Release("b", "2025-02-01T09:00:00Z", "2025-02-10T18:00:00Z"),
    ]
    layout = build_timeline_layout(releases, "Months", now=now)

    fig = build_gantt_figure(layout, releases)

    (bars,) = _bar_traces(fig).values()
    assert list(bars.y) == ["a", "b"]
    assert list(bars.customdata[0]) == ["Alpha", "2025-01-15", "2025-03-20", "upcoming"]


def test_ungrouped_lane_uses_configured_color(sample_releases, sample_groups, now) -> None:
    layout = build_timeline_layout(sample_releases, "Months", now=now, groups=sample_groups)

    ungrouped = layout.lanes[-1]
    assert ungrouped.group_id is None
    assert ungrouped.name == CONFIG.lanes.ungrouped_name
    assert ungrouped.color == CONFIG.lanes.ungrouped_color


@pytest.mark.parametrize(
    "zoom, expected",
    [
        (None, None),
        (100, None),
        (50, BASE_WIDTH // 2),
        (200, BASE_WIDTH * 2),
        (237, BASE_WIDTH * 2),
    ],
)
def test_chart_width_follows_zoom(zoom, expected) -> None:
    assert chart_width(zoom) == expected


def test_zoomed_figure_sets_layout_width(sample_releases, now) -> None:
    layout = build_timeline_layout(sample_releases, "Months", now=now)

    assert build_gantt_figure(layout, sample_releases).layout.width is None
    assert build_gantt_figure(layout, sample_releases, zoom=150).layout.width == int(
        round(BASE_WIDTH * 1.5)
    )
