"""
레이아웃 파이프라인 테스트

build_timeline_layout의 전체 흐름, 그룹 레인, 멱등성을 검증합니다.
"""

from __future__ import annotations

import pandas as pd
import pytest

from release_gantt.core.config import GanttConfig, LaneConfig
from release_gantt.domain import (
    Granularity,
    InvalidGranularityError,
    ScheduledItem,
    ValidationError,
)
from release_gantt.pipeline import build_timeline_layout
from release_gantt.planning import TimelineBuilder, make_context


def test_layout_positions_dated_releases_and_excludes_the_rest(sample_releases, sample_groups, now) -> None:
    layout = build_timeline_layout(sample_releases, "Months", now=now, groups=sample_groups)

    assert layout.granularity is Granularity.MONTH
    assert [label.label for label in layout.axis] == [
        "Jan 2025",
        "Feb 2025",
        "Mar 2025",
        "Apr 2025",
        "May 2025",
        "Jun 2025",
    ]
    assert set(layout.positions) == {"data-lake", "mobile", "aws", "orphan"}
    assert layout.excluded_ids == ("undated",)
    assert layout.date_range.start == pd.Timestamp("2025-01-01")
    assert layout.position_for("undated") is None


def test_layout_today_offset(sample_releases, now) -> None:
    layout = build_timeline_layout(sample_releases, "Months", now=now)

    assert layout.today_visible
    assert layout.today_offset == pytest.approx((1 + 11 / 31) * (100 / 6))


def test_layout_groups_releases_into_lanes(sample_releases, sample_groups, now) -> None:
    layout = build_timeline_layout(sample_releases, "Quarters", now=now, groups=sample_groups)

    lanes = {lane.name: lane for lane in layout.lanes}
    assert [lane.name for lane in layout.lanes] == ["Product", "Infrastructure", "Ungrouped"]
    assert lanes["Product"].item_ids == ("data-lake", "mobile")
    assert lanes["Product"].color == "#8B5CF6"
    # 날짜가 없는 릴리스는 막대 없이 개수에만 포함
    assert lanes["Infrastructure"].item_ids == ("aws",)
    assert lanes["Infrastructure"].total == 2
    assert lanes["Ungrouped"].group_id is None
    assert lanes["Ungrouped"].item_ids == ("orphan",)


def test_collapsed_group_hides_bars_but_keeps_positions(sample_releases, sample_groups, now) -> None:
    layout = build_timeline_layout(
        sample_releases, "Months", now=now, groups=sample_groups, collapsed=["product"]
    )

    product = layout.lanes[0]
    assert product.collapsed is True
    assert product.visible_item_ids == ()
    assert product.total == 2
    assert "data-lake" in layout.positions


def test_layout_without_groups_uses_single_ungrouped_lane(sample_releases, now) -> None:
    layout = build_timeline_layout(sample_releases, "Weeks", now=now)

    assert len(layout.lanes) == 1
    assert layout.lanes[0].name == "Ungrouped"
    assert layout.lanes[0].total == len(sample_releases)


def test_lane_name_and_color_come_from_config(sample_releases, now) -> None:
    config = GanttConfig(lanes=LaneConfig(ungrouped_name="Other", ungrouped_color="#000000"))

    layout = build_timeline_layout(sample_releases, "Months", now=now, config=config)

    assert layout.lanes[0].name == "Other"
    assert layout.lanes[0].color == "#000000"


def test_unparseable_date_strings_are_excluded_not_positioned(now) -> None:
    items = [
        ScheduledItem("good", "2025-02-01", "2025-02-20"),
        ScheduledItem("bad", "2025-02-01", "not a date"),
    ]

    layout = build_timeline_layout(items, "Months", now=now)

    assert layout.excluded_ids == ("bad",)
    assert set(layout.positions) == {"good"}
    assert [label.label for label in layout.axis] == ["Feb 2025"]


@pytest.mark.parametrize("granularity", ["Quarters", "Months", "Weeks"])
def test_layout_is_idempotent(granularity, sample_releases, sample_groups, now) -> None:
    first = build_timeline_layout(sample_releases, granularity, now=now, groups=sample_groups)
    second = build_timeline_layout(sample_releases, granularity, now=now, groups=sample_groups)

    assert first == second


def test_empty_weeks_layout_is_synthetic_and_hides_today() -> None:
    layout = build_timeline_layout([], "Weeks", now=pd.Timestamp("2025-07-01"))

    assert layout.axis.synthetic is True
    assert [label.label for label in layout.axis] == [f"Week {n}" for n in range(1, 7)]
    assert layout.positions == {}
    assert layout.lanes == ()
    assert layout.date_range is None
    assert layout.today_offset == -1
    assert layout.today_visible is False


def test_layout_rejects_unknown_granularity(sample_releases) -> None:
    with pytest.raises(InvalidGranularityError):
        build_timeline_layout(sample_releases, "Fortnights")


def test_layout_rejects_non_item_values() -> None:
    with pytest.raises(ValidationError):
        build_timeline_layout([{"id": "r1"}], "Months")
    with pytest.raises(ValidationError):
        build_timeline_layout(None, "Months")


def test_builder_matches_pipeline(sample_releases, now) -> None:
    context = make_context("months", now=now)

    assert TimelineBuilder(context).build(sample_releases) == build_timeline_layout(
        sample_releases, Granularity.MONTH, now=now
    )
