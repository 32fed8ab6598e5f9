"""High level orchestration for one timeline layout pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Sequence

import pandas as pd

from ..common.dates import utc_now
from ..core.config import CONFIG, GanttConfig
from ..domain.models import (
    DateRange,
    Granularity,
    Position,
    ReleaseGroup,
    ScheduledItem,
    TimeAxis,
)
from ..domain.validation import parse_granularity, validate_items
from .axis import generate_axis
from .position import map_position
from .range import compute_date_range
from .today import NOT_VISIBLE, locate_today

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupLane:
    """
    한 릴리스 그룹에 해당하는 타임라인 레인.

    Attributes:
        group_id: 그룹 ID (미분류 레인은 None)
        name: 표시 이름
        color: 막대 색상
        item_ids: 레인에 배치된 항목 ID (입력 순서)
        total: 날짜가 잘못된 항목까지 포함한 그룹 소속 항목 수
        collapsed: 접힌 레인인지 여부 (막대는 숨기고 개수만 표시)
    """

    group_id: Optional[str]
    name: str
    color: str
    item_ids: tuple[str, ...]
    total: int
    collapsed: bool = False

    @property
    def visible_item_ids(self) -> tuple[str, ...]:
        return () if self.collapsed else self.item_ids


@dataclass(frozen=True)
class TimelineLayout:
    """
    레이아웃 계산 결과.

    Attributes:
        granularity: 축 단위
        axis: 생성된 축
        date_range: 항목 날짜 범위 (항목이 없으면 None)
        positions: 항목 ID → Position
        today_offset: 오늘 마커 오프셋 (숨김이면 -1)
        lanes: 그룹 레인 목록
        excluded_ids: 날짜가 잘못되어 제외된 항목 ID
    """

    granularity: Granularity
    axis: TimeAxis
    date_range: Optional[DateRange]
    positions: Mapping[str, Position]
    today_offset: float
    lanes: tuple[GroupLane, ...] = ()
    excluded_ids: tuple[str, ...] = ()

    @property
    def today_visible(self) -> bool:
        return self.today_offset != NOT_VISIBLE

    def position_for(self, item_id: str) -> Optional[Position]:
        return self.positions.get(item_id)


@dataclass(frozen=True)
class TimelineContext:
    granularity: Granularity
    now: pd.Timestamp
    collapsed: frozenset[str] = field(default_factory=frozenset)
    config: GanttConfig = CONFIG


def build_lanes(
    items: Sequence[ScheduledItem],
    groups: Optional[Iterable[ReleaseGroup]],
    *,
    positioned: Iterable[str],
    collapsed: Iterable[str] = (),
    config: GanttConfig = CONFIG,
) -> tuple[GroupLane, ...]:
    """
    항목을 그룹 순서대로 레인에 나눕니다.

    알 수 없는 그룹(또는 그룹이 없는 항목)은 마지막 미분류 레인(config.lanes)으로 갑니다.
    """
    group_list = list(groups or [])
    known = {group.id for group in group_list}
    positioned_ids = set(positioned)
    collapsed_ids = set(collapsed)

    buckets: dict[Optional[str], list[ScheduledItem]] = {group.id: [] for group in group_list}
    buckets[None] = []
    for item in items:
        group_id = getattr(item, "group_id", None)
        buckets[group_id if group_id in known else None].append(item)

    def _lane(group_id: Optional[str], name: str, color: str) -> GroupLane:
        members = buckets[group_id]
        return GroupLane(
            group_id=group_id,
            name=name,
            color=color,
            item_ids=tuple(item.id for item in members if item.id in positioned_ids),
            total=len(members),
            collapsed=group_id in collapsed_ids,
        )

    lanes = [_lane(group.id, group.name, group.color) for group in group_list]
    if buckets[None]:
        lanes.append(_lane(None, config.lanes.ungrouped_name, config.lanes.ungrouped_color))
    return tuple(lanes)


class TimelineBuilder:
    """Runs range analysis, axis generation, positioning and today placement."""

    def __init__(self, context: TimelineContext) -> None:
        self.context = context

    def build(
        self,
        items: Iterable[ScheduledItem],
        groups: Optional[Iterable[ReleaseGroup]] = None,
    ) -> TimelineLayout:
        config = self.context.config
        granularity = self.context.granularity
        all_items = validate_items(items)

        visible = [item for item in all_items if item.has_valid_dates]
        excluded = tuple(item.id for item in all_items if not item.has_valid_dates)
        if excluded:
            logger.warning(f"Excluded {len(excluded)} items with malformed dates: {list(excluded)}")

        date_range = compute_date_range(visible)
        axis = generate_axis(granularity, date_range, today=self.context.now, config=config)

        positions = {
            item.id: map_position(item.start_date, item.end_date, granularity, axis, config=config)
            for item in visible
        }
        today_offset = locate_today(granularity, axis, visible, now=self.context.now, config=config)

        lanes = build_lanes(
            all_items,
            groups,
            positioned=positions.keys(),
            collapsed=self.context.collapsed,
            config=config,
        )

        logger.debug(
            f"Layout: {granularity.value}, {len(axis)} periods, "
            f"{len(positions)} bars, today={today_offset:.2f}"
        )

        return TimelineLayout(
            granularity=granularity,
            axis=axis,
            date_range=date_range,
            positions=positions,
            today_offset=today_offset,
            lanes=lanes,
            excluded_ids=excluded,
        )


def make_context(
    granularity: Granularity | str,
    *,
    now: Optional[pd.Timestamp] = None,
    collapsed: Iterable[str] = (),
    config: GanttConfig = CONFIG,
) -> TimelineContext:
    """Build a TimelineContext, resolving the view mode and the wall clock."""

    return TimelineContext(
        granularity=parse_granularity(granularity),
        now=utc_now() if now is None else pd.Timestamp(now),
        collapsed=frozenset(collapsed),
        config=config,
    )
