"""End-to-end orchestration helpers for the release timeline."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import pandas as pd

from .common.performance import measure_time
from .core.config import CONFIG, GanttConfig
from .domain.models import Granularity, ReleaseGroup, ScheduledItem
from .planning.timeline import TimelineBuilder, TimelineLayout, make_context

logger = logging.getLogger(__name__)


@measure_time
def build_timeline_layout(
    items: Iterable[ScheduledItem],
    granularity: Granularity | str,
    *,
    now: Optional[pd.Timestamp] = None,
    groups: Optional[Iterable[ReleaseGroup]] = None,
    collapsed: Iterable[str] = (),
    config: GanttConfig = CONFIG,
) -> TimelineLayout:
    """
    항목 목록으로 한 번의 레이아웃 패스를 실행합니다.

    범위 분석 → 축 생성 → 막대 위치 → 오늘 마커 → 그룹 레인 순서로
    계산하며, 같은 입력(같은 now)에 대해서는 항상 같은 결과를 반환합니다.

    Args:
        items: ScheduledItem(또는 Release) 목록
        granularity: "Quarters" | "Months" | "Weeks" 또는 Granularity
        now: 오늘 마커 기준 시각 (None이면 현재 UTC 시각)
        groups: 레인 순서를 정하는 릴리스 그룹 목록
        collapsed: 접힌 그룹 ID
        config: 타임라인 설정

    Returns:
        TimelineLayout

    Raises:
        InvalidGranularityError: 알 수 없는 단위
        ValidationError: items가 ScheduledItem 목록이 아닐 때
        DateOverflowError: 날짜 연산이 표현 범위를 벗어날 때
    """
    context = make_context(granularity, now=now, collapsed=collapsed, config=config)
    logger.debug(f"Building {context.granularity.value} layout (now={context.now})")

    layout = TimelineBuilder(context).build(items, groups)
    logger.debug(
        f"Layout created: {len(layout.axis)} periods, {len(layout.positions)} bars, "
        f"{len(layout.lanes)} lanes, {len(layout.excluded_ids)} excluded"
    )
    return layout
