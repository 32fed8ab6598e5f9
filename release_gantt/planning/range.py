"""Range analysis over scheduled items.

항목 집합 전체의 [최소 날짜, 최대 날짜]를 계산하고, 항목이 없을 때
사용할 올해 기준 기본 범위를 만듭니다.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import pandas as pd

from ..common.dates import year_start
from ..core.config import CONFIG, GanttConfig
from ..domain.models import DateRange, Granularity, ScheduledItem
from ..domain.models import to_timestamp

logger = logging.getLogger(__name__)


def compute_date_range(items: Iterable[ScheduledItem]) -> Optional[DateRange]:
    """
    모든 항목의 시작/종료 날짜 중 최소값과 최대값을 반환합니다.

    잘못되었거나 비어 있는 날짜는 예외 없이 제외됩니다.

    Args:
        items: 일정 항목 목록

    Returns:
        DateRange. 유효한 날짜가 하나도 없으면 None (빈 범위).

    Examples:
        >>> compute_date_range([
        ...     ScheduledItem("a", pd.Timestamp("2025-01-15"), pd.Timestamp("2025-03-20")),
        ...     ScheduledItem("b", pd.Timestamp("2025-02-01"), pd.Timestamp("2025-05-01")),
        ... ])
        DateRange(start=Timestamp('2025-01-15 00:00:00'), end=Timestamp('2025-05-01 00:00:00'))
    """
    stamps: list[pd.Timestamp] = []
    skipped = 0
    for item in items:
        for raw in (item.start_date, item.end_date):
            value = to_timestamp(raw)
            if value is None:
                skipped += 1
                continue
            stamps.append(value)

    if skipped:
        logger.debug(f"Range analysis skipped {skipped} missing or malformed dates")

    if not stamps:
        return None

    return DateRange(start=min(stamps), end=max(stamps))


def default_range(
    granularity: Granularity,
    today: pd.Timestamp,
    *,
    config: GanttConfig = CONFIG,
) -> DateRange:
    """
    항목이 없을 때 사용할 올해 기준 기본 범위를 반환합니다.

    - 분기: 올해 1월 1일부터 default_quarters개 분기
    - 월: 올해 1월 1일부터 default_months개 월
    - 주: 1월 1일 이전(또는 당일) 월요일부터 default_weeks개 주

    Args:
        granularity: 축 단위
        today: 기준 시각 (연도만 사용)
        config: 타임라인 설정

    Returns:
        기본 기간들이 덮는 DateRange
    """
    anchor = year_start(pd.Timestamp(today).year)
    count = config.axis.default_count_for(granularity)

    first = granularity.period_of(anchor)
    last = first + (count - 1)
    return DateRange(start=first.start_time, end=last.end_time)
