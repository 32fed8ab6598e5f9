"""Current-day marker placement."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import pandas as pd

from ..common.dates import utc_now
from ..core.config import CONFIG, GanttConfig
from ..domain.exceptions import ValidationError
from ..domain.models import Granularity, ScheduledItem, TimeAxis
from ..domain.models import to_timestamp
from ..domain.validation import parse_granularity
from .position import intra_period_fraction
from .range import compute_date_range

logger = logging.getLogger(__name__)

# 마커를 그리지 않아야 함을 뜻하는 값
NOT_VISIBLE = -1.0


def locate_today(
    granularity: Granularity | str,
    axis: TimeAxis,
    items: Iterable[ScheduledItem],
    *,
    now: Optional[pd.Timestamp] = None,
    config: GanttConfig = CONFIG,
) -> float:
    """
    오늘 마커의 오프셋(%)을 계산합니다.

    1. 축에서 "지금"이 속한 기간을 찾으면 막대와 같은 규칙으로 오프셋 계산
    2. 못 찾으면 전체 항목 날짜 범위 안에 있을 때만 범위 비례 위치 사용
    3. 둘 다 아니면 NOT_VISIBLE(-1) 반환

    계산된 값은 오른쪽 끝에 붙지 않도록 today_max_offset(98%)으로 제한됩니다.

    Args:
        granularity: 축 단위
        axis: 현재 축
        items: 전체 항목 (폴백 범위 계산용)
        now: 기준 시각 (None이면 현재 시각)
        config: 타임라인 설정

    Returns:
        [0, 98] 범위의 오프셋 또는 -1

    Examples:
        >>> locate_today("Weeks", empty_axis, [], now=pd.Timestamp("2031-07-01"))
        -1.0
    """
    granularity = parse_granularity(granularity)
    if axis.granularity is not granularity:
        raise ValidationError(
            f"Axis was generated for {axis.granularity.value}, "
            f"cannot place a {granularity.value} today marker on it"
        )

    current = to_timestamp(utc_now() if now is None else now)
    if current is None:
        return NOT_VISIBLE
    max_offset = config.position.today_max_offset

    # ========================================
    # 1단계: 축 기간 매칭
    # ========================================
    index = axis.locate(current)
    if index is not None:
        offset = (index + intra_period_fraction(current, granularity, config=config)) * axis.period_width
        return min(offset, max_offset)

    # ========================================
    # 2단계: 전체 항목 범위 비례 폴백
    # ========================================
    date_range = compute_date_range(items)
    if date_range is not None and date_range.contains(current):
        span = date_range.span
        if span <= pd.Timedelta(0):
            offset = 0.0
        else:
            offset = (current - date_range.start) / span * 100.0
        logger.debug(f"Today {current} not on {granularity.value} axis; range-proportional {offset:.2f}%")
        return min(float(offset), max_offset)

    logger.debug(f"Today {current} is outside the axis and the item range; marker hidden")
    return NOT_VISIBLE
