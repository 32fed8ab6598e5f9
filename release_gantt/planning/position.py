"""Date-range to bar-position mapping.

전체 차트 레이아웃과 단일 막대 컴포넌트가 모두 이 함수 하나를 사용합니다.
결과는 입력이 같으면 항상 같습니다 (캐시 없이 렌더링마다 재계산).
"""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from ..core.config import CONFIG, GanttConfig
from ..domain.exceptions import ValidationError
from ..domain.models import Granularity, Position, TimeAxis
from ..domain.models import to_timestamp
from ..domain.validation import parse_granularity

logger = logging.getLogger(__name__)


def intra_period_fraction(
    value: pd.Timestamp,
    granularity: Granularity,
    *,
    config: GanttConfig = CONFIG,
) -> float:
    """
    기간 내부에서 날짜가 차지하는 비율 [0, 1)을 반환합니다.

    - 분기: 분기 내 월 순서 / 3  (예: 2월 → 1/3)
    - 월: (일 - 1) / 31
    - 주: 0 (주 단위 해상도)

    Examples:
        >>> intra_period_fraction(pd.Timestamp("2025-01-15"), Granularity.MONTH)
        0.45161290322580644
    """
    if granularity is Granularity.QUARTER:
        return ((value.month - 1) % 3) / 3.0
    if granularity is Granularity.MONTH:
        return (value.day - 1) / float(config.position.month_day_divisor)
    return 0.0


def _fallback_position(
    start: Optional[pd.Timestamp],
    axis: TimeAxis,
    min_width: float,
) -> Position:
    """축에서 시작 기간을 찾지 못한 항목을 가장 가까운 경계에 한 기간 폭으로 배치합니다."""

    period_width = axis.period_width
    if start is None or axis.is_before(start):
        offset = 0.0
    else:
        offset = (len(axis) - 1) * period_width
    return Position(offset_percent=offset, width_percent=max(min_width, period_width))


def map_position(
    start_date: Optional[pd.Timestamp],
    end_date: Optional[pd.Timestamp],
    granularity: Granularity | str,
    axis: TimeAxis,
    *,
    config: GanttConfig = CONFIG,
) -> Position:
    """
    항목의 [시작, 종료] 날짜를 축 기준 (오프셋 %, 폭 %)으로 변환합니다.

    계산 순서:
    1. 시작 날짜가 속한 기간 인덱스를 찾고 기간 내부 오프셋을 더함
    2. 종료 날짜가 속한 기간의 "다음" 기간 경계를 끝 오프셋으로 사용
    3. 폭 = max(단위별 최소 폭, 끝 오프셋 - 시작 오프셋)

    시작 기간이 축 밖이면 예외 대신 경계에 한 기간 폭 막대로 대체합니다.

    Args:
        start_date: 시작 시각
        end_date: 종료 시각
        granularity: 축 단위 (axis와 같아야 함)
        axis: generate_axis 결과
        config: 타임라인 설정

    Returns:
        Position

    Raises:
        InvalidGranularityError: 알 수 없는 단위
        ValidationError: granularity와 axis 단위가 다를 때

    Examples:
        >>> axis = generate_axis("Months", DateRange(
        ...     pd.Timestamp("2025-01-15"), pd.Timestamp("2025-03-20")))
        >>> map_position(pd.Timestamp("2025-01-15"), pd.Timestamp("2025-03-20"),
        ...              "Months", axis)
        Position(offset_percent=15.053..., width_percent=84.946...)
    """
    granularity = parse_granularity(granularity)
    if axis.granularity is not granularity:
        raise ValidationError(
            f"Axis was generated for {axis.granularity.value}, "
            f"cannot map a {granularity.value} position onto it"
        )

    min_width = config.position.min_width_for(granularity)
    if len(axis) == 0:
        return Position(offset_percent=0.0, width_percent=min_width)

    start = to_timestamp(start_date)
    end = to_timestamp(end_date)
    period_width = axis.period_width

    # ========================================
    # 1단계: 시작 기간 찾기
    # ========================================
    start_index = axis.locate(start)
    if start_index is None:
        position = _fallback_position(start, axis, min_width)
        logger.debug(
            f"Start {start} outside {granularity.value} axis; "
            f"fallback offset={position.offset_percent:.2f}%"
        )
        return position

    offset = (start_index + intra_period_fraction(start, granularity, config=config)) * period_width

    # ========================================
    # 2단계: 종료 기간 찾기 (축 밖이면 경계로 보정)
    # ========================================
    end_index = axis.locate(end)
    if end_index is None:
        if end is None or axis.is_before(end):
            end_index = start_index
        else:
            end_index = len(axis) - 1

    end_offset = (end_index + 1) * period_width

    # ========================================
    # 3단계: 최소 폭 적용
    # ========================================
    width = max(min_width, end_offset - offset)

    return Position(offset_percent=offset, width_percent=width)
