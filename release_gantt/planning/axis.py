"""Axis generation for the release timeline.

선택된 단위(분기/월/주)와 날짜 범위로부터 순서가 있는 기간 라벨
시퀀스를 생성합니다. 범위가 비어 있으면 올해 기준 기본 축을 합성합니다.
"""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd
from pandas.errors import OutOfBoundsDatetime

from ..common.dates import utc_now
from ..core.config import CONFIG, GanttConfig
from ..domain.exceptions import DateOverflowError
from ..domain.models import AxisLabel, DateRange, Granularity, TimeAxis
from ..domain.validation import parse_granularity
from .range import default_range

logger = logging.getLogger(__name__)


# ========================================
# 라벨 포맷
# ========================================


def _quarter_label(period: pd.Period, config: GanttConfig) -> AxisLabel:
    sublabels = config.axis.quarter_sublabels
    return AxisLabel(
        label=f"Q{period.quarter} {period.year}",
        sublabel=sublabels[(period.quarter - 1) % len(sublabels)],
    )


def _month_label(period: pd.Period, config: GanttConfig) -> AxisLabel:
    return AxisLabel(label=period.strftime("%b %Y"), sublabel=config.axis.month_sublabel)


def _week_label(index: int, period: pd.Period) -> AxisLabel:
    # 주 번호는 달력 주차가 아니라 축의 첫 월요일부터 세는 누적 번호
    return AxisLabel(
        label=f"Week {index + 1}",
        sublabel=f"{period.start_time:%m/%d}-{period.end_time:%m/%d}",
    )


def _placeholder_week_label(index: int, config: GanttConfig) -> AxisLabel:
    sublabels = config.axis.synthetic_week_sublabels
    return AxisLabel(label=f"Week {index + 1}", sublabel=sublabels[index % len(sublabels)])


def label_periods(
    granularity: Granularity,
    periods: list[pd.Period],
    *,
    synthetic: bool = False,
    config: GanttConfig = CONFIG,
) -> tuple[AxisLabel, ...]:
    """
    기간 목록에 단위별 라벨/서브라벨을 붙입니다.

    synthetic=True(데이터 없이 합성한 축)이면 주 단위 서브라벨은 실제 날짜 대신
    자리표시자를 사용합니다.
    """
    if granularity is Granularity.QUARTER:
        return tuple(_quarter_label(p, config) for p in periods)
    if granularity is Granularity.MONTH:
        return tuple(_month_label(p, config) for p in periods)
    if synthetic:
        return tuple(_placeholder_week_label(i, config) for i in range(len(periods)))
    return tuple(_week_label(i, p) for i, p in enumerate(periods))


# ========================================
# 기간 열거
# ========================================


def _enumerate_periods(
    granularity: Granularity,
    date_range: DateRange,
    config: GanttConfig,
) -> list[pd.Period]:
    first = granularity.period_of(date_range.start)
    last = granularity.period_of(date_range.end)

    if granularity is Granularity.WEEK:
        # 종료일이 확실히 포함되도록 한 주를 더 생성
        last = last + 1

    cap = config.axis.cap_for(granularity)
    end = min(last, first + (cap - 1))
    periods = list(pd.period_range(start=first, end=end, freq=granularity.freq))

    # 데이터가 적어도 타임라인 폭이 유지되도록 최소 기간 수까지 확장
    min_periods = min(config.axis.min_periods_for(granularity), cap)
    while len(periods) < min_periods:
        periods.append(periods[-1] + 1)

    if last > end:
        logger.info(
            f"{granularity.value} axis truncated to {cap} periods "
            f"({first} .. {end}, data runs to {last})"
        )

    return periods


def generate_axis(
    granularity: Granularity | str,
    date_range: Optional[DateRange],
    *,
    today: Optional[pd.Timestamp] = None,
    config: GanttConfig = CONFIG,
) -> TimeAxis:
    """
    단위와 날짜 범위로 타임라인 축을 생성합니다.

    단위별 규칙:
    - 분기: 최소 날짜가 속한 분기부터 최대 날짜가 속한 분기까지, "Q{n} {year}"
    - 월: 최소 날짜의 월부터 최대 날짜의 월까지, "{Mon} {year}"
    - 주: 최소 날짜 이전(또는 당일) 월요일부터 최대 날짜 다음 주까지, "Week {n}"
      (최소 week_min_periods개 보장)
    각 단위는 설정된 최대 기간 수로 잘립니다.

    Args:
        granularity: 축 단위
        date_range: compute_date_range 결과. None이면 올해 기준 기본 축 합성
        today: 기본 축의 기준 시각 (None이면 현재 시각)
        config: 타임라인 설정

    Returns:
        TimeAxis

    Raises:
        InvalidGranularityError: 알 수 없는 단위
        DateOverflowError: 기간 연산이 표현 범위를 벗어날 때

    Examples:
        >>> axis = generate_axis(
        ...     "Months",
        ...     DateRange(pd.Timestamp("2025-01-15"), pd.Timestamp("2025-03-20")),
        ... )
        >>> [label.label for label in axis]
        ['Jan 2025', 'Feb 2025', 'Mar 2025']
    """
    granularity = parse_granularity(granularity)

    try:
        if date_range is None:
            anchor = utc_now() if today is None else pd.Timestamp(today)
            fallback = default_range(granularity, anchor, config=config)
            count = config.axis.default_count_for(granularity)
            first = granularity.period_of(fallback.start)
            periods = [first + offset for offset in range(count)]
            synthetic = True
            logger.debug(f"No dated items; synthesised {count}-period {granularity.value} axis")
        else:
            periods = _enumerate_periods(granularity, date_range, config)
            synthetic = False

        labels = label_periods(granularity, periods, synthetic=synthetic, config=config)
    except (OutOfBoundsDatetime, OverflowError) as exc:
        raise DateOverflowError(
            f"Cannot build {granularity.value} axis for range {date_range}: {exc}"
        ) from exc

    return TimeAxis(
        granularity=granularity,
        periods=tuple(periods),
        labels=labels,
        synthetic=synthetic,
    )
