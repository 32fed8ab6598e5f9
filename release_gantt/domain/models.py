"""
도메인 모델: 릴리스 타임라인의 핵심 데이터 구조

이 모듈은 타임라인 계산에서 사용하는 값 객체들을 정의합니다.
모든 모델은 불변(frozen) 데이터클래스로 구현되어 렌더링마다
다시 계산되어도 상태가 어긋나지 않도록 보장합니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional, Tuple

import pandas as pd


class Granularity(str, Enum):
    """
    타임라인 축의 시간 단위.

    값은 보기 모드 선택 컨트롤이 사용하는 문자열과 동일합니다.
    """

    QUARTER = "Quarters"
    MONTH = "Months"
    WEEK = "Weeks"

    @property
    def freq(self) -> str:
        """pandas Period 빈도 문자열 (주는 월요일 시작, 일요일 종료)."""
        return {
            Granularity.QUARTER: "Q",
            Granularity.MONTH: "M",
            Granularity.WEEK: "W-SUN",
        }[self]

    def period_of(self, value: pd.Timestamp) -> pd.Period:
        """Return the axis period containing *value* for this granularity."""

        return pd.Period(value, freq=self.freq)


@dataclass(frozen=True)
class ScheduledItem:
    """
    타임라인에 배치되는 일정 항목.

    생성 시 날짜를 타임존 없는(UTC 기준) Timestamp로 변환합니다.
    문자열/datetime도 받으며, 파싱에 실패한 날짜는 None으로 보관되어
    범위/축 계산에서 제외됩니다.

    Attributes:
        id: 항목 식별자
        start_date: 시작 시각
        end_date: 종료 시각
    """

    id: str
    start_date: Optional[pd.Timestamp]
    end_date: Optional[pd.Timestamp]

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", to_timestamp(self.start_date))
        object.__setattr__(self, "end_date", to_timestamp(self.end_date))

    @property
    def has_valid_dates(self) -> bool:
        return _is_valid(self.start_date) and _is_valid(self.end_date)

    @property
    def duration_days(self) -> Optional[int]:
        if not self.has_valid_dates:
            return None
        return int((self.end_date - self.start_date) / pd.Timedelta(days=1))


@dataclass(frozen=True)
class Release(ScheduledItem):
    """
    릴리스 항목. ScheduledItem에 표시용 메타데이터를 더합니다.

    Attributes:
        name: 릴리스 이름
        group_id: 소속 릴리스 그룹 ID (없으면 None)
        icon: 아이콘 클래스명
        status: upcoming | in-progress | completed | delayed
    """

    name: str = ""
    group_id: Optional[str] = None
    icon: str = "fas fa-rocket"
    status: str = "upcoming"


@dataclass(frozen=True)
class ReleaseGroup:
    """릴리스 그룹 (타임라인의 한 레인)."""

    id: str
    name: str
    color: str = "#3B82F6"


@dataclass(frozen=True)
class DateRange:
    """
    항목 집합 전체의 날짜 범위 [start, end].

    Examples:
        >>> rng = DateRange(pd.Timestamp("2025-01-15"), pd.Timestamp("2025-03-20"))
        >>> rng.contains(pd.Timestamp("2025-02-01"))
        True
    """

    start: pd.Timestamp
    end: pd.Timestamp

    def contains(self, value: pd.Timestamp) -> bool:
        return self.start <= value <= self.end

    @property
    def span(self) -> pd.Timedelta:
        return self.end - self.start


@dataclass(frozen=True)
class AxisLabel:
    """축의 한 기간에 대한 헤더 라벨."""

    label: str
    sublabel: str


@dataclass(frozen=True)
class TimeAxis:
    """
    순서가 있는 기간 라벨 시퀀스와 각 라벨이 나타내는 실제 기간.

    라벨 순서가 곧 인덱스 → 위치 매핑을 정의합니다. 항목의 날짜는
    라벨 문자열이 아니라 같은 규칙으로 계산한 pandas Period로 매칭되므로
    주 단위의 누적 번호("Week n")와 날짜 매칭이 어긋나지 않습니다.

    Attributes:
        granularity: 축 단위
        periods: 라벨과 같은 순서의 Period 튜플
        labels: AxisLabel 튜플
        synthetic: 데이터가 없어 올해 기준으로 합성된 축인지 여부
    """

    granularity: Granularity
    periods: Tuple[pd.Period, ...]
    labels: Tuple[AxisLabel, ...]
    synthetic: bool = False

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[AxisLabel]:
        return iter(self.labels)

    @property
    def period_width(self) -> float:
        """한 기간이 차지하는 폭 (%)."""
        return 100.0 / len(self.labels) if self.labels else 0.0

    @property
    def bounds(self) -> Optional[DateRange]:
        """축이 암묵적으로 덮는 날짜 범위 (첫 기간 시작 ~ 마지막 기간 끝)."""
        if not self.periods:
            return None
        return DateRange(self.periods[0].start_time, self.periods[-1].end_time)

    def locate(self, value: Optional[pd.Timestamp]) -> Optional[int]:
        """
        *value*가 속한 기간의 인덱스를 반환합니다. 축 밖이면 None.
        """
        if not _is_valid(value) or not self.periods:
            return None
        period = self.granularity.period_of(value)
        try:
            return self.periods.index(period)
        except ValueError:
            return None

    def is_before(self, value: pd.Timestamp) -> bool:
        """*value*가 축의 첫 기간보다 앞인지 여부."""
        return bool(self.periods) and self.granularity.period_of(value) < self.periods[0]


@dataclass(frozen=True)
class Position:
    """
    축 기준 막대 위치.

    Attributes:
        offset_percent: 왼쪽 오프셋 [0, 100)
        width_percent: 막대 폭 (> 0)
    """

    offset_percent: float
    width_percent: float


@dataclass(frozen=True)
class DateUpdate:
    """
    드래그/리사이즈 확정 시 저장소로 전달되는 부분 업데이트 요청.
    """

    item_id: str
    start_date: pd.Timestamp
    end_date: pd.Timestamp

    def to_payload(self) -> dict[str, str]:
        """Return the `{id, startDate, endDate}` body for the item-update endpoint."""

        return {
            "id": self.item_id,
            "startDate": _to_iso(self.start_date),
            "endDate": _to_iso(self.end_date),
        }


def to_timestamp(value: Any) -> Optional[pd.Timestamp]:
    """
    단일 값을 타임존 없는 UTC Timestamp로 변환합니다.

    ISO-8601 문자열, datetime, Timestamp를 모두 받으며 타임존이 있으면
    UTC로 변환한 뒤 타임존 정보를 제거합니다.

    Args:
        value: 변환할 날짜 값

    Returns:
        Timestamp. 변환 실패(형식 오류, 표현 범위 초과) 시 None.

    Examples:
        >>> to_timestamp("2025-01-15T09:00:00Z")
        Timestamp('2025-01-15 09:00:00')
        >>> to_timestamp("not a date") is None
        True
    """
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        return None
    try:
        ts = pd.to_datetime(value, errors="coerce", utc=True)
    except (TypeError, ValueError, OverflowError):
        return None
    if not isinstance(ts, pd.Timestamp) or pd.isna(ts):
        return None
    return ts.tz_convert(None)


def _is_valid(value: Optional[pd.Timestamp]) -> bool:
    return value is not None and not pd.isna(value)


def _to_iso(value: pd.Timestamp) -> str:
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
