"""Configuration and constants for the release Gantt timeline.

축 길이 상한/하한, 최소 막대 폭, 드래그 감도 등 전역 설정을 제공합니다.
모든 값은 불변 데이터클래스로 묶여 코어 함수에 명시적으로 전달됩니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


# ============================================================
# 축(Axis) 설정
# ============================================================

@dataclass(frozen=True)
class AxisConfig:
    """타임라인 축 생성 관련 설정"""

    # 단위별 최대 기간 수
    quarter_cap: int = 16
    month_cap: int = 24
    week_cap: int = 52

    # 주 단위 축의 최소 기간 수 (데이터가 적어도 타임라인 폭 유지)
    week_min_periods: int = 8

    # 데이터가 없을 때 올해 기준으로 만들 기본 기간 수
    default_quarters: int = 4
    default_months: int = 6
    default_weeks: int = 6

    # 분기 서브라벨 (분기 인덱스 순서)
    quarter_sublabels: Tuple[str, str, str, str] = (
        "Jan-Mar",
        "Apr-Jun",
        "Jul-Sep",
        "Oct-Dec",
    )

    # 월 단위 서브라벨 자리표시자
    month_sublabel: str = "Week 1-4"

    # 데이터가 없을 때 만드는 기본 주 단위 축의 서브라벨 자리표시자 (순서대로)
    synthetic_week_sublabels: Tuple[str, ...] = (
        "Jan 1-7",
        "Jan 8-14",
        "Jan 15-21",
        "Jan 22-28",
        "Feb 1-7",
        "Feb 8-14",
        "Feb 15-21",
        "Feb 22-28",
    )

    def cap_for(self, granularity) -> int:
        return {
            "QUARTER": self.quarter_cap,
            "MONTH": self.month_cap,
            "WEEK": self.week_cap,
        }[granularity.name]

    def min_periods_for(self, granularity) -> int:
        if granularity.name == "WEEK":
            return self.week_min_periods
        return 1

    def default_count_for(self, granularity) -> int:
        return {
            "QUARTER": self.default_quarters,
            "MONTH": self.default_months,
            "WEEK": self.default_weeks,
        }[granularity.name]


# ============================================================
# 위치(Position) 설정
# ============================================================

@dataclass(frozen=True)
class PositionConfig:
    """막대 위치/폭 및 오늘 마커 관련 설정"""

    # 단위별 최소 막대 폭 (%)
    quarter_min_width: float = 8.0
    month_min_width: float = 6.0
    week_min_width: float = 4.0

    # 월 내부 오프셋 계산 시 사용하는 분모 (일)
    month_day_divisor: int = 31

    # 오늘 마커가 오른쪽 끝에 붙지 않도록 하는 최대 오프셋 (%)
    today_max_offset: float = 98.0

    def min_width_for(self, granularity) -> float:
        return {
            "QUARTER": self.quarter_min_width,
            "MONTH": self.month_min_width,
            "WEEK": self.week_min_width,
        }[granularity.name]


# ============================================================
# 인터랙션(드래그/리사이즈) 설정
# ============================================================

@dataclass(frozen=True)
class InteractionConfig:
    """드래그/리사이즈 제스처 해석 관련 설정"""

    # 1일에 해당하는 포인터 이동 픽셀 수 (줌 100% 기준)
    pixels_per_day: float = 3.0

    # 줌 슬라이더 범위 (%)
    min_zoom: int = 50
    max_zoom: int = 200
    zoom_step: int = 10
    default_zoom: int = 100

    def pixels_per_day_at(self, zoom: float) -> float:
        """Return the pointer-to-day ratio for a chart scaled to *zoom* percent."""

        return self.pixels_per_day * float(zoom) / 100.0


# ============================================================
# 레인(그룹) 설정
# ============================================================

@dataclass(frozen=True)
class LaneConfig:
    """그룹 레인 표시 관련 설정"""

    # 그룹이 없거나 알 수 없는 그룹의 항목이 모이는 레인
    ungrouped_name: str = "Ungrouped"
    ungrouped_color: str = "#94A3B8"


@dataclass(frozen=True)
class GanttConfig:
    """타임라인 전역 설정"""

    axis: AxisConfig = field(default_factory=AxisConfig)
    position: PositionConfig = field(default_factory=PositionConfig)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)
    lanes: LaneConfig = field(default_factory=LaneConfig)


# ============================================================
# 전역 설정 인스턴스
# ============================================================

# 전역 설정 객체 (불변)
CONFIG = GanttConfig()
