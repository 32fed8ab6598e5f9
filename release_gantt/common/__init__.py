"""공통 유틸리티 모듈.

여러 모듈에서 공통으로 사용하는 날짜 연산과 성능 측정 유틸리티를 제공합니다.
"""

from .dates import shift_days, utc_now, year_start
from .performance import (
    PerformanceContext,
    measure_time,
    measure_time_context,
)

__all__ = [
    "shift_days",
    "year_start",
    "utc_now",
    "measure_time",
    "measure_time_context",
    "PerformanceContext",
]
