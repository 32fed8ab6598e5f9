"""날짜 연산 헬퍼.

표현 범위를 벗어나는 날짜 연산은 DateOverflowError로 변환합니다.
"""

from __future__ import annotations

import pandas as pd
from pandas.errors import OutOfBoundsDatetime

from ..domain.exceptions import DateOverflowError


def shift_days(value: pd.Timestamp, days: int) -> pd.Timestamp:
    """
    *value*를 *days*일 만큼 이동합니다. 시각(time-of-day)은 유지됩니다.

    Raises:
        DateOverflowError: 결과가 pandas Timestamp 표현 범위를 벗어날 때
    """
    try:
        return value + pd.Timedelta(days=int(days))
    except (OutOfBoundsDatetime, OverflowError) as exc:
        raise DateOverflowError(
            f"Shifting {value} by {days} days leaves the supported date range"
        ) from exc


def year_start(year: int) -> pd.Timestamp:
    """Return midnight of January 1st of *year*."""

    try:
        return pd.Timestamp(year=int(year), month=1, day=1)
    except (OutOfBoundsDatetime, OverflowError, ValueError) as exc:
        raise DateOverflowError(f"Year {year} is outside the supported date range") from exc


def utc_now() -> pd.Timestamp:
    """현재 시각을 타임존 없는 UTC Timestamp로 반환합니다 (항목 날짜와 같은 기준)."""

    return pd.Timestamp.now(tz="UTC").tz_convert(None)
