"""
도메인 입력 검증 로직

이 모듈은 타임라인 계산 전에 호출자 입력(보기 모드, 줌, 항목 목록)의
정합성을 검증합니다. 데이터 품질 문제는 여기서 다루지 않고,
호출 방식이 잘못된 경우에만 예외를 발생시킵니다.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .exceptions import InvalidGranularityError, ValidationError
from .models import Granularity, ScheduledItem

logger = logging.getLogger(__name__)

# 보기 모드 별칭 (소문자 기준)
GRANULARITY_ALIASES: dict[str, Granularity] = {
    "quarters": Granularity.QUARTER,
    "quarter": Granularity.QUARTER,
    "q": Granularity.QUARTER,
    "months": Granularity.MONTH,
    "month": Granularity.MONTH,
    "m": Granularity.MONTH,
    "weeks": Granularity.WEEK,
    "week": Granularity.WEEK,
    "w": Granularity.WEEK,
}


def parse_granularity(value: Any) -> Granularity:
    """
    보기 모드 값을 Granularity로 변환합니다.

    Args:
        value: Granularity 또는 "Quarters"/"Months"/"Weeks" 등의 문자열

    Returns:
        Granularity

    Raises:
        InvalidGranularityError: 알 수 없는 값일 때

    Examples:
        >>> parse_granularity("Months")
        <Granularity.MONTH: 'Months'>
        >>> parse_granularity("days")
        InvalidGranularityError: Unsupported granularity: 'days'
    """
    if isinstance(value, Granularity):
        return value
    if isinstance(value, str):
        resolved = GRANULARITY_ALIASES.get(value.strip().lower())
        if resolved is not None:
            return resolved
    logger.error(f"Unsupported granularity: {value!r}")
    raise InvalidGranularityError(
        f"Unsupported granularity: {value!r} (expected Quarters, Months or Weeks)"
    )


def validate_items(items: Iterable[Any]) -> list[ScheduledItem]:
    """
    항목 목록이 ScheduledItem으로만 이루어져 있는지 확인합니다.

    Raises:
        ValidationError: None이거나 ScheduledItem이 아닌 원소가 있을 때
    """
    if items is None:
        raise ValidationError("items must be a sequence of ScheduledItem, got None")

    result = list(items)
    bad = [type(item).__name__ for item in result if not isinstance(item, ScheduledItem)]
    if bad:
        logger.error(f"Non-ScheduledItem values passed to timeline: {bad}")
        raise ValidationError(
            "timeline items must be ScheduledItem instances, got: " + ", ".join(sorted(set(bad)))
        )
    return result


def clamp_zoom(zoom: Any, *, min_zoom: int, max_zoom: int, step: int) -> int:
    """
    줌 값을 [min_zoom, max_zoom] 범위와 step 단위로 맞춥니다.

    Raises:
        ValidationError: 숫자로 해석할 수 없는 값일 때

    Examples:
        >>> clamp_zoom(237, min_zoom=50, max_zoom=200, step=10)
        200
        >>> clamp_zoom(84, min_zoom=50, max_zoom=200, step=10)
        80
    """
    try:
        value = float(zoom)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"zoom must be numeric, got {zoom!r}") from exc
    if value != value:
        raise ValidationError("zoom must be numeric, got NaN")

    bounded = min(max(value, float(min_zoom)), float(max_zoom))
    snapped = min_zoom + int((bounded - min_zoom) // step) * step
    return int(snapped)
