"""
도메인 계층 퍼블릭 API

이 모듈은 도메인 계층의 주요 클래스와 함수를 재수출하여
일관된 퍼블릭 API를 제공합니다.
"""
from __future__ import annotations

from .exceptions import (
    DateOverflowError,
    DomainError,
    InvalidGranularityError,
    PersistenceError,
    TimelineError,
    ValidationError,
)
from .models import (
    AxisLabel,
    DateRange,
    DateUpdate,
    Granularity,
    Position,
    Release,
    ReleaseGroup,
    ScheduledItem,
    TimeAxis,
    to_timestamp,
)
from .normalization import (
    groups_from_records,
    normalize_release_frame,
    releases_from_frame,
    releases_from_records,
)
from .validation import clamp_zoom, parse_granularity, validate_items

__all__ = [
    # 예외
    "DomainError",
    "ValidationError",
    "InvalidGranularityError",
    "TimelineError",
    "DateOverflowError",
    "PersistenceError",
    # 모델
    "Granularity",
    "ScheduledItem",
    "Release",
    "ReleaseGroup",
    "DateRange",
    "AxisLabel",
    "TimeAxis",
    "Position",
    "DateUpdate",
    # 정규화
    "to_timestamp",
    "normalize_release_frame",
    "releases_from_frame",
    "releases_from_records",
    "groups_from_records",
    # 검증
    "parse_granularity",
    "validate_items",
    "clamp_zoom",
]
