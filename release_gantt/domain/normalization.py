"""
데이터 정규화 유틸리티

이 모듈은 외부 저장소/API에서 받은 릴리스 레코드를 표준 스키마로
변환합니다. 모든 날짜는 타임존 없는 UTC Timestamp로 통일되며,
파싱할 수 없는 날짜는 예외 대신 None으로 남겨 이후 계산에서 제외됩니다.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

import pandas as pd

from .models import Release, ReleaseGroup, to_timestamp

logger = logging.getLogger(__name__)

RELEASE_COLUMNS = ("id", "name", "start_date", "end_date", "group_id", "icon", "status")

DEFAULT_ICON = "fas fa-rocket"
DEFAULT_STATUS = "upcoming"
DEFAULT_GROUP_COLOR = "#3B82F6"


# Column aliases observed in API payloads and spreadsheet exports. The lists
# hold lowercase, whitespace-trimmed values so the lookup is case insensitive.
RELEASE_COLUMN_ALIASES: dict[str, Sequence[str]] = {
    "id": ("id", "release_id", "releaseid", "release id"),
    "name": ("name", "title", "release_name", "release name"),
    "start_date": ("start_date", "startdate", "start date", "start", "starts_at"),
    "end_date": ("end_date", "enddate", "end date", "end", "ends_at", "due"),
    "group_id": ("group_id", "groupid", "group id", "group"),
    "icon": ("icon",),
    "status": ("status", "state"),
}


def _resolve_columns(frame: pd.DataFrame) -> dict[str, str]:
    """Map raw column names in *frame* onto the standard release schema."""

    lookup = {str(col).strip().lower(): col for col in frame.columns}
    renames: dict[str, str] = {}
    for target, aliases in RELEASE_COLUMN_ALIASES.items():
        for alias in aliases:
            source = lookup.get(alias)
            if source is not None:
                renames[source] = target
                break
    return renames


def _none_if_na(value: Any) -> Any:
    if value is None:
        return None
    try:
        return None if pd.isna(value) else value
    except (TypeError, ValueError):
        return value


def normalize_release_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """
    원본 릴리스 데이터프레임을 표준 스키마로 정규화합니다.

    처리 순서:
    1. 컬럼 별칭을 표준 컬럼명으로 변경
    2. id가 없는 행 제거, 중복 id는 첫 행만 유지
    3. 날짜를 UTC Timestamp로 변환 (실패 시 결측)
    4. name/icon/status 기본값 채우기

    Args:
        frame: 원본 데이터프레임

    Returns:
        id, name, start_date, end_date, group_id, icon, status 컬럼을 가진 데이터프레임
    """
    if frame is None or frame.empty:
        return pd.DataFrame(columns=list(RELEASE_COLUMNS))

    # ========================================
    # 1단계: 컬럼 별칭 정리
    # ========================================
    df = frame.rename(columns=_resolve_columns(frame)).copy()
    for col in RELEASE_COLUMNS:
        if col not in df.columns:
            df[col] = None

    # ========================================
    # 2단계: id 정리
    # ========================================
    df["id"] = df["id"].map(_none_if_na)
    df = df[df["id"].notna()].copy()
    df["id"] = df["id"].astype(str).str.strip()
    df = df[df["id"] != ""]

    duplicated = df["id"].duplicated(keep="first")
    if duplicated.any():
        logger.warning(
            f"Dropping {int(duplicated.sum())} duplicate release rows: "
            f"{sorted(df.loc[duplicated, 'id'].unique().tolist())}"
        )
        df = df[~duplicated]

    # ========================================
    # 3단계: 날짜 정규화
    # ========================================
    for col in ("start_date", "end_date"):
        df[col] = df[col].map(to_timestamp).astype(object)

    malformed = df["start_date"].isna() | df["end_date"].isna()
    if malformed.any():
        logger.warning(
            f"{int(malformed.sum())} releases have missing or malformed dates "
            f"and will be left off the timeline"
        )

    # ========================================
    # 4단계: 표시용 필드 기본값
    # ========================================
    df["name"] = [
        str(name) if _none_if_na(name) is not None else item_id
        for name, item_id in zip(df["name"], df["id"])
    ]
    df["icon"] = [
        str(icon) if _none_if_na(icon) is not None else DEFAULT_ICON for icon in df["icon"]
    ]
    df["status"] = [
        str(status).strip().lower() if _none_if_na(status) is not None else DEFAULT_STATUS
        for status in df["status"]
    ]
    df["group_id"] = [
        str(group) if _none_if_na(group) is not None else None for group in df["group_id"]
    ]

    return df[list(RELEASE_COLUMNS)].reset_index(drop=True)


def releases_from_frame(frame: pd.DataFrame) -> list[Release]:
    """정규화된 데이터프레임을 Release 객체 목록으로 변환합니다."""

    df = normalize_release_frame(frame)
    return [
        Release(
            id=row.id,
            start_date=_none_if_na(row.start_date),
            end_date=_none_if_na(row.end_date),
            name=row.name,
            group_id=row.group_id,
            icon=row.icon,
            status=row.status,
        )
        for row in df.itertuples(index=False)
    ]


def releases_from_records(records: Iterable[Mapping[str, Any]]) -> list[Release]:
    """
    API 응답 같은 dict 레코드 목록을 Release 객체 목록으로 변환합니다.

    Examples:
        >>> releases_from_records([
        ...     {"id": "r1", "name": "v1", "startDate": "2025-01-15", "endDate": "2025-03-20"}
        ... ])[0].start_date
        Timestamp('2025-01-15 00:00:00')
    """
    rows = [dict(record) for record in records]
    if not rows:
        return []
    return releases_from_frame(pd.DataFrame.from_records(rows))


def groups_from_records(records: Iterable[Mapping[str, Any]]) -> list[ReleaseGroup]:
    """dict 레코드 목록을 ReleaseGroup 목록으로 변환합니다 (id 없는 레코드는 무시)."""

    groups: list[ReleaseGroup] = []
    for record in records:
        group_id = _none_if_na(record.get("id"))
        if group_id is None or not str(group_id).strip():
            continue
        name = _none_if_na(record.get("name"))
        color = _none_if_na(record.get("color"))
        groups.append(
            ReleaseGroup(
                id=str(group_id).strip(),
                name=str(name) if name is not None else str(group_id),
                color=str(color) if color is not None else DEFAULT_GROUP_COLOR,
            )
        )
    return groups
