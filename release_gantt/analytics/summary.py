"""타임라인 상태 표시줄 요약 계산."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..domain.models import Release, ReleaseGroup
from ..planning.range import compute_date_range

NO_RELEASES_LABEL = "No releases"


@dataclass(frozen=True)
class TimelineSummary:
    """
    상태 표시줄에 보여줄 요약 값.

    Attributes:
        total_releases: 전체 릴리스 수 (날짜가 잘못된 항목 포함)
        active_groups: 릴리스가 하나 이상 있는 그룹 수
        span_label: "Jan 2025 - Jul 2025" 형식의 기간 문자열
    """

    total_releases: int
    active_groups: int
    span_label: str


def format_span(releases: Iterable[Release]) -> str:
    """릴리스 날짜 범위를 "{Mon YYYY} - {Mon YYYY}" 형식으로 반환합니다."""

    date_range = compute_date_range(releases)
    if date_range is None:
        return NO_RELEASES_LABEL
    return f"{date_range.start:%b %Y} - {date_range.end:%b %Y}"


def summarize_timeline(
    releases: Iterable[Release],
    groups: Optional[Iterable[ReleaseGroup]] = None,
) -> TimelineSummary:
    """
    릴리스/그룹 목록으로 상태 표시줄 요약을 계산합니다.

    Args:
        releases: 릴리스 목록
        groups: 릴리스 그룹 목록 (알 수 없는 group_id는 활성 그룹으로 세지 않음)

    Returns:
        TimelineSummary

    Examples:
        >>> summarize_timeline([]).span_label
        'No releases'
    """
    release_list = list(releases)
    known = {group.id for group in groups or []}
    used = {release.group_id for release in release_list if release.group_id in known}

    return TimelineSummary(
        total_releases=len(release_list),
        active_groups=len(used),
        span_label=format_span(release_list),
    )
