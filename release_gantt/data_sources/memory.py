"""
메모리 기반 릴리스 저장소

외부 저장소 협력자의 자리를 대신하는 단순한 구현입니다.
디스크나 네트워크에 쓰지 않으며, 드래그 해석기가 보내는
날짜 변경 요청을 받아 보관하고 성공 여부만 돌려줍니다.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional

from ..domain.models import DateUpdate, Release, ReleaseGroup, to_timestamp
from ..domain.normalization import groups_from_records, releases_from_records

logger = logging.getLogger(__name__)


class InMemoryReleaseStore:
    """
    릴리스와 그룹을 삽입 순서대로 보관하는 저장소.

    Examples:
        >>> store = InMemoryReleaseStore.from_records(releases=[...], groups=[...])
        >>> store.update_item_dates(DateUpdate("r1", start, end))
        True
    """

    def __init__(
        self,
        releases: Iterable[Release] = (),
        groups: Iterable[ReleaseGroup] = (),
    ) -> None:
        self._releases: dict[str, Release] = {release.id: release for release in releases}
        self._groups: dict[str, ReleaseGroup] = {group.id: group for group in groups}

    @classmethod
    def from_records(
        cls,
        *,
        releases: Iterable[Mapping[str, Any]] = (),
        groups: Iterable[Mapping[str, Any]] = (),
    ) -> "InMemoryReleaseStore":
        """API 형식 dict 레코드로부터 저장소를 만듭니다."""

        return cls(releases_from_records(releases), groups_from_records(groups))

    def list_releases(self) -> list[Release]:
        return list(self._releases.values())

    def list_groups(self) -> list[ReleaseGroup]:
        return list(self._groups.values())

    def get_release(self, release_id: str) -> Optional[Release]:
        return self._releases.get(release_id)

    def update_item_dates(self, update: DateUpdate) -> bool:
        """
        릴리스의 시작/종료 날짜를 교체합니다.

        Returns:
            성공 여부. 알 수 없는 ID이거나 시작이 종료보다 늦으면 False.
        """
        current = self._releases.get(update.item_id)
        if current is None:
            logger.warning(f"Update for unknown release {update.item_id!r} ignored")
            return False

        start = to_timestamp(update.start_date)
        end = to_timestamp(update.end_date)
        if start is None or end is None or start > end:
            logger.warning(
                f"Rejected date update for {update.item_id}: start={start}, end={end}"
            )
            return False

        self._releases[update.item_id] = replace(current, start_date=start, end_date=end)
        logger.info(f"Release {update.item_id} rescheduled to {start.date()} - {end.date()}")
        return True
