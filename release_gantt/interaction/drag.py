"""
드래그/리사이즈 제스처 해석기

포인터 이동량(픽셀)을 일 단위 변화량으로 바꾸고, 제스처가 끝나면
새 (시작, 종료) 날짜 쌍을 저장소 협력자에게 전달합니다.

UI 이벤트(DOM 등)와는 분리되어 있으며 다음 세 가지 호출만으로 동작합니다:
- on_session_start(pointer_x, item=..., mode=...)
- on_session_move(pointer_x)
- on_session_end(pointer_x)

상태 전이:
    Idle ──start──▶ Active(Move|Resize) ──move──▶ Active
    Active ──end──▶ Idle (조건을 만족하면 커밋)
    Active ──cancel──▶ Idle (커밋 없음)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

import pandas as pd

from ..common.dates import shift_days
from ..core.config import CONFIG, GanttConfig
from ..domain.exceptions import ValidationError
from ..domain.models import DateUpdate, ScheduledItem
from ..domain.models import to_timestamp
from ..domain.validation import clamp_zoom

logger = logging.getLogger(__name__)


class GestureMode(str, Enum):
    """막대 본체를 잡으면 MOVE, 오른쪽 끝 핸들을 잡으면 RESIZE."""

    MOVE = "move"
    RESIZE = "resize"


class ItemUpdater(Protocol):
    """날짜 변경 요청을 받는 저장소 협력자."""

    def update_item_dates(self, update: DateUpdate) -> bool:
        ...


@dataclass(frozen=True)
class DragSession:
    """포인터 다운 시점에 캡처되는 제스처 상태."""

    item_id: str
    origin_pointer_x: float
    origin_start_date: pd.Timestamp
    origin_end_date: pd.Timestamp
    mode: GestureMode


@dataclass(frozen=True)
class GesturePreview:
    """
    진행 중인 제스처의 시각적 피드백 (커밋되지 않음).

    Attributes:
        day_delta: 현재 포인터 위치 기준 일 변화량
        start_date: 미리보기 시작 날짜
        end_date: 미리보기 종료 날짜
        valid: 지금 포인터를 놓으면 커밋되는지 여부
    """

    day_delta: int
    start_date: pd.Timestamp
    end_date: pd.Timestamp
    valid: bool


def round_half_up(value: float) -> int:
    """0.5를 +∞ 방향으로 올리는 반올림 (브라우저 Math.round와 동일)."""

    return int(math.floor(value + 0.5))


class DragResizeInterpreter:
    """
    한 번에 하나의 제스처 세션을 관리하는 해석기.

    Args:
        updater: 커밋 요청을 받을 협력자 (없으면 결과만 반환)
        zoom: 차트 줌 (%). 픽셀/일 비율에 곱해짐
        config: 타임라인 설정

    Examples:
        >>> interp = DragResizeInterpreter(store)
        >>> interp.on_session_start(100, item=release, mode=GestureMode.MOVE)
        >>> interp.on_session_end(130)   # 3px/일 → +10일
        DateUpdate(item_id='r1', ...)
    """

    def __init__(
        self,
        updater: Optional[ItemUpdater] = None,
        *,
        zoom: float = 100,
        config: GanttConfig = CONFIG,
    ) -> None:
        interaction = config.interaction
        self.updater = updater
        self.zoom = clamp_zoom(
            zoom,
            min_zoom=interaction.min_zoom,
            max_zoom=interaction.max_zoom,
            step=interaction.zoom_step,
        )
        self.pixels_per_day = interaction.pixels_per_day_at(self.zoom)
        if self.pixels_per_day <= 0:
            raise ValidationError(f"pixels_per_day must be positive, got {self.pixels_per_day}")
        self.session: Optional[DragSession] = None
        self.last_commit_ok: Optional[bool] = None

    @property
    def is_active(self) -> bool:
        return self.session is not None

    def day_delta(self, pointer_x: float) -> int:
        """현재 세션 기준 포인터 이동량을 일 단위로 변환합니다 (세션이 없으면 0)."""

        if self.session is None:
            return 0
        return round_half_up((float(pointer_x) - self.session.origin_pointer_x) / self.pixels_per_day)

    # ========================================
    # 상태 전이
    # ========================================

    def on_session_start(
        self,
        pointer_x: float,
        *,
        item: ScheduledItem,
        mode: GestureMode | str = GestureMode.MOVE,
    ) -> DragSession:
        """
        포인터 다운: 원래 포인터 위치와 날짜를 캡처합니다.

        남아 있던 이전 세션은 커밋 없이 교체됩니다.

        Raises:
            ValidationError: 항목 날짜가 없거나 모드가 잘못되었을 때
        """
        start = to_timestamp(item.start_date)
        end = to_timestamp(item.end_date)
        if start is None or end is None:
            raise ValidationError(f"Item {item.id!r} has no valid dates to drag")

        try:
            gesture = GestureMode(mode)
        except ValueError as exc:
            raise ValidationError(f"Unsupported gesture mode: {mode!r}") from exc

        if self.session is not None:
            logger.debug(f"Replacing stale drag session for {self.session.item_id}")

        self.session = DragSession(
            item_id=item.id,
            origin_pointer_x=float(pointer_x),
            origin_start_date=start,
            origin_end_date=end,
            mode=gesture,
        )
        logger.debug(f"Drag session started: {item.id} ({gesture.value}) at x={pointer_x}")
        return self.session

    def on_session_move(self, pointer_x: float) -> Optional[GesturePreview]:
        """포인터 이동: 미리보기만 계산하고 커밋하지 않습니다."""

        if self.session is None:
            return None
        delta = self.day_delta(pointer_x)
        start, end, valid = self._proposed_dates(self.session, delta)
        return GesturePreview(day_delta=delta, start_date=start, end_date=end, valid=valid)

    def on_session_end(self, pointer_x: float) -> Optional[DateUpdate]:
        """
        포인터 업: 최종 위치로 일 변화량을 다시 계산하고 조건을 만족하면 커밋합니다.

        - MOVE: 변화량이 0이 아니면 시작/종료를 함께 이동
        - RESIZE: 변화량이 0이 아니고 새 종료가 원래 시작보다 뒤일 때만 종료 변경

        세션은 결과와 관계없이 종료됩니다.

        Returns:
            커밋된 DateUpdate. 커밋 조건을 만족하지 않으면 None.
        """
        session = self.session
        if session is None:
            return None
        self.session = None

        delta = round_half_up((float(pointer_x) - session.origin_pointer_x) / self.pixels_per_day)
        start, end, valid = self._proposed_dates(session, delta)
        if not valid:
            if delta != 0:
                logger.info(
                    f"Discarded {session.mode.value} of {session.item_id} by {delta} days "
                    f"(end would not follow start)"
                )
            return None

        update = DateUpdate(item_id=session.item_id, start_date=start, end_date=end)
        self._commit(update)
        return update

    def cancel(self) -> None:
        """포인터 업 없이 제스처가 끝났을 때: 진행 중인 변화량을 버립니다."""

        if self.session is not None:
            logger.debug(f"Drag session cancelled: {self.session.item_id}")
        self.session = None

    # ========================================
    # 내부 헬퍼
    # ========================================

    @staticmethod
    def _proposed_dates(
        session: DragSession,
        delta: int,
    ) -> tuple[pd.Timestamp, pd.Timestamp, bool]:
        if session.mode is GestureMode.MOVE:
            start = shift_days(session.origin_start_date, delta)
            end = shift_days(session.origin_end_date, delta)
            return start, end, delta != 0

        end = shift_days(session.origin_end_date, delta)
        if end <= session.origin_start_date:
            return session.origin_start_date, session.origin_end_date, False
        return session.origin_start_date, end, delta != 0

    def _commit(self, update: DateUpdate) -> None:
        if self.updater is None:
            self.last_commit_ok = None
            return
        try:
            ok = bool(self.updater.update_item_dates(update))
        except Exception:
            logger.exception(f"Persisting new dates for {update.item_id} failed")
            ok = False
        if not ok:
            logger.warning(f"Date update for {update.item_id} was not accepted by the store")
        self.last_commit_ok = ok
