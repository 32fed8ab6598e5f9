"""
드래그/리사이즈 해석기 테스트

픽셀 → 일 변환, 이동/리사이즈 커밋 규칙, 세션 초기화를 검증합니다.
"""

from __future__ import annotations

import pandas as pd
import pytest

from release_gantt.data_sources import InMemoryReleaseStore
from release_gantt.domain import (
    DateOverflowError,
    DateUpdate,
    PersistenceError,
    Release,
    ScheduledItem,
    ValidationError,
)
from release_gantt.interaction import DragResizeInterpreter, GestureMode, round_half_up


class RecordingUpdater:
    """커밋 요청을 기록하고 정해진 결과를 돌려주는 협력자"""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.updates: list[DateUpdate] = []

    def update_item_dates(self, update: DateUpdate) -> bool:
        self.updates.append(update)
        return self.result


class FailingUpdater:
    def update_item_dates(self, update: DateUpdate) -> bool:
        raise PersistenceError("store unavailable")


@pytest.fixture
def item() -> Release:
    """5일짜리 릴리스"""
    return Release("r1", pd.Timestamp("2025-03-01"), pd.Timestamp("2025-03-06"), name="r1")


def test_round_half_up_matches_browser_rounding() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_half_up(1.49) == 1
    assert round_half_up(-0.4) == 0


def test_move_shifts_both_dates(item) -> None:
    updater = RecordingUpdater()
    interp = DragResizeInterpreter(updater)

    interp.on_session_start(100, item=item, mode=GestureMode.MOVE)
    update = interp.on_session_end(130)

    assert update == DateUpdate("r1", pd.Timestamp("2025-03-11"), pd.Timestamp("2025-03-16"))
    assert updater.updates == [update]
    assert interp.last_commit_ok is True
    assert interp.is_active is False


def test_move_below_one_day_does_not_commit(item) -> None:
    updater = RecordingUpdater()
    interp = DragResizeInterpreter(updater)

    interp.on_session_start(100, item=item, mode="move")

    assert interp.on_session_end(101.4) is None
    assert updater.updates == []
    assert interp.is_active is False


def test_resize_changes_only_end_date(item) -> None:
    updater = RecordingUpdater()
    interp = DragResizeInterpreter(updater)

    interp.on_session_start(0, item=item, mode=GestureMode.RESIZE)
    update = interp.on_session_end(15)

    assert update.start_date == item.start_date
    assert update.end_date == pd.Timestamp("2025-03-11")


def test_resize_past_start_is_rejected(item) -> None:
    """dayDelta = -100 → 커밋 거부, 원래 종료일 유지"""
    store = InMemoryReleaseStore([item])
    interp = DragResizeInterpreter(store)

    interp.on_session_start(0, item=item, mode=GestureMode.RESIZE)
    assert interp.day_delta(-300) == -100
    update = interp.on_session_end(-300)

    assert update is None
    assert store.get_release("r1").end_date == pd.Timestamp("2025-03-06")
    assert store.get_release("r1").start_date == pd.Timestamp("2025-03-01")
    assert interp.is_active is False


def test_resize_to_start_date_is_rejected(item) -> None:
    updater = RecordingUpdater()
    interp = DragResizeInterpreter(updater)

    interp.on_session_start(0, item=item, mode=GestureMode.RESIZE)

    assert interp.on_session_end(-15) is None
    assert updater.updates == []


def test_move_round_trip_restores_original_dates(item) -> None:
    store = InMemoryReleaseStore([item])
    interp = DragResizeInterpreter(store)

    interp.on_session_start(0, item=store.get_release("r1"), mode=GestureMode.MOVE)
    interp.on_session_end(21)
    moved = store.get_release("r1")
    assert moved.start_date == pd.Timestamp("2025-03-08")

    interp.on_session_start(50, item=moved, mode=GestureMode.MOVE)
    interp.on_session_end(29)
    restored = store.get_release("r1")

    assert (restored.start_date, restored.end_date) == (item.start_date, item.end_date)


def test_preview_does_not_commit(item) -> None:
    updater = RecordingUpdater()
    interp = DragResizeInterpreter(updater)

    interp.on_session_start(0, item=item, mode=GestureMode.RESIZE)
    ok = interp.on_session_move(9)
    bad = interp.on_session_move(-30)

    assert (ok.day_delta, ok.end_date, ok.valid) == (3, pd.Timestamp("2025-03-09"), True)
    assert bad.valid is False
    assert bad.end_date == item.end_date
    assert updater.updates == []
    assert interp.is_active is True


def test_move_without_session_is_ignored() -> None:
    interp = DragResizeInterpreter()

    assert interp.on_session_move(40) is None
    assert interp.on_session_end(40) is None
    assert interp.day_delta(40) == 0


def test_cancel_discards_session(item) -> None:
    updater = RecordingUpdater()
    interp = DragResizeInterpreter(updater)

    interp.on_session_start(0, item=item, mode=GestureMode.MOVE)
    interp.cancel()

    assert interp.on_session_end(300) is None
    assert updater.updates == []


def test_new_session_replaces_stale_one(item) -> None:
    other = Release("r2", pd.Timestamp("2025-04-01"), pd.Timestamp("2025-04-10"))
    updater = RecordingUpdater()
    interp = DragResizeInterpreter(updater)

    interp.on_session_start(0, item=item, mode=GestureMode.MOVE)
    interp.on_session_start(10, item=other, mode=GestureMode.MOVE)
    update = interp.on_session_end(16)

    assert update.item_id == "r2"
    assert update.start_date == pd.Timestamp("2025-04-03")


def test_zoom_scales_pixels_per_day(item) -> None:
    interp = DragResizeInterpreter(zoom=200)

    interp.on_session_start(0, item=item, mode=GestureMode.MOVE)

    assert interp.pixels_per_day == 6.0
    assert interp.day_delta(60) == 10


def test_zoom_is_clamped_to_slider_range() -> None:
    assert DragResizeInterpreter(zoom=237).zoom == 200
    assert DragResizeInterpreter(zoom=10).zoom == 50


def test_store_rejection_is_reported(item) -> None:
    interp = DragResizeInterpreter(RecordingUpdater(result=False))

    interp.on_session_start(0, item=item, mode=GestureMode.MOVE)
    update = interp.on_session_end(30)

    assert update is not None
    assert interp.last_commit_ok is False


def test_store_exception_does_not_propagate(item) -> None:
    interp = DragResizeInterpreter(FailingUpdater())

    interp.on_session_start(0, item=item, mode=GestureMode.MOVE)
    interp.on_session_end(30)

    assert interp.last_commit_ok is False
    assert interp.is_active is False


def test_start_requires_valid_dates() -> None:
    interp = DragResizeInterpreter()

    with pytest.raises(ValidationError):
        interp.on_session_start(0, item=ScheduledItem("x", None, pd.Timestamp("2025-01-01")))
    assert interp.is_active is False


def test_start_rejects_unknown_mode(item) -> None:
    with pytest.raises(ValidationError):
        DragResizeInterpreter().on_session_start(0, item=item, mode="rotate")


def test_move_past_timestamp_limit_raises_overflow() -> None:
    edge = ScheduledItem("edge", pd.Timestamp("2262-01-01"), pd.Timestamp.max - pd.Timedelta(days=1))
    interp = DragResizeInterpreter()

    interp.on_session_start(0, item=edge, mode=GestureMode.MOVE)

    with pytest.raises(DateOverflowError):
        interp.on_session_end(30)
    assert interp.is_active is False


def test_update_payload_uses_iso_instants() -> None:
    update = DateUpdate("r1", pd.Timestamp("2025-03-11"), pd.Timestamp("2025-03-16 12:30:00.250"))

    assert update.to_payload() == {
        "id": "r1",
        "startDate": "2025-03-11T00:00:00.000Z",
        "endDate": "2025-03-16T12:30:00.250Z",
    }
