"""
Release Gantt 메인 엔트리 포인트

릴리스 일정을 분기/월/주 타임라인으로 보여주고,
포인터 이동량(픽셀)을 입력받아 드래그/리사이즈와 같은 방식으로
릴리스 날짜를 조정합니다.

실행:
    streamlit run release_gantt_app.py
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import streamlit as st

# 로깅 설정
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

from release_gantt.analytics import summarize_timeline
from release_gantt.core.config import CONFIG
from release_gantt.data_sources import InMemoryReleaseStore
from release_gantt.data_sources.session import ensure_store
from release_gantt.domain import Granularity, Release, ReleaseGroup
from release_gantt.interaction import DragResizeInterpreter, GestureMode
from release_gantt.pipeline import build_timeline_layout
from release_gantt.ui import handle_domain_errors, render_gantt_chart

VIEW_MODES = [g.value for g in Granularity]


def _render_sidebar(groups: List[ReleaseGroup]) -> Dict[str, Any]:
    """
    사이드바 컨트롤을 렌더링하고 선택된 값들을 반환합니다.

    Returns:
        view_mode, zoom, collapsed 키를 가진 dict
    """
    interaction = CONFIG.interaction
    group_names = {group.id: group.name for group in groups}

    with st.sidebar:
        if st.button("🔄 데모 데이터로 초기화", key="sidebar_reset", use_container_width=True):
            st.session_state["_trigger_reset"] = True
            st.rerun()

        st.divider()
        st.header("보기")
        view_mode = st.selectbox(
            "타임라인 단위",
            VIEW_MODES,
            index=VIEW_MODES.index(Granularity.MONTH.value),
        )
        zoom = st.slider(
            "줌 (%)",
            min_value=interaction.min_zoom,
            max_value=interaction.max_zoom,
            value=interaction.default_zoom,
            step=interaction.zoom_step,
            help="차트 폭과 드래그 감도(1일당 픽셀 수)를 함께 조정합니다.",
        )

        st.divider()
        st.header("그룹")
        collapsed = st.multiselect(
            "접을 그룹",
            options=list(group_names),
            format_func=lambda group_id: group_names.get(group_id, group_id),
        )

    return {"view_mode": view_mode, "zoom": zoom, "collapsed": collapsed}


def _render_summary(releases: List[Release], groups: List[ReleaseGroup]) -> None:
    summary = summarize_timeline(releases, groups)
    cols = st.columns(3)
    cols[0].metric("릴리스", summary.total_releases)
    cols[1].metric("활성 그룹", summary.active_groups)
    cols[2].metric("기간", summary.span_label)


def _render_reschedule_panel(store: InMemoryReleaseStore, *, zoom: int) -> None:
    """
    포인터 이동량으로 릴리스 날짜를 조정하는 패널.

    막대를 직접 끄는 대신 시작 위치 0에서 입력한 픽셀만큼 이동한 것으로
    해석기를 한 번 실행합니다 (start → move → end).
    """
    releases = [r for r in store.list_releases() if r.has_valid_dates]
    if not releases:
        st.caption("날짜가 지정된 릴리스가 없습니다.")
        return

    names = {release.id: release.name or release.id for release in releases}
    interpreter = DragResizeInterpreter(store, zoom=zoom)

    with st.form("reschedule_form"):
        cols = st.columns([2, 1, 1])
        release_id = cols[0].selectbox(
            "릴리스", list(names), format_func=lambda rid: names[rid]
        )
        mode = cols[1].radio(
            "동작",
            [GestureMode.MOVE.value, GestureMode.RESIZE.value],
            horizontal=True,
        )
        delta_px = cols[2].number_input("포인터 이동(px)", value=0, step=1)
        st.caption(
            f"현재 줌 {zoom}%에서 1일 = {interpreter.pixels_per_day:.1f}px"
        )
        submitted = st.form_submit_button("적용")

    if not submitted:
        return

    release = store.get_release(release_id)
    if release is None:
        st.warning("선택한 릴리스를 찾을 수 없습니다.")
        return

    committed = False
    with handle_domain_errors():
        interpreter.on_session_start(0, item=release, mode=mode)
        preview = interpreter.on_session_move(delta_px)
        update = interpreter.on_session_end(delta_px)

        if update is None:
            if preview is not None and preview.day_delta != 0:
                st.warning("종료일이 시작일보다 앞설 수 없어 변경을 취소했습니다.")
            else:
                st.info("이동량이 하루 미만이라 변경 사항이 없습니다.")
            return

        if interpreter.last_commit_ok:
            logger.info(f"Rescheduled {release.id} via panel ({mode}, {delta_px}px)")
            committed = True
        else:
            st.error("변경 사항을 저장하지 못했습니다.")

    if committed:
        st.rerun()


def main() -> None:
    """
    Release Gantt 메인 함수.

    데이터 로드 → 사이드바 → 요약 → 간트 차트 → 일정 조정 패널 순서로 렌더링합니다.
    """
    logger.info("Release Gantt 시작")

    # ========================================
    # 1단계: 페이지 설정
    # ========================================
    st.set_page_config(page_title="Release Gantt", layout="wide")
    st.title("Release Timeline")

    # ========================================
    # 2단계: 데이터 로드 (세션 관리)
    # ========================================
    store = ensure_store()
    releases = store.list_releases()
    groups = store.list_groups()
    logger.info(f"릴리스 {len(releases)}건, 그룹 {len(groups)}개 로드")

    # ========================================
    # 3단계: 사이드바
    # ========================================
    controls = _render_sidebar(groups)

    # ========================================
    # 4단계: 요약 + 차트
    # ========================================
    _render_summary(releases, groups)

    with handle_domain_errors():
        layout = build_timeline_layout(
            releases,
            controls["view_mode"],
            groups=groups,
            collapsed=controls["collapsed"],
        )
        if layout.excluded_ids:
            st.caption(f"날짜 오류로 제외된 릴리스: {', '.join(layout.excluded_ids)}")
        render_gantt_chart(layout, releases, groups, zoom=controls["zoom"])

    # ========================================
    # 5단계: 일정 조정
    # ========================================
    st.divider()
    st.subheader("Reschedule")
    _render_reschedule_panel(store, zoom=controls["zoom"])


if __name__ == "__main__":
    main()
