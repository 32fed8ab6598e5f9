"""
세션 상태 관리

이 모듈은 Streamlit 세션 상태에 릴리스 저장소를 보관합니다.
세션마다 하나의 저장소가 유지되며, 처음 진입 시 데모 데이터로 채워집니다.
"""

from __future__ import annotations

import streamlit as st

from ..common.performance import measure_time_context
from .memory import InMemoryReleaseStore
from .sample import sample_store

STORE_KEY = "release_store"


def ensure_store() -> InMemoryReleaseStore:
    """
    세션 상태에서 저장소를 가져오고, 없거나 초기화 요청이 있으면 새로 만듭니다.

    Session State Keys:
        - release_store: InMemoryReleaseStore 인스턴스
        - _trigger_reset: True이면 데모 데이터로 다시 채움
    """
    store = st.session_state.get(STORE_KEY)

    reset_clicked = st.session_state.get("_trigger_reset", False)
    if reset_clicked:
        st.session_state["_trigger_reset"] = False

    if store is None or reset_clicked:
        with measure_time_context("seed release store"):
            store = sample_store()
        st.session_state[STORE_KEY] = store

    return store
