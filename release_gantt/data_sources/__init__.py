"""
데이터 소스 계층

저장소 협력자 구현과 데모 데이터를 제공합니다.
Streamlit 세션 래퍼(session.ensure_store)는 UI 진입점에서 직접 임포트합니다.
"""

from .memory import InMemoryReleaseStore
from .sample import SAMPLE_GROUPS, SAMPLE_RELEASES, sample_store

__all__ = [
    "InMemoryReleaseStore",
    "SAMPLE_GROUPS",
    "SAMPLE_RELEASES",
    "sample_store",
]
