"""
도메인 예외 → UI 에러 메시지 어댑터

이 모듈은 도메인 계층에서 발생하는 예외를 잡아서
Streamlit 사용자 친화적인 에러 메시지로 변환합니다.

이를 통해 도메인 계층은 Streamlit에 의존하지 않으면서도
UI에서 적절한 에러 메시지를 표시할 수 있습니다.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

import streamlit as st

from release_gantt.domain.exceptions import (
    DateOverflowError,
    InvalidGranularityError,
    TimelineError,
    ValidationError,
)


@contextmanager
def handle_domain_errors() -> Generator[None, None, None]:
    """
    도메인 예외를 잡아서 Streamlit 에러 메시지로 변환하는 컨텍스트 매니저.

    Examples:
        >>> with handle_domain_errors():
        ...     layout = build_timeline_layout(releases, view_mode)

    Notes:
        - InvalidGranularityError: 알 수 없는 보기 모드
        - ValidationError: 입력 검증 실패
        - DateOverflowError: 날짜가 표현 범위를 벗어남
        - TimelineError: 타임라인 계산 실패
        - 저장 실패(PersistenceError)는 DragResizeInterpreter가 last_commit_ok=False로
          처리하므로 여기까지 올라오지 않습니다.
    """
    try:
        yield

    except InvalidGranularityError as e:
        st.error(f"❌ 지원하지 않는 보기 모드: {str(e)}")

    except ValidationError as e:
        st.error(f"❌ 입력 검증 실패: {str(e)}")

    except DateOverflowError as e:
        st.error(f"❌ 날짜 범위 초과: {str(e)}")

    except TimelineError as e:
        st.error(f"❌ 타임라인 생성 실패: {str(e)}")

    except Exception as e:
        # 예상치 못한 예외: 상세 정보와 함께 표시
        st.error(f"❌ 예상치 못한 오류가 발생했습니다: {type(e).__name__}: {str(e)}")
        st.exception(e)
