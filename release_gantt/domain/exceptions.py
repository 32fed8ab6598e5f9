"""
도메인 계층 예외 정의

이 모듈은 릴리스 타임라인 도메인 계층에서 발생할 수 있는
모든 예외를 정의합니다. UI 계층은 이 예외들을 잡아서
사용자 친화적인 에러 메시지로 변환합니다.

데이터 오류(잘못된 날짜, 축 밖의 항목)는 예외가 아니라
제외/폴백으로 처리되며, 여기 정의된 예외는 호출자가
입력을 고쳐 다시 렌더링해야 하는 경우에만 사용됩니다.
"""

from __future__ import annotations


class DomainError(Exception):
    """
    도메인 계층의 기본 예외 클래스.

    모든 도메인 예외는 이 클래스를 상속합니다.
    """

    pass


class ValidationError(DomainError):
    """
    호출자 입력 검증 실패 시 발생하는 예외.

    예: 알 수 없는 보기 모드, 잘못된 타입의 인자 등
    """

    pass


class InvalidGranularityError(ValidationError):
    """
    지원하지 않는 타임라인 단위가 전달되었을 때 발생하는 예외.

    데이터 오류가 아니라 프로그래밍 오류이므로 항상 호출자에게 전파됩니다.
    """

    pass


class TimelineError(DomainError):
    """
    타임라인 레이아웃 계산 실패 시 발생하는 예외.
    """

    pass


class DateOverflowError(TimelineError):
    """
    날짜 연산 결과가 표현 가능한 범위를 벗어났을 때 발생하는 예외.

    pandas의 OutOfBoundsDatetime / OverflowError를 감싸서 전달합니다.
    """

    pass


class PersistenceError(DomainError):
    """
    저장소(외부 협력자)가 변경 요청을 처리하지 못했을 때 발생하는 예외.
    """

    pass
