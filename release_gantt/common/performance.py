"""
성능 모니터링 유틸리티

레이아웃 계산처럼 렌더링마다 반복 실행되는 함수의 실행 시간을 측정하고 로깅합니다.
"""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# 렌더링 경로 기준 임계값 (초)
SLOW_THRESHOLD = 0.25
VERY_SLOW_THRESHOLD = 2.0


def _log_elapsed(name: str, elapsed: float) -> None:
    if elapsed >= VERY_SLOW_THRESHOLD:
        logger.error(f"SLOW: {name} took {elapsed:.3f}s (threshold: {VERY_SLOW_THRESHOLD}s)")
    elif elapsed >= SLOW_THRESHOLD:
        logger.warning(f"{name} took {elapsed:.3f}s (threshold: {SLOW_THRESHOLD}s)")
    else:
        logger.debug(f"{name} completed in {elapsed * 1000:.1f}ms")


def measure_time(func: F) -> F:
    """
    함수 실행 시간을 측정하고 로깅하는 데코레이터.

    레이아웃 함수는 매 렌더링마다 호출되므로 정상 범위는 DEBUG,
    0.25초 이상은 WARNING, 2초 이상은 ERROR 레벨로 기록합니다.

    Examples:
        >>> @measure_time
        ... def build_layout():
        ...     ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        start_time = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            _log_elapsed(func.__name__, time.perf_counter() - start_time)

    return wrapper  # type: ignore[return-value]


def measure_time_context(operation_name: str) -> PerformanceContext:
    """
    컨텍스트 매니저를 사용한 코드 블록 성능 측정.

    Examples:
        >>> with measure_time_context("seed store"):
        ...     store = InMemoryReleaseStore.from_records(records)
    """
    return PerformanceContext(operation_name)


class PerformanceContext:
    """
    코드 블록의 실행 시간을 측정하는 컨텍스트 매니저.

    Attributes:
        operation_name: 측정할 작업의 이름
        elapsed: 경과 시간 (초)
    """

    def __init__(self, operation_name: str) -> None:
        self.operation_name = operation_name
        self.start_time: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> PerformanceContext:
        self.start_time = time.perf_counter()
        logger.debug(f"Starting: {self.operation_name}")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.elapsed = time.perf_counter() - self.start_time
        if exc_type is not None:
            logger.error(f"{self.operation_name} failed after {self.elapsed:.3f}s")
        else:
            _log_elapsed(self.operation_name, self.elapsed)
