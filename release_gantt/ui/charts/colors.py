"""차트 색상 관리 모듈.

릴리스 상태별 색상과 색상 변환 유틸리티를 제공합니다.
"""

from __future__ import annotations

from typing import Dict, Tuple

# 상태 배지 기본 색상
STATUS_COLORS: Dict[str, str] = {
    "upcoming": "#F59E0B",
    "in-progress": "#3B82F6",
    "completed": "#22C55E",
    "delayed": "#EF4444",
}
DEFAULT_STATUS_COLOR = STATUS_COLORS["upcoming"]

TODAY_LINE_COLOR = "#EF4444"
GRID_COLOR = "#E5E7EB"


def hex_to_rgb(hx: str) -> Tuple[int, int, int]:
    """16진수 색상 코드를 RGB 튜플로 변환합니다.

    Args:
        hx: "#RRGGBB" 또는 "#RGB" 형식의 16진수 색상 코드

    Returns:
        (R, G, B) 튜플 (각 값은 0-255 범위)
    """
    hx = hx.lstrip("#")
    if len(hx) == 3:
        hx = "".join(ch * 2 for ch in hx)
    return tuple(int(hx[i : i + 2], 16) for i in (0, 2, 4))  # type: ignore


def with_alpha(hex_color: str, alpha: float) -> str:
    """색상 코드를 Plotly용 "rgba(r, g, b, a)" 문자열로 변환합니다."""

    r, g, b = hex_to_rgb(hex_color)
    a = max(0.0, min(1.0, float(alpha)))
    return f"rgba({r}, {g}, {b}, {a:.2f})"


def status_color(status: str) -> str:
    """상태 문자열에 해당하는 색상 (알 수 없으면 upcoming 색상)."""

    return STATUS_COLORS.get(str(status).strip().lower(), DEFAULT_STATUS_COLOR)
