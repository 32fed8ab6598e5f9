"""
Release Gantt 패키지

릴리스 일정을 분기/월/주 단위 타임라인에 배치하고,
드래그/리사이즈 제스처를 날짜 변경으로 해석하는 핵심 로직입니다.
주요 구성:
- 도메인 모델과 예외 (domain)
- 축 생성 / 위치 계산 / 오늘 마커 (planning)
- 드래그/리사이즈 해석기 (interaction)
- Streamlit + Plotly UI 계층 (ui)
"""

from __future__ import annotations

__version__ = "1.0.0"
