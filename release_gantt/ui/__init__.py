"""
UI 계층

Streamlit/Plotly에 의존하는 렌더링 코드와 도메인 예외 어댑터를 모읍니다.
"""

from .adapters import handle_domain_errors
from .charts import build_gantt_figure, render_gantt_chart

__all__ = [
    "handle_domain_errors",
    "build_gantt_figure",
    "render_gantt_chart",
]
