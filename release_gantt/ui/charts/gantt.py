"""
릴리스 간트 차트 렌더러

TimelineLayout을 Plotly 가로 막대 차트로 그립니다.
x축은 0-100(%) 고정이며 축 라벨은 기간 칸의 가운데에 표시됩니다.
그룹마다 헤더 행 하나와 릴리스 행들이 위에서 아래로 배치됩니다.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

import numpy as np
import plotly.graph_objects as go
import streamlit as st

from ...core.config import CONFIG
from ...domain.models import Release, ReleaseGroup
from ...domain.validation import clamp_zoom
from ...planning.timeline import GroupLane, TimelineLayout
from .colors import GRID_COLOR, TODAY_LINE_COLOR, status_color, with_alpha

logger = logging.getLogger(__name__)

ROW_HEIGHT = 34
MIN_HEIGHT = 260
# 줌 100%가 아닐 때 차트 폭의 기준 (px)
BASE_WIDTH = 1100
LANE_HEADER_TRACE = "lane-headers"


def _lane_row_key(lane: GroupLane) -> str:
    return f"lane::{lane.group_id or ''}"


def _lane_title(lane: GroupLane) -> str:
    suffix = f" ({lane.total})" if lane.collapsed else ""
    marker = "▸" if lane.collapsed else "▾"
    return f"<b>{marker} {lane.name}</b>{suffix}"


def axis_ticks(layout: TimelineLayout) -> tuple[list[float], list[str], list[float]]:
    """
    축 라벨의 x 위치와 텍스트, 기간 경계선 위치를 계산합니다.

    Returns:
        (tick 위치, tick 텍스트, 경계선 위치)
    """
    count = len(layout.axis)
    if count == 0:
        return [], [], []
    edges = np.linspace(0.0, 100.0, count + 1)
    centers = (edges[:-1] + edges[1:]) / 2.0
    texts = [f"{label.label}<br>{label.sublabel}" for label in layout.axis]
    return centers.tolist(), texts, edges[1:-1].tolist()


def chart_width(zoom: Optional[float]) -> Optional[int]:
    """
    줌 비율에 맞는 차트 폭(px)을 계산합니다.

    줌이 None이거나 기본값(100%)이면 None을 반환해 컨테이너 폭을 그대로 씁니다.
    범위를 벗어난 줌은 슬라이더 범위로 잘립니다.
    """
    if zoom is None:
        return None
    interaction = CONFIG.interaction
    zoom = clamp_zoom(
        zoom,
        min_zoom=interaction.min_zoom,
        max_zoom=interaction.max_zoom,
        step=interaction.zoom_step,
    )
    if zoom == interaction.default_zoom:
        return None
    return int(round(BASE_WIDTH * zoom / 100.0))


def build_gantt_figure(
    layout: TimelineLayout,
    releases: Iterable[Release],
    groups: Optional[Iterable[ReleaseGroup]] = None,
    *,
    zoom: Optional[float] = None,
) -> go.Figure:
    """
    레이아웃 결과로 간트 차트 Figure를 만듭니다.

    Args:
        layout: build_timeline_layout 결과
        releases: 막대 이름/상태 표시에 사용할 릴리스 목록
        groups: 레인 색상 조회용 그룹 목록 (layout.lanes에 이미 반영됨)
        zoom: 줌 비율(%). 100이 아니면 차트 폭을 BASE_WIDTH 기준으로 조정

    Returns:
        plotly Figure (x축 0-100)
    """
    by_id = {release.id: release for release in releases}
    colors = {group.id: group.color for group in groups or []}

    row_keys: list[str] = []
    row_texts: list[str] = []
    header_keys: list[str] = []
    header_colors: list[str] = []
    fig = go.Figure()

    for lane in layout.lanes:
        row_keys.append(_lane_row_key(lane))
        row_texts.append(_lane_title(lane))
        lane_color = colors.get(lane.group_id, lane.color)
        header_keys.append(row_keys[-1])
        header_colors.append(with_alpha(lane_color, 0.12))

        ids = [item_id for item_id in lane.visible_item_ids if item_id in by_id]
        if not ids:
            continue

        positions = [layout.positions[item_id] for item_id in ids]
        offsets = np.array([p.offset_percent for p in positions], dtype=float)
        widths = np.array([p.width_percent for p in positions], dtype=float)
        # 마지막 기간을 넘는 막대는 차트 오른쪽 끝에서 자름
        widths = np.minimum(widths, 100.0 - offsets)

        members = [by_id[item_id] for item_id in ids]
        row_keys.extend(ids)
        row_texts.extend(release.name or release.id for release in members)

        fig.add_bar(
            orientation="h",
            y=ids,
            x=widths.tolist(),
            base=offsets.tolist(),
            name=lane.name,
            marker=dict(
                color=with_alpha(lane_color, 0.85),
                line=dict(color=[status_color(r.status) for r in members], width=2),
            ),
            customdata=[
                [
                    release.name or release.id,
                    f"{release.start_date:%Y-%m-%d}",
                    f"{release.end_date:%Y-%m-%d}",
                    release.status,
                ]
                for release in members
            ],
            hovertemplate=(
                "%{customdata[0]}<br>%{customdata[1]} → %{customdata[2]}"
                "<br>상태: %{customdata[3]}<extra>%{fullData.name}</extra>"
            ),
        )

    if header_keys:
        # 그룹 헤더 행 배경 (막대가 없는 접힌 그룹도 행이 유지됨)
        fig.add_bar(
            orientation="h",
            y=header_keys,
            x=[100.0] * len(header_keys),
            base=[0.0] * len(header_keys),
            name=LANE_HEADER_TRACE,
            marker=dict(color=header_colors, line=dict(width=0)),
            hoverinfo="skip",
        )

    tick_vals, tick_text, boundaries = axis_ticks(layout)
    for x in boundaries:
        fig.add_shape(
            type="line",
            x0=x,
            x1=x,
            xref="x",
            y0=0,
            y1=1,
            yref="paper",
            line=dict(color=GRID_COLOR, width=1),
            layer="below",
        )

    if layout.today_visible:
        fig.add_shape(
            type="line",
            x0=layout.today_offset,
            x1=layout.today_offset,
            xref="x",
            y0=0,
            y1=1,
            yref="paper",
            line=dict(color=TODAY_LINE_COLOR, dash="dash", width=2),
        )
        fig.add_annotation(
            x=layout.today_offset,
            xref="x",
            y=0.0,
            yref="paper",
            yshift=-14,
            text="Today",
            showarrow=False,
            font=dict(color=TODAY_LINE_COLOR),
        )

    fig.update_layout(
        barmode="overlay",
        showlegend=False,
        margin=dict(l=20, r=20, t=70, b=30),
        height=max(MIN_HEIGHT, ROW_HEIGHT * (len(row_keys) + 2)),
        width=chart_width(zoom),
        xaxis=dict(
            range=[0, 100],
            side="top",
            tickmode="array",
            tickvals=tick_vals,
            ticktext=tick_text,
            showgrid=False,
            zeroline=False,
            fixedrange=True,
        ),
        yaxis=dict(
            type="category",
            categoryorder="array",
            categoryarray=row_keys,
            tickmode="array",
            tickvals=row_keys,
            ticktext=row_texts,
            autorange="reversed",
            fixedrange=True,
        ),
    )

    logger.debug(f"Gantt figure: {len(row_keys)} rows, {len(fig.data)} traces")
    return fig


def render_gantt_chart(
    layout: TimelineLayout,
    releases: Iterable[Release],
    groups: Optional[Iterable[ReleaseGroup]] = None,
    *,
    zoom: Optional[float] = None,
) -> None:
    """간트 차트를 Streamlit에 렌더링합니다. 줌이 100%가 아니면 고정 폭으로 그립니다."""

    if not layout.positions and not layout.lanes:
        st.info("표시할 릴리스가 없습니다. 기본 축만 표시합니다.")

    fig = build_gantt_figure(layout, releases, groups, zoom=zoom)
    st.plotly_chart(
        fig,
        use_container_width=fig.layout.width is None,
        config={"displaylogo": False},
    )
