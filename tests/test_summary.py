"""상태 표시줄 요약 테스트"""

from __future__ import annotations

from release_gantt.analytics import NO_RELEASES_LABEL, summarize_timeline
from release_gantt.data_sources import sample_store


def test_summary_for_demo_data() -> None:
    store = sample_store()

    summary = summarize_timeline(store.list_releases(), store.list_groups())

    assert summary.total_releases == 5
    assert summary.active_groups == 2
    assert summary.span_label == "Jan 2025 - Jul 2025"


def test_summary_counts_only_known_groups(sample_releases, sample_groups) -> None:
    summary = summarize_timeline(sample_releases, sample_groups[:1])

    assert summary.total_releases == 5
    assert summary.active_groups == 1
    assert summary.span_label == "Jan 2025 - Jun 2025"


def test_summary_without_releases() -> None:
    summary = summarize_timeline([], [])

    assert summary.total_releases == 0
    assert summary.active_groups == 0
    assert summary.span_label == NO_RELEASES_LABEL == "No releases"
