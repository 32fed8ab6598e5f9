"""
메모리 저장소 테스트

데모 데이터 시드와 날짜 업데이트 규칙을 검증합니다.
"""

from __future__ import annotations

import pandas as pd

from release_gantt.data_sources import InMemoryReleaseStore, sample_store
from release_gantt.domain import DateUpdate


def test_sample_store_is_seeded_with_demo_data() -> None:
    store = sample_store()

    assert len(store.list_releases()) == 5
    assert [group.name for group in store.list_groups()] == ["Product", "Infrastructure"]
    aws = store.get_release("aws-migration")
    assert aws.start_date == pd.Timestamp("2025-01-01")
    assert aws.group_id == "infra"
    assert aws.status == "in-progress"


def test_sample_store_returns_independent_instances() -> None:
    first = sample_store()
    first.update_item_dates(
        DateUpdate("aws-migration", pd.Timestamp("2025-02-01"), pd.Timestamp("2025-07-01"))
    )

    assert sample_store().get_release("aws-migration").start_date == pd.Timestamp("2025-01-01")


def test_update_item_dates_replaces_dates_only() -> None:
    store = sample_store()
    before = store.get_release("data-lake-v2")

    ok = store.update_item_dates(
        DateUpdate("data-lake-v2", pd.Timestamp("2025-01-25"), pd.Timestamp("2025-03-30"))
    )

    after = store.get_release("data-lake-v2")
    assert ok is True
    assert (after.start_date, after.end_date) == (pd.Timestamp("2025-01-25"), pd.Timestamp("2025-03-30"))
    assert (after.name, after.icon, after.group_id) == (before.name, before.icon, before.group_id)


def test_update_item_dates_rejects_unknown_id_and_inverted_range() -> None:
    store = sample_store()

    assert store.update_item_dates(
        DateUpdate("missing", pd.Timestamp("2025-01-01"), pd.Timestamp("2025-01-02"))
    ) is False
    assert store.update_item_dates(
        DateUpdate("data-lake-v2", pd.Timestamp("2025-05-01"), pd.Timestamp("2025-01-02"))
    ) is False
    assert store.get_release("data-lake-v2").start_date == pd.Timestamp("2025-01-15")


def test_from_records_preserves_insertion_order() -> None:
    store = InMemoryReleaseStore.from_records(
        releases=[
            {"id": "b", "startDate": "2025-02-01", "endDate": "2025-02-02"},
            {"id": "a", "startDate": "2025-01-01", "endDate": "2025-01-02"},
        ],
        groups=[],
    )

    assert [release.id for release in store.list_releases()] == ["b", "a"]
    assert store.list_groups() == []
    assert store.get_release("c") is None
