import sys
from pathlib import Path

import pandas as pd
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from release_gantt.domain import Release, ReleaseGroup, ScheduledItem  # noqa: E402


def ts(value: str) -> pd.Timestamp:
    return pd.Timestamp(value)


@pytest.fixture
def now() -> pd.Timestamp:
    """모든 테스트가 같은 "오늘"을 쓰도록 고정된 기준 시각"""
    return pd.Timestamp("2025-02-12 09:30:00")


@pytest.fixture
def months_item() -> ScheduledItem:
    """2025-01-15 ~ 2025-03-20 단일 항목"""
    return ScheduledItem("r1", ts("2025-01-15"), ts("2025-03-20"))


@pytest.fixture
def sample_groups() -> list[ReleaseGroup]:
    return [
        ReleaseGroup("product", "Product", "#8B5CF6"),
        ReleaseGroup("infra", "Infrastructure", "#10B981"),
    ]


@pytest.fixture
def sample_releases() -> list[Release]:
    """그룹 두 개, 미분류 한 개, 날짜 누락 한 개"""
    return [
        Release("data-lake", ts("2025-01-15"), ts("2025-03-20"), name="Data Lake v2", group_id="product"),
        Release("mobile", ts("2025-02-01"), ts("2025-04-15"), name="Mobile App v3.1", group_id="product"),
        Release("aws", ts("2025-01-01"), ts("2025-06-30"), name="AWS Migration", group_id="infra", status="in-progress"),
        Release("orphan", ts("2025-05-05"), ts("2025-05-20"), name="Orphan", group_id="missing"),
        Release("undated", None, ts("2025-05-20"), name="Undated", group_id="infra"),
    ]
