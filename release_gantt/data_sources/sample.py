"""Demo release data used to seed a fresh session."""

from __future__ import annotations

from .memory import InMemoryReleaseStore

SAMPLE_GROUPS = [
    {"id": "product", "name": "Product", "color": "#8B5CF6"},
    {"id": "infra", "name": "Infrastructure", "color": "#10B981"},
]

SAMPLE_RELEASES = [
    {
        "id": "data-lake-v2",
        "name": "Data Lake v2",
        "groupId": "product",
        "startDate": "2025-01-15T00:00:00.000Z",
        "endDate": "2025-03-20T00:00:00.000Z",
        "icon": "fas fa-database",
        "status": "in-progress",
    },
    {
        "id": "mobile-app-v3-1",
        "name": "Mobile App v3.1",
        "groupId": "product",
        "startDate": "2025-02-01T00:00:00.000Z",
        "endDate": "2025-04-15T00:00:00.000Z",
        "icon": "fas fa-mobile-alt",
        "status": "upcoming",
    },
    {
        "id": "analytics-dashboard",
        "name": "Analytics Dashboard",
        "groupId": "product",
        "startDate": "2025-03-10T00:00:00.000Z",
        "endDate": "2025-05-30T00:00:00.000Z",
        "icon": "fas fa-chart-line",
        "status": "upcoming",
    },
    {
        "id": "aws-migration",
        "name": "AWS Migration",
        "groupId": "infra",
        "startDate": "2025-01-01T00:00:00.000Z",
        "endDate": "2025-06-30T00:00:00.000Z",
        "icon": "fas fa-cloud",
        "status": "in-progress",
    },
    {
        "id": "cicd-pipeline-v2",
        "name": "CI/CD Pipeline v2",
        "groupId": "infra",
        "startDate": "2025-04-01T00:00:00.000Z",
        "endDate": "2025-07-15T00:00:00.000Z",
        "icon": "fas fa-cog",
        "status": "upcoming",
    },
]


def sample_store() -> InMemoryReleaseStore:
    """Return a new store seeded with the demo groups and releases."""

    return InMemoryReleaseStore.from_records(releases=SAMPLE_RELEASES, groups=SAMPLE_GROUPS)
