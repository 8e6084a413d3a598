import pendulum
import pytest

from puppetdashboard_health.nodes import NodeRecord

# 2024-01-01T00:00:00Z
EPOCH_2024 = 1704067200


@pytest.fixture
def now():
    # one hour after the fleet's last update
    return pendulum.datetime(2024, 1, 1, 1, 0, 0)


@pytest.fixture
def fleet():
    return [
        NodeRecord("web1", "unchanged", "2023-06-01T10:00:00Z", "2024-01-01T00:00:00Z", "2024-01-01T00:00:00Z"),
        NodeRecord("web2", "failed", "2023-06-01T10:00:00Z", "2024-01-01T00:10:00Z", "2024-01-01T00:10:00Z"),
        NodeRecord("db1", "changed", "2023-06-01T10:00:00Z", "2024-01-01T00:20:00Z", "2024-01-01T00:20:00Z"),
        NodeRecord("db2", "pending", "2023-06-01T10:00:00Z", "2024-01-01T00:30:00Z", "2024-01-01T00:30:00Z"),
        # stale for a day
        NodeRecord("old1", "unchanged", "2023-06-01T10:00:00Z", "2023-12-31T00:00:00Z", "2023-12-31T00:00:00Z"),
        # never reported
        NodeRecord("new1", None, "2023-12-31T23:00:00Z", None, "2023-12-31T23:00:00Z"),
    ]
