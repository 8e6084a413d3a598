import json

import pendulum

from puppetdashboard_health import aggregator, formatters
from puppetdashboard_health.nodes import NodeRecord

from conftest import EPOCH_2024


def test_discovery_document(fleet):
    document = formatters.discovery_document(fleet)
    assert len(document["data"]) == len(fleet)
    assert document["data"][0] == {"{#NODE_NAME}": "web1"}
    assert formatters.discovered_node_names(document) == [r.name for r in fleet]


def test_discovery_document_round_trip(fleet):
    encoded = json.dumps(formatters.discovery_document(fleet))
    names = formatters.discovered_node_names(json.loads(encoded))
    assert set(names) == {r.name for r in fleet}


def test_discovery_document_empty():
    assert formatters.discovery_document([]) == {"data": []}


def test_count_item_key():
    assert formatters.count_item_key("nodes_unchanged") == "puppetdashboard.nodes.unchanged"
    # only the first underscore is replaced
    assert formatters.count_item_key("nodes_not_reported") == "puppetdashboard.nodes.not_reported"


def test_format_sender_lines_alignment():
    text = formatters.format_sender_lines([("a.b", 10, 1), ("a.bcd", 20, "x")])
    assert text == "- a.b    10 1\n- a.bcd  20 x"


def test_format_sender_lines_empty():
    assert formatters.format_sender_lines([]) == ""


def test_sender_lines_stale_node():
    now = pendulum.datetime(2024, 1, 1, 5)
    now_epoch = EPOCH_2024 + 5 * 3600
    records = [NodeRecord("a", "failed", updated_at="2024-01-01T00:00:00", reported_at="2024-01-01T00:00:00")]
    counts = aggregator.aggregate(records, now)
    lines = formatters.sender_lines(records, counts, now).split("\n")

    assert len(lines) == 9
    width = len("puppetdashboard.node.reported_at[a]") + 1
    assert "- " + "puppetdashboard.nodes.unresponsive".ljust(width) + f" {now_epoch} 1" in lines
    assert "- " + "puppetdashboard.nodes.failed".ljust(width) + f" {now_epoch} 0" in lines
    node_lines = [line for line in lines if "[a]" in line]
    assert node_lines == [
        "- " + "puppetdashboard.node.status[a]".ljust(width) + f" {EPOCH_2024} failed",
        f"- puppetdashboard.node.reported_at[a]  {now_epoch} {EPOCH_2024}",
    ]


def test_sender_lines_fleet(fleet, now):
    counts = aggregator.aggregate(fleet, now)
    text = formatters.sender_lines(fleet, counts, now)
    assert not text.endswith("\n")
    lines = text.split("\n")
    # 7 counts, 2 per node with reported_at (new1 has none)
    assert len(lines) == 7 + 2 * 5
    assert not any("[new1]" in line for line in lines)
    assert lines[0].startswith("- puppetdashboard.nodes.unchanged ")
    assert lines[6].startswith("- puppetdashboard.nodes.all ")
    # key column is aligned
    value_columns = {len(line.rsplit(" ", 2)[0]) for line in lines}
    assert len(value_columns) == 1


def test_sender_lines_unreported_status_with_report():
    now = pendulum.datetime(2024, 1, 1, 1)
    records = [NodeRecord("b", None, updated_at="2024-01-01T00:00:00Z", reported_at="2024-01-01T00:00:00Z")]
    counts = aggregator.aggregate(records, now)
    lines = formatters.sender_lines(records, counts, now).split("\n")
    assert lines[7].endswith(f" {EPOCH_2024} unreported")
