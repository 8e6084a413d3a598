from puppetdashboard_health import dates
from puppetdashboard_health.classifier import UNREPORTED

KEY_PREFIX = "puppetdashboard"
DISCOVERY_MACRO = "{#NODE_NAME}"


# low-level discovery document
def discovery_document(records):
    return {"data": [{DISCOVERY_MACRO: record.name} for record in records]}


def discovered_node_names(document):
    return [item[DISCOVERY_MACRO] for item in document["data"]]


def count_item_key(count_key):
    # only the first underscore becomes a dot, e.g. nodes_all -> nodes.all
    return f"{KEY_PREFIX}.{count_key.replace('_', '.', 1)}"


def format_sender_lines(lines):
    """Render (key, clock, value) tuples as zabbix_sender input.

    The host column is '-' (taken from the agent config by zabbix_sender)
    and keys are padded to line up.
    """
    if not lines:
        return ""
    keys_max = max(len(line[0]) for line in lines)
    return "\n".join("- %-*s %d %s" % (keys_max + 1, key, clock, value) for key, clock, value in lines)


def sender_lines(records, counts, now):
    now_epoch = dates.to_epoch_seconds(now)
    lines = []

    for count_key, value in counts.items():
        lines.append((count_item_key(count_key), now_epoch, value))

    for record in records:
        if record.reported_at is None:
            continue
        report_time = dates.to_epoch_seconds(dates.parse(record.reported_at))
        status = record.status if record.status is not None else UNREPORTED
        lines.append((f"{KEY_PREFIX}.node.status[{record.name}]", report_time, status))
        lines.append((f"{KEY_PREFIX}.node.reported_at[{record.name}]", now_epoch, report_time))

    return format_sender_lines(lines)
