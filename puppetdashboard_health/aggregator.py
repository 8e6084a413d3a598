import enum
import logging

from puppetdashboard_health import dates
from puppetdashboard_health.exceptions import UnrecognizedStatusError

logger = logging.getLogger(__name__)

# unresponsive after 4 hours
UNRESPONSIVE_THRESHOLD_SECONDS = 4 * 60 * 60

NODES_UNCHANGED = "nodes_unchanged"
NODES_FAILED = "nodes_failed"
NODES_CHANGED = "nodes_changed"
NODES_UNRESPONSIVE = "nodes_unresponsive"
NODES_PENDING = "nodes_pending"
NODES_UNREPORTED = "nodes_unreported"
NODES_ALL = "nodes_all"

# output order of the counts
FLEET_COUNT_KEYS = (
    NODES_UNCHANGED,
    NODES_FAILED,
    NODES_CHANGED,
    NODES_UNRESPONSIVE,
    NODES_PENDING,
    NODES_UNREPORTED,
    NODES_ALL,
)


class StatusBucket(enum.Enum):
    UNCHANGED = "unchanged"
    FAILED = "failed"
    CHANGED = "changed"
    PENDING = "pending"

    @property
    def count_key(self):
        return f"nodes_{self.value}"

    @classmethod
    def from_status(cls, record):
        try:
            return cls(record.status)
        except ValueError:
            raise UnrecognizedStatusError(record.name, record.status) from None


def empty_counts():
    return {key: 0 for key in FLEET_COUNT_KEYS}


def classify(record, now, unresponsive_threshold=UNRESPONSIVE_THRESHOLD_SECONDS):
    """Return the count key a single node falls into.

    A node that never reported is unreported, whatever its timestamps say.
    Otherwise a node not updated for more than unresponsive_threshold seconds
    is unresponsive, whatever its status says.

    :raises DateParseError: a reported node has an empty or bad updated_at.
    :raises UnrecognizedStatusError: status isn't one of StatusBucket.
    """
    if not record.has_reported:
        return NODES_UNREPORTED

    updated = dates.parse(record.updated_at)
    age = dates.to_epoch_seconds(now) - dates.to_epoch_seconds(updated)
    if age > unresponsive_threshold:
        return NODES_UNRESPONSIVE

    return StatusBucket.from_status(record).count_key


def aggregate(records, now, unresponsive_threshold=UNRESPONSIVE_THRESHOLD_SECONDS):
    counts = empty_counts()
    counts[NODES_ALL] = len(records)
    for record in records:
        key = classify(record, now, unresponsive_threshold)
        logger.debug("%s: %s" % (record.name, key))
        counts[key] += 1
    return counts


def fleet_count(records, now, count_key, unresponsive_threshold=UNRESPONSIVE_THRESHOLD_SECONDS):
    if count_key not in FLEET_COUNT_KEYS:
        raise ValueError(f"unknown count '{count_key}'")
    return aggregate(records, now, unresponsive_threshold)[count_key]
