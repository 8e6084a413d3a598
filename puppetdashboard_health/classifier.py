import enum
import logging
from dataclasses import dataclass

from puppetdashboard_health import dates
from puppetdashboard_health.exceptions import NodeNotFoundError, NotYetReportedError

logger = logging.getLogger(__name__)

UNREPORTED = "unreported"


class FieldKind(enum.Enum):
    STATUS = "status"
    CREATED_AT = "created_at"
    REPORTED_AT = "reported_at"
    UPDATED_AT = "updated_at"

    @classmethod
    def from_command(cls, command):
        # raises ValueError for anything that isn't a node command
        return cls(command)


@dataclass(frozen=True)
class StatusResult:
    value: str
    reported: bool

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class TimestampResult:
    epoch_seconds: int

    def __str__(self):
        return str(self.epoch_seconds)


def find_node(records, name):
    for record in records:
        if record.name == name:
            return record
    raise NodeNotFoundError(name)


def lookup(records, name, field):
    """Look up one field of the node called name.

    status gives a StatusResult ('unreported' when the node never reported),
    the timestamp fields give a TimestampResult in epoch seconds.

    :raises NodeNotFoundError: no record is called name.
    :raises NotYetReportedError: the timestamp field is empty.
    :raises DateParseError: the timestamp field is not a date-time.
    """
    record = find_node(records, name)
    raw = getattr(record, field.value)
    logger.debug("%s.%s = %r" % (name, field.value, raw))

    if field is FieldKind.STATUS:
        if raw is None:
            return StatusResult(UNREPORTED, reported=False)
        return StatusResult(raw, reported=True)

    if raw is None:
        raise NotYetReportedError(name, field.value)
    return TimestampResult(dates.to_epoch_seconds(dates.parse(raw)))
