from dataclasses import dataclass
from typing import Optional

from puppetdashboard_health.exceptions import InvalidNodeRecordError, InvalidResponseError


@dataclass(frozen=True)
class NodeRecord:
    """A managed host as reported by the dashboard's nodes.json.

    status and the timestamps are None when the dashboard has no value.
    """

    name: str
    status: Optional[str] = None
    created_at: Optional[str] = None
    reported_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidNodeRecordError(f"node name must be a non-empty string, got {self.name!r}")

    @classmethod
    def from_dict(cls, node_dict):
        if not isinstance(node_dict, dict):
            raise InvalidNodeRecordError(f"node entry must be an object, got {type(node_dict).__name__}")
        # the dashboard sends many more columns, ignore them
        return cls(
            name=node_dict.get("name"),
            status=node_dict.get("status"),
            created_at=node_dict.get("created_at"),
            reported_at=node_dict.get("reported_at"),
            updated_at=node_dict.get("updated_at"),
        )

    @property
    def has_reported(self):
        return self.status is not None


def records_from_json(decoded):
    if not isinstance(decoded, list):
        raise InvalidResponseError(f"node list must be an array, got {type(decoded).__name__}")
    return [NodeRecord.from_dict(item) for item in decoded]
