import pendulum

from puppetdashboard_health.exceptions import DateParseError

# timestamps without an embedded offset are taken as UTC
DEFAULT_TZ = "UTC"


def parse(raw):
    """Parse a dashboard timestamp (e.g. '2024-01-01T12:30:00Z') into a pendulum DateTime.

    :raises DateParseError: raw is absent, empty, not a string or not a date-time.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise DateParseError(f"unable to parse date {raw!r}: empty or not a string")
    # pendulum answers "now" with the current time
    if raw.strip().lower() == "now":
        raise DateParseError(f"unable to parse date {raw!r}: not a date-time")
    try:
        # exact keeps bare dates and times from being completed with today
        parsed = pendulum.parse(raw.strip(), tz=DEFAULT_TZ, exact=True)
    except (ValueError, TypeError) as e:
        raise DateParseError(f"unable to parse date {raw!r}: {e}") from e
    # dates, times and durations also parse
    if not isinstance(parsed, pendulum.DateTime):
        raise DateParseError(f"unable to parse date {raw!r}: not a date-time")
    return parsed


def to_epoch_seconds(ts):
    # int_timestamp drops the sub-second part
    return ts.int_timestamp


def now():
    return pendulum.now(DEFAULT_TZ)


def format(ts):
    return ts.to_iso8601_string()
